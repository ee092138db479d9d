'''
Operation library: the calculator's vocabulary and the numeric functions
behind it.

Every function here takes and returns floats and is total: where Python's
math module would raise (domain errors, division by zero, overflow), the
IEEE-754 result (NaN, ±inf) is returned instead, as C's libm would.
'''

from collections import namedtuple
from enum import Enum
from functools import wraps
import operator
import math


class Op(Enum):
    '''
    Every command the machine understands, by its exact token.
    '''
    # Arithmetic
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'
    POW = '^'

    # Algebraic and transcendental
    NEG = 'neg'
    ABS = 'abs'
    SQRT = 'sqrt'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'
    DEG = 'deg'
    RAD = 'rad'
    RECIP = 'recip'
    LOG10 = 'log10'
    LOGN = 'logn'
    LOG2 = 'log2'
    FACTORIAL = '!'

    # Stack
    DUP = ''
    SWAP = 'swap'
    CLEAR = 'clear'
    DROP = 'drop'

    # History
    UNDO = 'undo'
    REDO = 'redo'


Operation = namedtuple('Operation', ['arity', 'function'])

# Largest value a u64 accumulator can hold, plus one.
U64 = 2 ** 64


def _total(f):
    '''
    Map math's ValueError to NaN and OverflowError to a signed infinity.
    '''
    @wraps(f)
    def wrapped(x):
        try:
            return f(x)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.copysign(math.inf, x)
    return wrapped


def _logarithm(f):
    '''
    log(0) is -inf, log of a negative is NaN.
    '''
    @wraps(f)
    def wrapped(x):
        if x == 0:
            return -math.inf
        elif x < 0:
            return math.nan
        return f(x)
    return wrapped


def _is_odd_integer(x):
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def divide(a, b):
    '''
    a / b, with x / ±0 being a signed infinity and 0 / 0 NaN.
    '''
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def remainder(a, b):
    '''
    Truncated remainder of a / b; the result has the sign of a.
    '''
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def power(base, exponent):
    '''
    base ** exponent with C pow() semantics.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Either 0 ** negative, or negative ** non-integer.
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def rpow(a, b):
    '''
    Raise the top of the stack, b, to the power of the value beneath it, a.

    2 3 ^ is therefore 9, not 8.
    '''
    return power(b, a)


def recip(x):
    return divide(1.0, x)


def _round_half_away(x):
    floor = math.floor(x)
    return floor + 1 if x - floor >= 0.5 else floor


def _to_u64(x):
    '''
    Saturating float to unsigned 64-bit conversion; NaN becomes 0.
    '''
    if math.isnan(x) or x <= 0:
        return 0
    elif math.isinf(x) or x >= U64:
        return U64 - 1
    return int(x)


def factorial(x):
    '''
    Factorial of |x| rounded to the nearest integer.

    Computed in a 64-bit accumulator that silently wraps around on overflow,
    so only 0! through 20! are exact.
    '''
    n = _to_u64(_round_half_away(abs(x)) if math.isfinite(x) else abs(x))
    # 66! is a multiple of 2**64; everything past it wraps to zero.
    if n >= 66:
        return 0.0
    result = 1
    for i in range(2, n + 1):
        result = result * i % U64
    return float(result)


BINARY = {
    Op.ADD: operator.add,
    Op.SUB: operator.sub,
    Op.MUL: operator.mul,
    Op.DIV: divide,
    Op.MOD: remainder,
    Op.POW: rpow,
}

UNARY = {
    Op.NEG: operator.neg,
    Op.ABS: abs,
    Op.SQRT: _total(math.sqrt),
    Op.SIN: _total(math.sin),
    Op.COS: _total(math.cos),
    Op.TAN: _total(math.tan),
    Op.ASIN: _total(math.asin),
    Op.ACOS: _total(math.acos),
    Op.ATAN: math.atan,
    Op.DEG: _total(math.degrees),
    Op.RAD: _total(math.radians),
    Op.RECIP: recip,
    Op.LOG10: _logarithm(math.log10),
    Op.LOGN: _logarithm(math.log),
    Op.LOG2: _logarithm(math.log2),
    Op.FACTORIAL: factorial,
}

# Numeric operators, by arity. Stack and history commands live on the
# machine itself.
OPERATIONS = dict()
for arity, namespace in (2, BINARY), (1, UNARY):
    OPERATIONS.update({op: Operation(arity, function)
                       for op, function
                       in namespace.items()})

TOKENS = {op.value: op for op in Op}
