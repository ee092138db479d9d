from functools import partial

from .util import RPNError, StackUnderflow, Status
from .lexer import Lexer
from .operations import Op, OPERATIONS, TOKENS
from .stack import Stack
from .history import History


class Machine:
    '''
    Arithmetic stack machine (RPN calculator) with undo/redo.

    Takes whole input lines and runs them. Never raises on bad input: the
    outcome of every line is reported as a Status, and anything but
    Status.OK leaves the stack and history exactly as they were.
    '''

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = Stack()
        self.history = History()
        self.lexer = Lexer()

    def process_line(self, text):
        '''
        Resolve a completed input line to one action and run it.
        '''
        groups = self.lexer.classify(text)
        try:
            return self.feed(groups)
        except StackUnderflow:
            return Status.UNDERFLOW
        except RPNError:
            return Status.UNKNOWN

    def current_stack(self):
        '''
        Stack contents, most recently pushed last.
        '''
        return self.stack.snapshot()

    def feed(self, groups):
        '''
        Stack or run a lexeme on the machine.

        :param groups: lexeme kinds as returned by Lexer.classify().
        '''
        parsed = self.parse(groups)
        if isinstance(parsed, float):
            self.pshstack(parsed)
            return Status.OK
        return self._apply(parsed)

    def parse(self, groups):
        '''
        Parse lexeme into a number or an Op.
        '''
        if 'number' in groups:
            return float(groups['number'])
        elif 'command' in groups:
            return TOKENS[groups['command']]
        raise RPNError('Nothing to parse')

    def arity(self, parsed):
        '''
        Number of stack values a parsed lexeme consumes.
        '''
        if parsed in OPERATIONS:
            return OPERATIONS[parsed].arity
        elif parsed in type(self).COMMANDS:
            return type(self).COMMANDS[parsed][0]
        return 0

    def _apply(self, op):
        '''
        Apply an Op to the stack, popping arguments as needed.

        Does the real work.
        '''
        if op is Op.UNDO:
            if not self.history.undo(self.stack):
                return Status.NOTHING_TO_UNDO
            return Status.OK
        elif op is Op.REDO:
            if not self.history.redo(self.stack):
                return Status.NOTHING_TO_REDO
            return Status.OK

        if op in OPERATIONS:
            arity, function = OPERATIONS[op]
        else:
            arity, method = type(self).COMMANDS[op]
            function = partial(method, self)
        # Checked before recording anything, so that a short stack is a
        # strict no-op, history included.
        self.stack.require(arity)
        with self.history.mutation(self.stack):
            # If you don't reverse, you'll do 4 - 10 when you say 10 4 -
            # instead of 10 - 4.
            args = reversed(self.stack.popn(arity))
            res = function(*args)
            if res is not None:
                self.stack.push(res)
        return Status.OK

    def pshstack(self, value):
        '''
        Push a number onto the stack.
        '''
        with self.history.mutation(self.stack):
            self.stack.push(value)

    def dupstack(self, top):
        '''
        Duplicate element at top of stack.
        '''
        self.stack.push(top, top)

    def revstack(self, a, b):
        '''
        Swap two elements at top of stack.
        '''
        self.stack.push(b, a)

    def dropstack(self, top):
        '''
        Discard the element at top of stack.
        '''

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    # Stack manipulation commands and their arity. Like the numeric
    # operations, they get their operands already popped, and push back
    # whatever they keep.
    COMMANDS = {
        Op.DUP: (1, dupstack),
        Op.SWAP: (2, revstack),
        Op.DROP: (1, dropstack),
        Op.CLEAR: (0, clrstack),
    }
