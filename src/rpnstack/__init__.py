'''
RPN calculator with undo/redo.

Keeps a stack of floats, and applies arithmetic, transcendental and stack
manipulation commands to it, one input line at a time. Every change to the
stack can be undone and redone.

Each line is either a number (1, -2.5, .5, 1e3, inf, nan) or exactly one
command:

- arithmetic: + - * / % ^
- functions: neg abs sqrt sin cos tan asin acos atan deg rad recip log10
  logn log2 !
- stack: an empty line duplicates the top, swap, drop, clear
- history: undo redo

Anything else is ignored. Numeric errors don't stop the calculator; they
give NaN or an infinity, as floating point does.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .util import RPNError, Status


__all__ = 'Machine', 'Lexer', 'CLI', 'RPNError', 'Status'
