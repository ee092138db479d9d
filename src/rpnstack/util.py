from enum import Enum


class RPNError(Exception):
    pass


class StackUnderflow(RPNError):
    '''
    Fewer values on the stack than an operation consumes.
    '''
    def __init__(self, needed, available):
        super().__init__('Less than {} element(s) on stack'.format(needed))
        self.needed = needed
        self.available = available


class Status(Enum):
    '''
    Outcome of feeding one line to a machine.

    Nothing but OK changes any state.
    '''
    OK = 'ok'
    UNKNOWN = 'unknown token'
    UNDERFLOW = 'not enough operands'
    NOTHING_TO_UNDO = 'Nothing to undo'
    NOTHING_TO_REDO = 'Nothing to redo'

    def __bool__(self):
        return self is Status.OK
