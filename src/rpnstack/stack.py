from collections import deque

from .util import StackUnderflow


class Stack:
    '''
    Operand stack of floats, top of the stack on the right.
    '''

    def __init__(self, values=()):
        self.values = deque(values)

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self.values))

    def push(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.values.extend(new)

    def pop(self):
        '''
        Pop the top of the stack, or None if empty.
        '''
        if not self.values:
            return None
        return self.values.pop()

    def peek(self):
        '''
        Return the top of the stack without removing it, or None if empty.
        '''
        if not self.values:
            return None
        return self.values[-1]

    def require(self, n):
        '''
        Raise StackUnderflow unless at least n elements are on the stack.
        '''
        if len(self.values) < n:
            raise StackUnderflow(n, len(self.values))

    def popn(self, n=1):
        '''
        Pop specified number of elements from stack, topmost first.

        Pops nothing if there aren't enough.
        '''
        self.require(n)
        return [self.values.pop() for _ in range(n)]

    def clear(self):
        self.values.clear()

    def snapshot(self):
        '''
        Immutable copy of the whole stack, bottom first.
        '''
        return tuple(self.values)

    def restore(self, snapshot):
        '''
        Replace the stack's contents with a snapshot.
        '''
        self.values = deque(snapshot)
