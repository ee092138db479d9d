from contextlib import contextmanager


class History:
    '''
    Linear undo/redo history of whole-stack snapshots.

    Snapshots are tuples, most recent last in both sequences. Every action
    that changes the stack goes through mutation(); undo() and redo() only
    ever move a snapshot from one sequence to the other.
    '''

    def __init__(self):
        self.undos = []
        self.redos = []

    @property
    def can_undo(self):
        return bool(self.undos)

    @property
    def can_redo(self):
        return bool(self.redos)

    @property
    def undo_depth(self):
        return len(self.undos)

    @property
    def redo_depth(self):
        return len(self.redos)

    @contextmanager
    def mutation(self, stack):
        '''
        Record the stack as it is before the body changes it.

        If the body raises, the stack is put back as it was and nothing is
        recorded.
        '''
        before = stack.snapshot()
        try:
            yield stack
        except BaseException:
            stack.restore(before)
            raise
        self.undos.append(before)
        self.redos.clear()

    def undo(self, stack):
        '''
        Restore the stack to before the last mutation.

        Return False, changing nothing, if there is nothing to undo.
        '''
        return self._move(stack, self.undos, self.redos)

    def redo(self, stack):
        '''
        Reapply the last undone mutation.

        Return False, changing nothing, if there is nothing to redo.
        '''
        return self._move(stack, self.redos, self.undos)

    def _move(self, stack, source, destination):
        if not source:
            return False
        snapshot = source.pop()
        destination.append(stack.snapshot())
        stack.restore(snapshot)
        return True
