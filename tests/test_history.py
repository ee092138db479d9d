'''
Stack and undo/redo history tests
'''

from rpnstack.util import StackUnderflow
from rpnstack.stack import Stack
from rpnstack.history import History

from pytest import raises


def test_pop_and_peek_empty():
    s = Stack()
    assert s.pop() is None
    assert s.peek() is None
    assert len(s) == 0


def test_popn_is_topmost_first():
    s = Stack([1.0, 2.0, 3.0])
    assert s.popn(2) == [3.0, 2.0]
    assert list(s) == [1.0]


def test_popn_underflow_pops_nothing():
    s = Stack([1.0])
    with raises(StackUnderflow, match='Less than 2 element'):
        s.popn(2)
    assert list(s) == [1.0]


def test_snapshot_is_detached():
    s = Stack([1.0, 2.0])
    snapshot = s.snapshot()
    s.push(3.0)
    assert snapshot == (1.0, 2.0)
    s.restore(snapshot)
    assert s.snapshot() == (1.0, 2.0)


def test_mutation_records_before_and_clears_redo():
    s = Stack([1.0])
    h = History()
    h.redos.append((5.0,))
    with h.mutation(s):
        s.push(2.0)
    assert h.undos == [(1.0,)]
    assert h.redos == []


def test_failed_mutation_records_nothing():
    s = Stack([1.0])
    h = History()
    h.redos.append((5.0,))
    with raises(StackUnderflow):
        with h.mutation(s):
            s.popn(2)
    assert h.undos == []
    assert h.redos == [(5.0,)]


def test_undo_redo_move_snapshots():
    s = Stack()
    h = History()
    with h.mutation(s):
        s.push(1.0)
    assert h.undo(s)
    assert list(s) == []
    assert h.undos == [] and h.redos == [(1.0,)]
    assert h.redo(s)
    assert list(s) == [1.0]
    assert h.undos == [()] and h.redos == []


def test_nothing_to_undo_or_redo():
    s = Stack([1.0])
    h = History()
    assert not h.can_undo and not h.can_redo
    assert not h.undo(s)
    assert not h.redo(s)
    assert list(s) == [1.0]
    assert h.undos == [] and h.redos == []


def test_mutation_restores_stack_if_body_raises():
    s = Stack([1.0, 2.0])
    h = History()
    with raises(ValueError):
        with h.mutation(s):
            s.popn(2)
            raise ValueError
    assert list(s) == [1.0, 2.0]
    assert h.undo_depth == 0 and h.redo_depth == 0
