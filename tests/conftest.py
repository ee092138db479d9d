from pytest import fixture

from rpnstack.machine import Machine


@fixture
def machine():
    return Machine()


@fixture
def run(machine):
    '''
    Feed lines to a fresh machine, returning the resulting stack as a list.
    '''
    def run(*lines):
        for line in lines:
            machine.process_line(line)
        return list(machine.current_stack())
    return run


@fixture
def state(machine):
    '''
    Everything a line may change, for before/after comparison.
    '''
    def state():
        return (machine.current_stack(),
                list(machine.history.undos),
                list(machine.history.redos))
    return state
