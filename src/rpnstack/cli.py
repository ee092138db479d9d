from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import math

from prompt_toolkit import PromptSession

from .util import Status
from .machine import Machine
from .lexer import Lexer


def format_value(value):
    '''
    Format a stack value for display: 10 rather than 10.0, NaN, inf, -inf.
    '''
    if math.isnan(value):
        return 'NaN'
    elif math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    elif value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_stack(values):
    '''
    Lines showing the stack top first, the top being 0.
    '''
    return ['{}: {}'.format(i, format_value(value))
            for i, value
            in enumerate(reversed(values))]


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Lines only, never the stack.
                                    history=None,
                                    rprompt=None,
                                    # Stack depth, undo/redo available.
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    # Reported on stderr only with --verbose; undo/redo always are.
    QUIET = {Status.UNKNOWN, Status.UNDERFLOW}

    def dumper(self):
        '''
        Dump every line's lexeme kind, repr and arity, without running it.
        '''
        machine = Machine()
        lexer = Lexer()
        print('[kind]\t<repr(line)>\t<arity>')
        for line in self._lines():
            groups = lexer.classify(line)
            if not groups:
                print('unknown', repr(line), '-', sep='\t')
                continue
            parsed = machine.parse(groups)
            print(*groups.keys(),
                  repr(line),
                  machine.arity(parsed),
                  sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        machine = Machine()
        self.machine = machine
        interactive = self._interactive()
        for line in self._lines():
            status = machine.process_line(line)
            if status in self.QUIET:
                if self.args.verbose:
                    print('{}: {}'.format(status.value, repr(line)),
                          file=sys.stderr)
            elif status is not Status.OK:
                print(status.value, file=sys.stderr)
            if interactive:
                self.printstack()
        if not interactive:
            self.printstack()

    def printstack(self):
        '''
        Print all elements on the stack, top of the stack first.
        '''
        for line in format_stack(self.machine.current_stack()):
            print(line)

    def toolbar(self):
        '''
        Bottom toolbar text for interactive sessions.
        '''
        # Dumping runs nothing, so there's no stack to show.
        if self.machine is None:
            return ''
        history = self.machine.history
        return 'depth: {}  undo: {}  redo: {}'.format(
            len(self.machine.stack),
            history.undo_depth if history.can_undo else '-',
            history.redo_depth if history.can_redo else '-')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _lines(self):
        '''
        Input lines, without their line terminator and nothing else stripped.
        '''
        for line in self.args.expressions:
            if line.endswith('\n'):
                line = line[:-1]
            yield line

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=self.toolbar)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.machine = None
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='report ignored lines')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='lines to run, one per argument')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
