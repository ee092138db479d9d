'''
Command line interface tests
'''

import math

from rpnstack.cli import CLI, format_value, format_stack

from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from pytest import raises


def test_format_value():
    assert format_value(10.0) == '10'
    assert format_value(-3.0) == '-3'
    assert format_value(105.678) == '105.678'
    assert format_value(1e20) == '1e+20'
    assert format_value(math.nan) == 'NaN'
    assert format_value(math.inf) == 'inf'
    assert format_value(-math.inf) == '-inf'


def test_format_stack_top_first():
    assert format_stack((1.0, 2.5, 3.0)) == ['0: 3', '1: 2.5', '2: 1']
    assert format_stack(()) == []


def test_expressions(capsys):
    CLI().run(args=['-e', '2', '3', '^', '10'])
    out, err = capsys.readouterr()
    assert out == '0: 10\n1: 9\n'
    assert err == ''


def test_empty_expression_duplicates(capsys):
    CLI().run(args=['-e', '7', ''])
    out, _ = capsys.readouterr()
    assert out == '0: 7\n1: 7\n'


def test_nothing_to_undo(capsys):
    CLI().run(args=['-e', 'undo', 'redo'])
    out, err = capsys.readouterr()
    assert out == ''
    assert err == 'Nothing to undo\nNothing to redo\n'


def test_ignored_lines_are_quiet(capsys):
    CLI().run(args=['-e', 'foo', '+'])
    out, err = capsys.readouterr()
    assert out == ''
    assert err == ''


def test_verbose(capsys):
    CLI().run(args=['-v', '-e', 'foo', '+'])
    _, err = capsys.readouterr()
    assert err == "unknown token: 'foo'\nnot enough operands: '+'\n"


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '1.5', '+', '', 'sqrt', 'clear', 'x'])
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['[kind]\t<repr(line)>\t<arity>',
                                "number\t'1.5'\t0",
                                "command\t'+'\t2",
                                "command\t''\t1",
                                "command\t'sqrt'\t1",
                                "command\t'clear'\t0",
                                "unknown\t'x'\t-"]


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    out, _ = capsys.readouterr()
    assert '(?<number>' in out
    assert '(?<command>' in out


def test_bad_option():
    with raises(SystemExit):
        CLI().run(args=['--no-such-option'])


def run_interactive(args, text):
    '''
    Run the CLI on typed-in text, ending the session with ^D.
    '''
    with create_pipe_input() as keyboard:
        keyboard.send_text(text + '\x04')
        with create_app_session(input=keyboard, output=DummyOutput()):
            cli = CLI()
            cli.run(args=args)
    return cli


def test_interactive(capsys):
    cli = run_interactive(['-p'], '2\r3\r^\r')
    out, _ = capsys.readouterr()
    # The stack is shown after every line.
    assert out == '0: 2\n0: 3\n1: 2\n0: 9\n'
    assert cli.toolbar() == 'depth: 1  undo: 3  redo: -'


def test_interactive_dump(capsys):
    cli = run_interactive(['-D', '-p'], '1.5\r')
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['[kind]\t<repr(line)>\t<arity>',
                                "number\t'1.5'\t0"]
    assert cli.toolbar() == ''


def test_toolbar_after_undo():
    cli = CLI()
    cli.run(args=['-e', '1', '2', 'undo'])
    assert cli.toolbar() == 'depth: 1  undo: 1  redo: 1'
