'''
Command line tests
'''

from infixcalc.cli import CLI, InteractiveInput
from infixcalc.lexer import Lexer


def run(*args):
    return CLI().run(args=list(args))


def test_expressions(capsys):
    assert run('--no-state', '-e', '1+2', '1+2*3-4/5') == 0
    out, err = capsys.readouterr()
    assert out == '3\n6.2\n'
    assert err == ''


def test_rpn(capsys):
    assert run('--no-state', '-r', '-e', '1+2*3') == 0
    assert capsys.readouterr().out == '1 2 3 * +\n'


def test_errors_go_to_stderr(capsys):
    assert run('--no-state', '-e', '1/0', '2*2') == 1
    out, err = capsys.readouterr()
    assert out == '4\n'
    assert 'Cannot divide by zero' in err


def test_history_persists(capsys, state_file):
    assert run('-s', state_file, '-e', '1+2', '2*3') == 0
    capsys.readouterr()
    assert run('-s', state_file, '-H') == 0
    assert capsys.readouterr().out == '2*3 = 6\n1+2 = 3\n'


def test_clear_history(capsys, state_file):
    run('-s', state_file, '-e', '1+2')
    assert run('-s', state_file, '--clear-history') == 0
    capsys.readouterr()
    run('-s', state_file, '-H')
    assert capsys.readouterr().out == ''


def test_bad_state_file(capsys, state_file):
    with open(state_file, 'w') as fp:
        fp.write('[')
    assert run('-s', state_file, '-e', '1+2') == 1
    assert 'Cannot load state from' in capsys.readouterr().err


def test_dump(capsys):
    assert run('--no-state', '-D', '-e', '1 +2') == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["number\t'1'",
                       "space\t' '",
                       "operator\t'+'",
                       "number\t'2'",
                       "rpn\t'1 2 +'"]


def test_raw_grammar(capsys):
    assert run('-G') == 0
    assert capsys.readouterr().out == Lexer.LEXEME + '\n'


def prompting_input(*args):
    cli = CLI()
    cli.args = cli.argument_parser.parse_args(list(args))
    return cli._prompting_input()


def test_prompt_history_beside_state_file(tmp_path):
    state_file = str(tmp_path / 'work.json')
    lines = prompting_input('-s', state_file, '-p')
    assert isinstance(lines, InteractiveInput)
    assert lines.prompt == CLI.DEFAULT_PROMPT
    assert lines.history.filename == str(tmp_path / 'work_history')


def test_prompt_without_state_keeps_no_history():
    lines = prompting_input('--no-state', '-p', '$ ')
    assert lines.prompt == '$ '
    assert lines.history is None
