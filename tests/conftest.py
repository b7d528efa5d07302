from pytest import fixture

from infixcalc.calculator import Calculator
from infixcalc.lexer import Lexer


@fixture
def lexer():
    return Lexer()


@fixture
def calculator():
    return Calculator()


@fixture
def state_file(tmp_path):
    '''
    Session file that doesn't exist yet.
    '''
    return str(tmp_path / 'state.json')
