'''
Lexer tests
'''

import regex

from infixcalc.util import LexError

from pytest import raises


def kinds(lexer, line):
    return [(lexer.kind(m), m.group(0)) for m in lexer.lex(line)]


def test_numbers_are_maximal(lexer):
    assert kinds(lexer, '12.5+.25') == [('number', '12.5'),
                                        ('operator', '+'),
                                        ('number', '.25')]


def test_malformed_number_is_one_lexeme(lexer):
    # Rejected on evaluation, not here.
    assert kinds(lexer, '1.2.3') == [('number', '1.2.3')]


def test_parentheses_and_space(lexer):
    assert kinds(lexer, '( 3 )*2') == [('lparen', '('),
                                       ('space', ' '),
                                       ('number', '3'),
                                       ('space', ' '),
                                       ('rparen', ')'),
                                       ('operator', '*'),
                                       ('number', '2')]


def test_isfeedable(lexer):
    feedable = [lexer.isfeedable(m) for m in lexer.lex('1 \t-2')]
    assert feedable == [True, False, True, True]


def test_unknown_character(lexer):
    with raises(LexError,
                match=regex.escape("Unknown character 'a' in equation")):
        list(lexer.lex('1+2*3-4/5+6*7-8/9+*a'))


def test_unknown_character_is_first_bad_one(lexer):
    with raises(LexError,
                match=regex.escape("Unknown character '^' in equation")):
        list(lexer.lex('2^3x'))


def test_empty(lexer):
    assert list(lexer.lex('')) == []


def test_tabs_and_newlines_are_space(lexer):
    assert kinds(lexer, '1\t+\n 2') == [('number', '1'),
                                         ('space', '\t'),
                                         ('operator', '+'),
                                         ('space', '\n '),
                                         ('number', '2')]
