from functools import reduce
import operator

import regex

from .tokens import OPERATORS
from .util import LexError


class Lexer:
    '''
    Lexer for infix equations.

    For consistency with the rest of the package, needs to be instantiated,
    despite holding no internal state.
    '''
    # Digits and decimal points, as typed. Whether they make a well-formed
    # number is decided on evaluation: 1.2.3 is a single lexeme.
    NUMBER = r'[0-9.]+'

    assert not [symbol
                for symbol
                in OPERATORS
                if len(symbol) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    LPAREN = r'\('
    RPAREN = r'\)'
    SPACE = r'\s+'

    # All possible lexemes. Groups don't nest, so lastgroup names the kind.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<lparen>' + LPAREN + r')|' \
             r'(?<rparen>' + RPAREN + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, left to right.

        Raises LexError on the first character that starts no lexeme.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                raise LexError(
                    "Unknown character '{}' in equation".format(line[0]))
            yield match
            line = line[len(match.group(0)):]

    def isfeedable(self, match):
        '''
        Return True if lexeme means anything to the converter.
        '''
        return self.kind(match) != 'space'

    def kind(self, match):
        '''
        Return the name of the group the lexeme matched.
        '''
        return match.lastgroup
