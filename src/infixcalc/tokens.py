'''
Tokens of the RPN output, and the converter's scan state.
'''

from collections import namedtuple
from enum import Enum
import operator


class Expect(Enum):
    '''
    What the converter expects next while scanning left to right.

    A + or - seen while expecting an operand is a sign, not an operator.
    '''
    OPERAND = 'operand'
    OPERATOR = 'operator'


class _Token:
    '''
    Tokens of different kinds never compare equal, whatever their text.
    '''
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__


class Number(_Token, namedtuple('Number', 'text')):
    '''
    Signed decimal literal, kept as typed until evaluation.
    '''
    __slots__ = ()

    def __str__(self):
        return self.text


class Operator(_Token, namedtuple('Operator', 'symbol')):
    '''
    Left-associative binary operator.
    '''
    __slots__ = ()

    # Symbol to the function applied to (a, b), a pushed first.
    FUNCTIONS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': operator.__truediv__,
    }
    PRECEDENCE = {
        '+': 1,
        '-': 1,
        '*': 2,
        '/': 2,
    }

    @property
    def precedence(self):
        return type(self).PRECEDENCE[self.symbol]

    @property
    def function(self):
        return type(self).FUNCTIONS[self.symbol]

    def __str__(self):
        return self.symbol


OPERATORS = {symbol: Operator(symbol) for symbol in Operator.FUNCTIONS}
