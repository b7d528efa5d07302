'''
Infix to RPN conversion, by the shunting-yard algorithm.

https://en.wikipedia.org/wiki/Shunting-yard_algorithm
'''

from .lexer import Lexer
from .tokens import Expect, Number, OPERATORS
from .util import ParenthesisError


# Marker for an open parenthesis on the operator stack. Never output.
LPAREN = '('
SIGNS = '+-'


def issign(symbol, expect):
    '''
    Return True if an operator symbol is really the sign of a number.

    That is, + or - where an operand is expected: at the start, after (, or
    after another operator or sign.
    '''
    return symbol in SIGNS and expect is Expect.OPERAND


class Converter:
    '''
    Converts infix equations to lists of RPN tokens.

    Holds no state between calls; stacks and buffers are local to convert.
    '''

    def __init__(self, lexer=None):
        self.lexer = lexer or Lexer()

    def convert(self, equation):
        '''
        Return the RPN tokens of equation, in evaluation order.

        Raises LexError on unknown characters and ParenthesisError on
        unbalanced parentheses. Anything else malformed (trailing operators,
        empty input, signs without digits) is left for evaluation to reject.
        '''
        output = []
        operators = []
        # Digits, and any signs typed before them
        number = ''
        expect = Expect.OPERAND
        for match in self.lexer.lex(equation):
            kind = self.lexer.kind(match)
            text = match.group(0)
            if kind == 'number':
                number += text
                expect = Expect.OPERATOR
                continue
            if kind == 'operator' and issign(text, expect):
                number += text
                continue
            if number:
                output.append(Number(number))
                number = ''
            if not self.lexer.isfeedable(match):
                continue
            if kind == 'lparen':
                operators.append(LPAREN)
                expect = Expect.OPERAND
            elif kind == 'rparen':
                self._close(operators, output)
                expect = Expect.OPERATOR
            elif kind == 'operator':
                self._push(OPERATORS[text], operators, output)
                expect = Expect.OPERAND
        if number:
            output.append(Number(number))
        while operators:
            top = operators.pop()
            if top is LPAREN:
                raise ParenthesisError('Unbalanced parentheses')
            output.append(top)
        return output

    def _push(self, new, operators, output):
        '''
        Output stacked operators binding at least as tight as new, then stack
        new.

        All operators are left-associative, so equal precedence drains.
        '''
        while (operators and operators[-1] is not LPAREN and
               operators[-1].precedence >= new.precedence):
            output.append(operators.pop())
        operators.append(new)

    def _close(self, operators, output):
        '''
        Output stacked operators up to and discarding the matching (.
        '''
        while operators:
            top = operators.pop()
            if top is LPAREN:
                return
            output.append(top)
        raise ParenthesisError('Unbalanced parentheses')


def convert(equation):
    '''
    Return the RPN tokens of an infix equation.
    '''
    return Converter().convert(equation)
