'''
Postfix evaluation in single precision.
'''

from fractions import Fraction

import numpy
import regex

from .tokens import Number, Operator, OPERATORS
from .util import (LexError, EvaluationError, DivisionByZeroError,
                   wrap_user_errors)


# Signed literal, as the converter emits them.
NUMBER = regex.compile(r'[+-]*[0-9.]+')


class Evaluator:
    '''
    Stack machine running RPN tokens.

    Every call gets its own value stack.
    '''

    def evaluate(self, tokens):
        '''
        Run tokens and return the single value left, as a numpy.float32.
        '''
        stack = []
        # Overflow to inf is a valid float32 result, not a warning.
        with numpy.errstate(over='ignore', invalid='ignore'):
            for token in tokens:
                if isinstance(token, Number):
                    stack.append(self._iconvert(token.text))
                elif isinstance(token, Operator):
                    stack.append(self._apply(token, stack))
        if len(stack) != 1:
            raise EvaluationError('Wrong expression')
        return stack[0]

    def _apply(self, operator, stack):
        if len(stack) < 2:
            raise EvaluationError('Wrong expression')
        # Pushed first, operated on first.
        b = stack.pop()
        a = stack.pop()
        if operator.symbol == '/' and b == 0:
            raise DivisionByZeroError('Cannot divide by zero')
        return numpy.float32(operator.function(a, b))

    @wrap_user_errors("Cannot convert '{1}'", error=EvaluationError)
    def _iconvert(self, text):
        '''
        Convert a literal to the nearest float32, rounding once.

        numpy parses by way of a float64, which rounds twice and can land one
        step off just past a halfway point, so settle between the neighbours
        against the exact value. Ties go to the even one.
        '''
        nearest = numpy.float32(text)
        if not numpy.isfinite(nearest):
            return nearest
        exact = Fraction(text)
        candidates = [candidate
                      for candidate
                      in (numpy.nextafter(nearest, numpy.float32(-numpy.inf)),
                          nearest,
                          numpy.nextafter(nearest, numpy.float32(numpy.inf)))
                      if numpy.isfinite(candidate)]
        return min(candidates,
                   key=lambda candidate: (
                       abs(Fraction(float(candidate)) - exact),
                       int(candidate.view(numpy.uint32)) & 1))


def evaluate(tokens):
    '''
    Evaluate RPN tokens.
    '''
    return Evaluator().evaluate(tokens)


def parse_rpn(text):
    '''
    Turn space separated RPN text back into tokens.

    Words are operator symbols or signed number literals.
    '''
    tokens = []
    for word in text.split():
        if word in OPERATORS:
            tokens.append(OPERATORS[word])
        elif NUMBER.fullmatch(word):
            tokens.append(Number(word))
        else:
            raise LexError("Unknown token '{}' in expression".format(word))
    return tokens
