'''
Infix calculator.

Takes plain arithmetic as you'd type it on a pocket calculator, with + - * /,
parentheses and signed decimals, converts it to RPN with the shunting-yard
algorithm and runs it on a small stack machine, in single precision.

Two entry points:

- compute: the value of an equation.
- to_rpn_text: the RPN form of an equation, for display.

Both raise CalcError subclasses whose message is fit to show to the user.
'''

import numpy

from .converter import Converter, convert
from .evaluator import Evaluator, evaluate, parse_rpn
from .lexer import Lexer
from .util import (CalcError, LexError, ParenthesisError, EvaluationError,
                   DivisionByZeroError, StateError)


def compute(equation):
    '''
    Return the value of an infix equation, as a numpy.float32.
    '''
    return evaluate(convert(equation))


def to_rpn_text(equation):
    '''
    Return the RPN form of an infix equation, tokens separated by spaces.

    Does not evaluate.
    '''
    return ' '.join(map(str, convert(equation)))


def format_result(value):
    '''
    Format a value as the shortest decimal that reads back to it.

    7, not 7.0, and never in scientific notation, so the text is again a
    valid equation.
    '''
    return numpy.format_float_positional(numpy.float32(value), trim='-')


__all__ = ('compute', 'to_rpn_text', 'format_result',
           'Lexer', 'Converter', 'Evaluator',
           'convert', 'evaluate', 'parse_rpn',
           'CalcError', 'LexError', 'ParenthesisError', 'EvaluationError',
           'DivisionByZeroError', 'StateError')
