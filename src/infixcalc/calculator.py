'''
Calculator session: what a calculator window shows and remembers.

Display text, the last error and the history of results, driven by button
presses, and kept across runs as JSON. Front ends (the CLI, or a GUI) render
this state; the arithmetic is all in compute and to_rpn_text.
'''

from collections import namedtuple
from os import path
import json

from . import compute, to_rpn_text, format_result
from .util import CalcError, StateError, wrap_user_errors


HistoryEntry = namedtuple('HistoryEntry', 'expression result')


def _value_text(equation):
    return format_result(compute(equation))


class Calculator:
    '''
    State of one calculator, and what its buttons do to it.
    '''

    BUTTONS = (
        ('1', '2', '3', '+'),
        ('4', '5', '6', '-'),
        ('7', '8', '9', '*'),
        ('C', '0', '=', '/'),
        ('RPN', '.', '(', ')'),
    )
    ERROR_MARKER = '\N{NO ENTRY SIGN}'

    def __init__(self, display_text='', error_msg=None, history=None):
        self.display_text = display_text
        self.error_msg = error_msg
        self.history = list(history or [])

    def press(self, label):
        '''
        Press a button.

        Return whether = or RPN succeeded, None for other buttons.
        '''
        if label == 'C':
            self.display_text = ''
        elif label == '=':
            return self.show_result(_value_text)
        elif label == 'RPN':
            return self.show_result(to_rpn_text)
        else:
            self.display_text += label

    def show_result(self, f):
        '''
        Replace the display with f(display), recording it in history.

        On failure, keep the display and set the error message instead.
        '''
        try:
            result = f(self.display_text)
        except CalcError as e:
            self.error_msg = '{} {}'.format(self.ERROR_MARKER, e.args[0])
            return False
        self.history.append(HistoryEntry(self.display_text, result))
        self.display_text = result
        self.error_msg = None
        return True

    def entries(self):
        '''
        History, newest first.
        '''
        return list(reversed(self.history))

    def clear_history(self):
        self.history.clear()

    def recall(self, index, field='result'):
        '''
        Copy an entry's expression or result, newest first, to the display.
        '''
        if field not in HistoryEntry._fields:
            raise ValueError('No such field {}'.format(repr(field)))
        self.display_text = getattr(self.entries()[index], field)

    def todict(self):
        return {
            'display_text': self.display_text,
            'error_msg': self.error_msg,
            'history': [entry._asdict() for entry in self.history],
        }

    @wrap_user_errors('Cannot save state to {1}', error=StateError)
    def save(self, filename):
        with open(filename, 'w', encoding='utf-8') as fp:
            json.dump(self.todict(), fp, ensure_ascii=False, indent=1)

    @classmethod
    @wrap_user_errors('Cannot load state from {1}', error=StateError)
    def load(cls, filename):
        '''
        Load a saved session, or a fresh one if there's none yet.

        Keys missing from the file take their defaults.
        '''
        if not path.exists(filename):
            return cls()
        with open(filename, encoding='utf-8') as fp:
            state = json.load(fp)
        return cls(display_text=state.get('display_text') or '',
                   error_msg=state.get('error_msg'),
                   history=[HistoryEntry(entry['expression'],
                                         entry['result'])
                            for entry
                            in state.get('history', [])])
