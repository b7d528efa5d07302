from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from . import to_rpn_text
from .calculator import Calculator
from .lexer import Lexer
from .util import CalcError


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    STATE_FILE = '~/.infixcalc.json'

    def dumper(self):
        '''
        Dump all lexemes, then the RPN they convert to.
        '''
        lexer = Lexer()
        print('<group>\t<repr(lexeme)>')
        failed = False
        for line in self.args.expressions:
            line = line.strip()
            try:
                for match in lexer.lex(line):
                    print(lexer.kind(match), repr(match.group(0)), sep='\t')
                print('rpn', repr(to_rpn_text(line)), sep='\t')
            except CalcError as e:
                print(e.args[0], file=sys.stderr)
                failed = True
        return int(failed)

    def executor(self):
        '''
        Compute each line, or show its RPN, through a calculator session.
        '''
        calculator = self._load()
        button = 'RPN' if self.args.rpn else '='
        failed = False
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            calculator.display_text = line
            if calculator.press(button):
                logger.debug('%r -> %r', line, calculator.display_text)
                print(calculator.display_text, flush=True)
            else:
                logger.debug('%r failed', line)
                print(calculator.error_msg, file=sys.stderr, flush=True)
                failed = True
        self._save(calculator)
        return int(failed)

    def history_printer(self):
        '''
        Print the saved history, newest first.
        '''
        for entry in self._load().entries():
            print('{} = {}'.format(entry.expression, entry.result))
        return 0

    def history_clearer(self):
        '''
        Forget the saved history.
        '''
        calculator = self._load()
        calculator.clear_history()
        self._save(calculator)
        return 0

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)
        return 0

    def _state_file(self):
        if self.args.state is None:
            return None
        return path.expanduser(self.args.state)

    def _history_file(self, filename):
        '''
        Prompt history kept beside the session file it goes with.
        '''
        return path.splitext(filename)[0] + '_history'

    def _load(self):
        filename = self._state_file()
        if filename is None:
            return Calculator()
        return Calculator.load(filename)

    def _save(self, calculator):
        filename = self._state_file()
        if filename is not None:
            calculator.save(filename)

    def _prompting_input(self):
        '''
        Return where lines come from: an interactive prompt, or plain stdin.

        Prompts if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Prompt history is only kept on disk along with the session.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            history = None
            filename = self._state_file()
            if filename is not None:
                history = FileHistory(self._history_file(filename))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-r', '--rpn',
                                          action='store_true',
                                          help='show RPN instead of values')
        state_groups = self.argument_parser.add_mutually_exclusive_group()
        state_groups.add_argument('-s', '--state',
                                  metavar='FILE',
                                  help='session file, default {}'.format(
                                      self.STATE_FILE))
        state_groups.add_argument('--no-state',
                                  action='store_const',
                                  const=None,
                                  dest='state')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-H', '--history',
                                       self.history_printer)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        main_groups.add_argument('--clear-history',
                                 action='store_const',
                                 const=self.history_clearer,
                                 dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin,
                                          state=self.STATE_FILE)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(stream=sys.stderr,
                            format='%(name)s: %(message)s',
                            level=(logging.DEBUG if self.args.verbose
                                   else logging.WARNING))
        if self.args.expressions is sys.stdin and \
           self.args.action in (self.executor, self.dumper):
            self.args.expressions = self._prompting_input()
        try:
            return self.args.action()
        except CalcError as e:
            print(e.args[0], file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            return 1
