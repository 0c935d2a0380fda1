from os import isatty, path
from sys import exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import sys
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalculatorError, wrap_user_errors
from .machine import Calculator
from .lexer import Lexer
from . import combinators


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the lazy calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.lazycalc_history'

    def _calculator(self):
        calculator = Calculator()
        if self.args.extended:
            combinators.install(calculator)
        return calculator

    @wrap_user_errors('Cannot evaluate {2!r}')
    def _evaluate(self, calculator, expression):
        # Also catches faults raised from within operators, e.g. 0 division.
        return calculator.calculate(expression)

    def dumper(self):
        '''
        Dump every token, what it is, and its definition.
        '''
        calculator = self._calculator()
        lexer = Lexer()
        print('<token>\t<kind>\t<definition>')
        for line in self.args.expressions:
            for token in lexer.lex(line):
                kind = calculator.kind(token)
                definition = (calculator.literals.get(token) or
                              calculator.functions.get(token))
                print(repr(token), kind, repr(definition), sep='\t')

    def executor(self):
        '''
        Evaluate every expression, printing each result.
        '''
        calculator = self._calculator()
        lexer = Lexer()
        for line in self.args.expressions:
            tokens = list(lexer.lex(line))
            # Blank lines aren't worth a syntax error.
            if not tokens:
                continue
            try:
                print(self._evaluate(calculator, ''.join(tokens)))
            # Abort entire rest of line, makes sense anyway
            except CalculatorError as e:
                print(e.args[0], file=sys.stderr)
                if self.args.verbose:
                    traceback.print_exc(file=sys.stderr)

    def lister(self):
        '''
        Print all defined tokens, by kind.
        '''
        calculator = self._calculator()
        for kind in 'literal', 'function':
            print(kind + 's:',
                  *[token
                    for token
                    in calculator.tokens()
                    if calculator.kind(token) == kind])

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Lazy RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks on errors')
        self.argument_parser.add_argument('-x', '--extended',
                                          action='store_true',
                                          help='also define ' +
                                          ' '.join(combinators.EXTENDED))
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-L', '--list', self.lister),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is sys.stdin and \
           self.args.action != self.lister:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
