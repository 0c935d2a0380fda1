from functools import wraps
import operator

from .lazy import Lazy
from .util import (ExpressionSyntaxError, InvalidToken,
                   OperatorAlreadyDefined, UnknownOperator)


def _eager(f):
    '''
    Lift a plain binary int function to one over Lazy operands.

    Forces both operands, left first.
    '''
    @wraps(f)
    def wrapped(a, b):
        return f(a(), b())
    return wrapped


def _truncdiv(a, b):
    '''
    Integer division rounding toward zero: -2 / 4 is 0, not -1.
    '''
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Calculator:
    '''
    Lazy stack machine (RPN calculator).

    Each character of the input is a token: either a literal, which pushes a
    deferred value, or a binary function, which pops two deferred values and
    pushes a deferred application of itself to them. Nothing is computed
    until the single value left at the end is forced.

    Tokens can be added at any time, never redefined or removed.
    '''

    # Tokens are characters with a code point below this.
    ALPHABET_SIZE = 128

    LITERALS = {
        '0': lambda: 0,
        '2': lambda: 2,
        '4': lambda: 4,
    }

    # a is the operand pushed first, b the one pushed last: 24- is 2 - 4.
    BUILTINS = {
        '+': _eager(operator.__add__),
        '-': _eager(operator.__sub__),
        '*': _eager(operator.__mul__),
        # Division by zero is the caller's ZeroDivisionError.
        '/': _eager(_truncdiv),
    }

    def __init__(self):
        '''
        Create calculator with the default literals and functions.
        '''
        self.literals = dict()
        self.functions = dict()
        for token, provider in type(self).LITERALS.items():
            self.define_literal(token, provider)
        for token, fn in type(self).BUILTINS.items():
            self.define_function(token, fn)

    def _check_free(self, token):
        if not (isinstance(token, str) and len(token) == 1
                and ord(token) < type(self).ALPHABET_SIZE):
            raise InvalidToken('Invalid token {!r}'.format(token))
        if token in self:
            raise OperatorAlreadyDefined(
                '{!r} already defined as {}'.format(token, self.kind(token)))

    def define_literal(self, token, provider):
        '''
        Define token as a literal, pushing Lazy(provider).

        :param provider: Callable taking no arguments, returning an int. Runs
                         every time the literal is forced.
        '''
        self._check_free(token)
        self.literals[token] = Lazy(provider)

    def define_function(self, token, fn):
        '''
        Define token as a binary function.

        :param fn: Callable taking two Lazy operands, first pushed first,
                   returning an int. Forces its operands as it sees fit.
        '''
        if not callable(fn):
            raise TypeError('{!r} is not callable'.format(fn))
        self._check_free(token)
        self.functions[token] = fn

    define = define_function

    def kind(self, token):
        '''
        Return 'literal', 'function', or None if token is undefined.
        '''
        if token in self.literals:
            return 'literal'
        elif token in self.functions:
            return 'function'
        return None

    def __contains__(self, token):
        return token in self.literals or token in self.functions

    def tokens(self):
        '''
        Return all defined tokens, sorted.
        '''
        return sorted(self.literals.keys() | self.functions.keys())

    def _feed(self, stack, token):
        '''
        Run one token against stack.
        '''
        if token in self.literals:
            stack.append(self.literals[token])
        elif token in self.functions:
            if len(stack) < 2:
                raise ExpressionSyntaxError(
                    '{!r} needs 2 operands, have {}'.format(token,
                                                            len(stack)))
            b = stack.pop()
            a = stack.pop()
            stack.append(Lazy.compose(self.functions[token], a, b))
        else:
            raise UnknownOperator('Unknown operator {!r}'.format(token))

    def parse(self, tokens):
        '''
        Parse tokens into a single, unforced, Lazy.

        :param tokens: Iterable of single-character tokens, e.g. a str.
        '''
        stack = []
        for token in tokens:
            self._feed(stack, token)
        if len(stack) != 1:
            raise ExpressionSyntaxError(
                'Expected 1 value on stack at end, have {}'.format(len(stack)))
        return stack.pop()

    def calculate(self, tokens):
        '''
        Parse tokens, and force the result.
        '''
        return self.parse(tokens)()
