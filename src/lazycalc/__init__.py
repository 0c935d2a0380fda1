'''
Lazy RPN calculator.

Postfix calculator over single-character tokens, where the operands handed to
an operator are deferred: they run only if, and as many times as, the
operator forces them. So operators can short-circuit (only evaluate one
branch) or repeat (run an operand's side effects n times), with the stack
machine itself none the wiser.

New literals and operators can be defined at runtime, but never redefined.

>>> calculator = Calculator()
>>> calculator.calculate('42+')
6
>>> calculator.define_function('?', lambda a, b: b() if a() else 0)
>>> calculator.calculate('040/?')
0
'''

from .cli import CLI
from .lazy import Lazy
from .lexer import Lexer
from .machine import Calculator
from .util import (CalculatorError, ExpressionSyntaxError, InvalidToken,
                   OperatorAlreadyDefined, UnknownOperator)


__all__ = ('Calculator', 'Lazy', 'Lexer', 'CLI',
           'CalculatorError', 'ExpressionSyntaxError', 'InvalidToken',
           'OperatorAlreadyDefined', 'UnknownOperator')
