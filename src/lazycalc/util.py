from functools import wraps


class CalculatorError(Exception):
    pass


class ExpressionSyntaxError(CalculatorError):
    '''
    Stack has the wrong shape: an operator without two operands under it, or
    anything but exactly one value left at the end of input.
    '''


class UnknownOperator(CalculatorError):
    pass


class OperatorAlreadyDefined(CalculatorError):
    pass


class InvalidToken(CalculatorError):
    '''
    Token is not a single character of the calculator's alphabet.
    '''


def wrap_user_errors(fmt):
    '''
    Decorator that converts foreign exceptions to CalculatorErrors.

    Passes through CalculatorErrors. The message is fmt formatted with the
    wrapped call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise CalculatorError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
