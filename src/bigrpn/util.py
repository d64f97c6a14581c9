from enum import Enum
from functools import wraps


class ErrorKind(Enum):
    '''
    What went wrong, so that callers can branch on it without string matching.
    '''
    MALFORMED_INPUT = 'malformed input'
    NEGATIVE_RESULT = 'negative result'
    DIVISION_BY_ZERO = 'division by zero'
    UNDEFINED_RESULT = 'undefined result'
    OVERFLOW = 'overflow'
    UNHANDLED_TOKEN = 'unhandled token'
    IMBALANCED_STACK = 'imbalanced stack'
    STACK_UNDERFLOW = 'stack underflow'


class BigIntError(Exception):
    '''
    Base of every failure raised by the arithmetic engine.
    '''
    kind = None


class MalformedInputError(BigIntError, ValueError):
    kind = ErrorKind.MALFORMED_INPUT


class NegativeResultError(BigIntError, ArithmeticError):
    kind = ErrorKind.NEGATIVE_RESULT


class DivisionByZero(BigIntError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


class UndefinedResultError(BigIntError, ArithmeticError):
    kind = ErrorKind.UNDEFINED_RESULT


class NarrowingOverflowError(BigIntError, OverflowError):
    kind = ErrorKind.OVERFLOW


class RPNError(Exception):
    '''
    User error while evaluating an expression.

    The machine fills in stack, as it was when the error got out.
    '''
    def __init__(self, message, kind=None):
        super().__init__(message)
        self.kind = kind
        self.stack = None


def wrap_user_errors(fmt):
    '''
    Decorator that converts arithmetic failures to RPNErrors.

    Passes through RPNErrors. Keeps the kind of the original failure, and
    chains it.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except BigIntError as e:
                raise RPNError('{}: {}'.format(fmt.format(*args, **kwargs), e),
                               kind=e.kind) from e
        return wrapper
    return decorator
