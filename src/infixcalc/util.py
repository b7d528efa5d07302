from functools import wraps


class CalcError(Exception):
    '''
    Base of every user-facing calculator error.

    The message, args[0], is meant to be shown verbatim.
    '''


class LexError(CalcError):
    pass


class ParenthesisError(CalcError):
    pass


class EvaluationError(CalcError):
    pass


class DivisionByZeroError(EvaluationError):
    pass


class StateError(CalcError):
    pass


def wrap_user_errors(fmt, error=CalcError):
    '''
    Decorator that converts unexpected exceptions into calculator errors.

    Passes through CalcErrors. The message is fmt formatted with the wrapped
    call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
