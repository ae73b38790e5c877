## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class CatError(Exception):
    def __init__(self, message: str = "", *, cat_op=None, cat_token=None, cat_stack=None):
        """Base class for all errors raised while building or evaluating stack programs."""
        super().__init__(message)
        self.cat_op: object = cat_op
        self.cat_token: str = cat_token
        self.cat_stack: object = cat_stack


class CatUnderflowError(CatError, IndexError):
    """Operation needs more items than the stack currently holds."""
    def __init__(self, message: str = "", *, cat_op=None, cat_token=None, cat_stack=None, required=0, available=0):
        super().__init__(message, cat_op=cat_op, cat_token=cat_token, cat_stack=cat_stack)
        self.required = required
        self.available = available


class CatTypeError(CatError, TypeError):
    """Runtime type exceptions found by checking the stack and its content."""
    pass


class CatApplyError(CatError, TypeError):
    """Transform passed to `apply` could not be called, or did not return a Stack."""
    pass


class CatNameError(CatError, KeyError):
    def __str__(self):
        # KeyError would otherwise wrap the message in quotes.
        return Exception.__str__(self)


class CatValueError(CatError, ValueError):
    pass


# Names of the error kinds as documented for the evaluation entry point.
StackUnderflow = CatUnderflowError
TypeMismatch = CatTypeError
ApplyFailure = CatApplyError
