from __future__ import annotations


class CallispError(Exception):
    """ Base class for all callisp errors"""
    pass


class CallispUndefinedIdentifier(CallispError):
    """ Raised when a symbol is not bound in any enclosing scope"""

    def __init__(self, name):
        super().__init__(f"Undefined identifier: {name}")
        self.name = name


class CallispTypeError(CallispError):
    """ Raised when a value does not have the shape a form or builtin requires"""


class CallispArityError(CallispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, message: str, expected=None, got: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.got = got


class CallispIOError(CallispError):
    """ Raised when an external read or write fails"""


class CallispSyntaxError(CallispError):
    """ Raised when source text cannot be parsed"""
