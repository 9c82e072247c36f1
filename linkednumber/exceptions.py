"""
Errors raised by linked number operations.

Every error is a ``LinkedNumberError``; the subclasses only name the kind of
failure so callers may catch one kind or all of them.
"""


class LinkedNumberError(Exception):
    """Base class for all linked number errors."""


class EmptyInputError(LinkedNumberError):
    """No digits were given to build a number from."""


class InvalidDigitError(LinkedNumberError, ValueError):
    """A symbol is outside the 0-9, A-Z alphabet."""


class InvalidInputError(LinkedNumberError, ValueError):
    """The value cannot be represented, e.g. a negative integer."""


class InvalidBaseError(LinkedNumberError, ValueError):
    """A base outside the supported range."""


class InvalidPositionError(LinkedNumberError, IndexError):
    """A digit position outside the number."""


class InvalidNumberError(LinkedNumberError):
    """The number has digits that do not fit its base."""
