"""
Hanson Exceptions
=================

Exception types raised by Hanson.

Removing an unknown event handler token or an unknown observation is never an
error, so there is no exception for it. The exceptions below signal programmer
misuse and are not meant to be caught and recovered from.
"""

from typing import Any


class HansonError(Exception):
    """Base class for all Hanson errors."""

    pass


class UnsupportedReadError(HansonError, NotImplementedError):
    """Raised when reading the value of a write-only bindable."""

    pass


class TypeMismatchError(HansonError, TypeError):
    """
    Raised when an observed attribute holds a value of an unexpected type.

    Dynamic properties check the runtime type of every value that crosses
    into the typed world; a mismatch means the declared type is wrong.
    """

    def __init__(self, key: str, expected: Any, actual: object) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual

        if isinstance(expected, tuple):
            expected_name = " or ".join(t.__name__ for t in expected)
        else:
            expected_name = expected.__name__

        super().__init__(
            f"Attribute '{key}' holds {type(actual).__name__} value {actual!r}, "
            f"expected {expected_name}"
        )
