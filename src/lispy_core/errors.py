"""Exceptions raised outside the value domain.

Language-level failures (division by zero, bad operands, ...) are ``LError``
values and never raise.  These exceptions cover the seams around the core:
text the grammar rejects, and tree shapes the reader does not understand.
"""

from __future__ import annotations


class LispyError(Exception):
    """Base class for all Lispy errors."""


class LispySyntaxError(LispyError):
    """Raised when the grammar engine cannot parse the input text."""

    def __init__(self, message: str, text: str, column: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.column = column

    def __str__(self) -> str:
        if self.column is None:
            return self.message
        return f"{self.message} (column {self.column})"


class LispyReadError(LispyError):
    """Raised when the reader meets a syntax tree node it cannot classify."""


class LispyDepthError(LispyError):
    """Raised when an expression is nested deeper than the interpreter stack allows."""
