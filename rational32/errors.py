# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

from public import public

@public
class RationalException(Exception):
    """Base class for all rational32 exceptions."""
    pass

@public
class DomainError(RationalException, ValueError):
    """Raised when a value would get a zero denominator, or when a
    non-finite float is converted to :class:`Rational`."""

    def __init__(self, message="denominator is zero"):
        super().__init__(message)

@public
class IntegerOverflow(RationalException, OverflowError):
    """Raised when a component or an intermediate result leaves the signed
    32-bit range."""
    pass

@public
class DivisionByZero(RationalException, ZeroDivisionError):
    """Raised when dividing by a value that is exactly zero."""

    def __init__(self, message="division by zero"):
        super().__init__(message)

@public
class ParseError(RationalException, ValueError):
    """
    Raised when text cannot be read as two integers.

    Attributes:
        text: The text that failed to parse (None if unavailable).
        line: 1-based line of the offending character (None if unknown).
        column: 1-based column of the offending character (None if unknown).
    """

    def __init__(self, message, text=None, line=None, column=None):
        self.text = text
        self.line = line
        self.column = column
        if text is not None and column is not None:
            message = f"{message}\n\n{format_error(text, column)}"
        super().__init__(message)

def format_error(text, column):
    """Returns the offending text with a caret below the given column."""
    first_line = text.splitlines()[0] if text else ''
    return f"  | {first_line}\n  | {'':{column-1}}^"
