"""Exception types raised by winsplit.

WHY: The codecs themselves never fail on a string, so every exception here
signals misuse at the edges: an unknown dialect name, an operation a dialect
does not define, bytes that are not valid text, or a broken case file.
Callers need typed exceptions to tell these apart.

HOW: One base class, WinsplitError. Each concrete error also subclasses
ValueError so code that already catches ValueError keeps working.

RULES:
- Messages name the offending value and list the valid choices when there
  are any.
- Decoding and schema errors keep the original exception as __cause__.
"""

from typing import Iterable, Optional


class WinsplitError(Exception):
    """Base class for all winsplit errors."""


class UnknownDialectError(WinsplitError, ValueError):
    """Raised when a dialect name does not match any known alias."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        choices = sorted(available)
        message = "Unknown dialect '{}'".format(name)
        if choices:
            message += ". Available: {}".format(", ".join(choices))
        super().__init__(message)


class UnsupportedOperationError(WinsplitError, ValueError):
    """Raised when a dialect does not define the requested operation.

    VC2008 has no quote operation, so quote() and join() reject it.
    """

    def __init__(self, dialect: str, operation: str) -> None:
        self.dialect = dialect
        self.operation = operation
        super().__init__(
            "Dialect '{}' does not support '{}'".format(dialect, operation)
        )


class CommandLineDecodeError(WinsplitError, ValueError):
    """Raised when a raw command line given as bytes cannot be decoded."""

    def __init__(self, encoding: str, reason: Optional[str] = None) -> None:
        self.encoding = encoding
        message = "Command line is not valid {}".format(encoding)
        if reason:
            message += ": {}".format(reason)
        super().__init__(message)


class ConformanceFileError(WinsplitError, ValueError):
    """Raised when a conformance case file cannot be read or fails validation."""
