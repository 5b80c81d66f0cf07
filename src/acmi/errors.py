"""Exceptions raised while reading ACMI recordings.

Every failure surfaces as a ParseError subclass. Parsing is fail-fast: the
first error ends iteration, there is no resynchronization.
"""

from __future__ import annotations


class ParseError(Exception):
    """Base class for all recording parse failures.

    Attributes:
        line: 1-based physical line on which the offending logical line
            started. None for failures not tied to a line.
    """

    default_message = "failed to parse recording"

    def __init__(self, message: str | None = None, *, line: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"line {self.line}: {message}"


class InvalidFileTypeError(ParseError):
    """Raised when the first line is not the ACMI file-type marker."""

    default_message = "input is not a ACMI file"


class InvalidVersionError(ParseError):
    """Raised when the second line is not a 2.x file version."""

    default_message = "invalid version, expected ACMI v2.x"


class ReadError(ParseError):
    """Raised when the underlying source fails or yields undecodable bytes."""

    default_message = "error reading input"


class EolError(ParseError):
    """Raised when a line ends before an expected field."""

    default_message = "unexpected end of line"


class MissingDelimiterError(ParseError):
    """Raised when a required delimiter is absent from a field."""

    def __init__(self, delimiter: str, *, line: int | None = None) -> None:
        super().__init__(f"could not find expected delimiter `{delimiter}`", line=line)
        self.delimiter = delimiter


class InvalidIdError(ParseError):
    """Raised when an object id is not a hexadecimal u64."""

    default_message = "object id is not a u64"


class InvalidNumericError(ParseError):
    """Raised when a numeric field fails to parse."""

    default_message = "expected numeric"


class InvalidEventError(ParseError):
    """Raised when an event has an empty kind."""

    default_message = "failed to parse event"


class InvalidCoordinateFormatError(ParseError):
    """Raised when a coordinate value has a slot count outside {3, 5, 6, 9}."""

    default_message = "encountered invalid coordinate format"


class InvalidArchiveError(ParseError):
    """Raised when a compressed recording is not a readable zip archive."""

    default_message = "error reading zip compressed input"
