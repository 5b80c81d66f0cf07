"""Numeric field parsing and formatting.

Usage:
    parse_id("a1b2")               # 41394
    format_id(41394)               # "a1b2"
    format_float(10.0)             # "10"
    round_to_precision(12.345, 2)  # 12.35
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from acmi.errors import InvalidIdError, InvalidNumericError

U64_MAX = 2**64 - 1

_HEX = re.compile(r"[0-9a-fA-F]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_id(text: str) -> int:
    """Parse a hexadecimal object id.

    Raises:
        InvalidIdError: If text is not plain hex digits or exceeds u64.
    """
    if not _HEX.fullmatch(text):
        raise InvalidIdError(f"object id is not a u64: {text!r}")
    value = int(text, 16)
    if value > U64_MAX:
        raise InvalidIdError(f"object id is not a u64: {text!r}")
    return value


def format_id(value: int) -> str:
    return f"{value:x}"


def parse_unsigned(text: str) -> int:
    """Parse a decimal u64."""
    if not _UNSIGNED.fullmatch(text):
        raise InvalidNumericError(f"expected unsigned integer, got {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise InvalidNumericError(f"expected unsigned integer, got {text!r}")
    return value


def parse_integer(text: str) -> int:
    """Parse a signed decimal integer."""
    if not _INTEGER.fullmatch(text):
        raise InvalidNumericError(f"expected integer, got {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    """Parse a double-precision float.

    Raises:
        InvalidNumericError: If text is not a valid float literal.
    """
    # float() tolerates padding and digit separators, the wire format does not
    if not text or text != text.strip() or "_" in text:
        raise InvalidNumericError(f"expected numeric, got {text!r}")
    try:
        return float(text)
    except ValueError as e:
        raise InvalidNumericError(f"expected numeric, got {text!r}") from e


def format_float(value: float) -> str:
    """Shortest text that parses back to value. Integral values drop '.0'."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def round_to_precision(value: float, precision: int) -> float:
    """Round to at most `precision` fractional digits, ties away from zero.

    Computes round(value * 10^p) / 10^p. Non-finite values pass through, as do
    values too large to carry a fractional part.
    """
    if not math.isfinite(value):
        return value
    scale = 10**precision
    scaled_value = value * scale
    if not math.isfinite(scaled_value):
        return value
    scaled = Decimal(scaled_value).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(scaled) / scale
