"""Core text primitives: line lexing, field splitting, numeric conventions.

Architecture Note:
    core/ contains pure, stateless helpers shared by the record codec.
    Record types and their wire vocabulary live in records/, the stream
    reader and writer in stream/, and the optional accumulation layer in
    state/.
"""

from acmi.core.fields import escape_text, split_fields, split_first, unescape_text
from acmi.core.lines import logical_lines
from acmi.core.numeric import (
    format_float,
    format_id,
    parse_float,
    parse_id,
    parse_integer,
    parse_unsigned,
    round_to_precision,
)

__all__ = [
    # Lines
    "logical_lines",
    # Fields
    "split_fields",
    "split_first",
    "escape_text",
    "unescape_text",
    # Numeric
    "parse_id",
    "format_id",
    "parse_unsigned",
    "parse_integer",
    "parse_float",
    "format_float",
    "round_to_precision",
]
