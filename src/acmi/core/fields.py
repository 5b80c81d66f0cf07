"""Escape-aware splitting of record lines into comma-separated fields.

A comma preceded by a backslash is part of the field, not a separator.
Splitting keeps the escape characters in place; unescaping is the caller's
choice (see unescape_text).

Usage:
    split_fields(r"Name=A\\,B,IAS=120")  # [r"Name=A\\,B", "IAS=120"]
    split_first("3a,T=1|2|3")           # ("3a", "T=1|2|3")
"""

from __future__ import annotations

from acmi.errors import EolError

ESCAPE = "\\"
SEPARATOR = ","


def _separator_positions(line: str) -> list[int]:
    positions: list[int] = []
    prev = ""
    for i, ch in enumerate(line):
        if ch == SEPARATOR and prev != ESCAPE:
            positions.append(i)
        prev = ch
    return positions


def split_fields(line: str) -> list[str]:
    """Split line on unescaped commas, preserving order and escapes.

    A dangling separator at the end of the line does not produce an empty
    trailing field.
    """
    fields: list[str] = []
    start = 0
    for pos in _separator_positions(line):
        fields.append(line[start:pos])
        start = pos + 1
    if start == 0 or start < len(line):
        fields.append(line[start:])
    return fields


def split_first(line: str) -> tuple[str, str]:
    """Split line at its first unescaped comma.

    Raises:
        EolError: If the line has no unescaped comma.
    """
    positions = _separator_positions(line)
    if not positions:
        raise EolError()
    pos = positions[0]
    return line[:pos], line[pos + 1 :]


def check_writable(value: str, *, allow_separators: bool = False) -> str:
    """Return value unchanged if it reads back intact as a field value.

    A trailing backslash would escape the following separator, or continue
    the line when the value ends it.

    Args:
        value: Field value as it will appear on the wire.
        allow_separators: Accept unescaped commas, for values that always
            run to the end of the line.

    Raises:
        ValueError: If value ends with a backslash or, unless
            allow_separators is set, holds an unescaped comma.
    """
    if value.endswith(ESCAPE):
        raise ValueError(f"Field value cannot end with a backslash: {value!r}")
    if not allow_separators and _separator_positions(value):
        raise ValueError(f"Field value holds an unescaped comma: {value!r}")
    return value


def unescape_text(value: str) -> str:
    r"""Turn escaped commas (\,) back into literal commas."""
    return value.replace(ESCAPE + SEPARATOR, SEPARATOR)


def escape_text(value: str) -> str:
    r"""Escape literal commas so they survive field splitting."""
    return value.replace(SEPARATOR, ESCAPE + SEPARATOR)
