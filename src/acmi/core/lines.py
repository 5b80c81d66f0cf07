r"""Logical line reader for ACMI text streams.

A physical line ending in a backslash right before its terminator continues
on the next physical line. The backslash is dropped and the line break is
kept, so a multi-line comment arrives as one logical line with embedded
newlines.

Usage:
    with open("track.txt.acmi", "rb") as f:
        for number, text in logical_lines(f):
            ...
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from acmi.errors import ReadError

CONTINUATION = "\\"


def _decode(raw: bytes, number: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReadError(f"input is not valid UTF-8: {e.reason}", line=number) from e


def _continued(text: str) -> str | None:
    """Return text with its continuation marker and terminator replaced by a
    single newline, or None if the line is not continued."""
    for terminator in ("\r\n", "\n"):
        if text.endswith(CONTINUATION + terminator):
            return text[: -len(terminator) - 1] + "\n"
    return None


def _strip_terminator(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def logical_lines(source: BinaryIO) -> Iterator[tuple[int, str]]:
    """Yield (line_number, text) for each logical line of source.

    line_number is the 1-based physical line where the logical line starts.
    The generator stops at end of input and never touches source again once
    the consumer stops pulling.

    Raises:
        ReadError: If reading fails or a line is not valid UTF-8.
    """
    number = 0
    start = 1
    buffer = ""
    while True:
        try:
            raw = source.readline()
        except OSError as e:
            raise ReadError(f"error reading input: {e}", line=number + 1) from e

        if not raw:
            if buffer:
                # nothing follows the last continuation
                yield start, buffer.removesuffix("\n")
            return

        number += 1
        text = _decode(raw, number)

        joined = _continued(text)
        if joined is not None:
            buffer += joined
            continue

        yield start, buffer + _strip_terminator(text)
        buffer = ""
        start = number + 1
