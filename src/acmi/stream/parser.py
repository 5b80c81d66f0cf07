"""Streaming recording parser.

The parser checks the two header lines on construction, then yields one
record per non-empty logical line. Parsing is fail-fast: the first malformed
line raises and ends iteration.

Usage:
    with open("track.txt.acmi", "rb") as f:
        parser = Parser(f)
        for record in parser:
            ...

    records = list(Parser.from_bytes(data))
"""

from __future__ import annotations

import io
import re
from collections.abc import Iterator
from enum import Enum, auto
from types import TracebackType
from typing import BinaryIO

from acmi.core.fields import split_fields, split_first
from acmi.core.lines import logical_lines
from acmi.core.numeric import parse_float, parse_id
from acmi.errors import InvalidFileTypeError, InvalidVersionError, ParseError
from acmi.records.event import parse_event
from acmi.records.global_property import parse_global_property
from acmi.records.models import Frame, Record, Remove, Update
from acmi.records.property import parse_property, split_pair

FILE_TYPE = "FileType=text/acmi/tacview"
BOM = "\ufeff"
VERSION_PATTERN = re.compile(r"FileVersion=(2\.[0-9]+)")
GLOBAL_ID = "0"


class ParserState(Enum):
    EXPECT_FILE_TYPE = auto()
    EXPECT_VERSION = auto()
    STREAMING = auto()
    EXHAUSTED = auto()


def parse_line(line: str) -> Record | None:
    """Parse one logical line. Returns None for comments and empty lines.

    Raises:
        ParseError: If the line is malformed.
    """
    if not line:
        return None

    lead = line[0]
    if lead == "-":
        return Remove(parse_id(line[1:]))
    if lead == "#":
        return Frame(parse_float(line[1:]))
    if line.startswith("//"):
        return None

    object_id, rest = split_first(line)
    if object_id == GLOBAL_ID:
        name, value = split_pair(rest)
        if name == "Event":
            return parse_event(value)
        return parse_global_property(rest)

    fields = split_fields(rest) if rest else []
    return Update(parse_id(object_id), [parse_property(field) for field in fields])


class Parser:
    """Lazy record iterator over a binary ACMI stream.

    The parser owns `source` for its lifetime; close() releases it.

    Args:
        source: Readable binary stream, already decompressed.

    Raises:
        InvalidFileTypeError: If the first line is not the file-type marker.
        InvalidVersionError: If the second line is not `FileVersion=2.<digits>`.
        ReadError: If the source fails while reading the header.
    """

    def __init__(self, source: BinaryIO) -> None:
        self._source = source
        self._lines = logical_lines(source)
        self._state = ParserState.EXPECT_FILE_TYPE
        self.file_version: str | None = None
        self._read_header()

    @classmethod
    def from_bytes(cls, data: bytes) -> Parser:
        """Parse an in-memory recording."""
        return cls(io.BytesIO(data))

    @property
    def state(self) -> ParserState:
        return self._state

    def _read_header(self) -> None:
        first = next(self._lines, None)
        if first is None or first[1].removeprefix(BOM) != FILE_TYPE:
            self._state = ParserState.EXHAUSTED
            raise InvalidFileTypeError(line=1)
        self._state = ParserState.EXPECT_VERSION

        second = next(self._lines, None)
        match = VERSION_PATTERN.fullmatch(second[1]) if second is not None else None
        if match is None:
            self._state = ParserState.EXHAUSTED
            raise InvalidVersionError(line=second[0] if second is not None else None)
        self.file_version = match.group(1)
        self._state = ParserState.STREAMING

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        while self._state is ParserState.STREAMING:
            try:
                number, text = next(self._lines)
            except StopIteration:
                self._state = ParserState.EXHAUSTED
                break
            except ParseError:
                self._state = ParserState.EXHAUSTED
                raise

            try:
                record = parse_line(text)
            except ParseError as e:
                self._state = ParserState.EXHAUSTED
                e.line = number
                raise
            if record is not None:
                return record
        raise StopIteration

    def close(self) -> None:
        """Stop parsing and close the underlying source."""
        self._state = ParserState.EXHAUSTED
        self._lines.close()
        self._source.close()

    def __enter__(self) -> Parser:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
