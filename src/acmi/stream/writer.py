"""Streaming recording writer.

The header is written once on construction; every write() renders exactly
one record line. Re-parsing the output yields records equal to the ones
written, up to frame and reference-coordinate rounding and the narrowest
coordinate layout.

Usage:
    with open("track.txt.acmi", "wb") as f, Writer(f) as writer:
        writer.write(GlobalProperty(GlobalPropertyKind.TITLE, "Sortie"))
        writer.write(Frame(0.0))
        writer.write(Update(0x3A, [Property(PropertyKind.NAME, "F-16C")]))
"""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import BinaryIO

from acmi.config import WriterSettings
from acmi.core.lines import CONTINUATION
from acmi.core.numeric import U64_MAX, format_float, format_id, round_to_precision
from acmi.records.event import Event, format_event
from acmi.records.global_property import (
    GlobalProperty,
    UnknownGlobalProperty,
    format_global_property,
)
from acmi.records.models import Frame, Record, Remove, Update
from acmi.records.property import format_property
from acmi.stream.parser import FILE_TYPE, GLOBAL_ID


def _check_object_id(object_id: int) -> str:
    if not 0 < object_id <= U64_MAX:
        raise ValueError(f"Object id must be in [1, 2**64), got {object_id}")
    return format_id(object_id)


def format_record(record: Record, settings: WriterSettings | None = None) -> str:
    """Render one record as a single logical line, without terminator.

    Raises:
        ValueError: If an Update or Remove targets id 0 or an id outside u64.
            Also raised for property or event values that would not read
            back intact.
        TypeError: If record is not a record type.
    """
    settings = settings or WriterSettings()

    if isinstance(record, Frame):
        offset = round_to_precision(record.offset, settings.frame_precision)
        return f"#{format_float(offset)}"
    if isinstance(record, Remove):
        return f"-{_check_object_id(record.id)}"
    if isinstance(record, Update):
        object_id = _check_object_id(record.id)
        if not record.properties:
            return f"{object_id},"
        return ",".join([object_id, *(format_property(prop) for prop in record.properties)])
    if isinstance(record, Event):
        return f"{GLOBAL_ID},Event={format_event(record)}"
    if isinstance(record, (GlobalProperty, UnknownGlobalProperty)):
        return f"{GLOBAL_ID},{format_global_property(record, settings.reference_precision)}"
    raise TypeError(f"Expected a record, got {type(record).__name__}")


def _continue_lines(line: str, terminator: str) -> str:
    """Escape embedded newlines so the logical line survives re-lexing."""
    return line.replace("\n", CONTINUATION + terminator)


class Writer:
    """Push-based record writer over a binary sink.

    Args:
        sink: Writable binary stream. Owned by the writer until close().
        settings: Formatting configuration. Defaults to WriterSettings().
    """

    def __init__(self, sink: BinaryIO, settings: WriterSettings | None = None) -> None:
        self._sink = sink
        self._settings = settings or WriterSettings()
        self._write_line(FILE_TYPE)
        self._write_line(f"FileVersion={self._settings.file_version}")

    @property
    def settings(self) -> WriterSettings:
        return self._settings

    def _write_line(self, line: str) -> None:
        self._sink.write((line + self._settings.line_terminator).encode("utf-8"))

    def write(self, record: Record) -> None:
        """Render and write one record followed by the line terminator."""
        line = format_record(record, self._settings)
        self._write_line(_continue_lines(line, self._settings.line_terminator))

    def write_all(self, records: Iterable[Record]) -> None:
        for record in records:
            self.write(record)

    def flush(self) -> None:
        self._sink.flush()

    def close(self) -> None:
        """Flush and close the underlying sink."""
        self._sink.flush()
        self._sink.close()

    def __enter__(self) -> Writer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
