"""Zip-compressed recordings (`.zip.acmi`).

Thin wrappers that open the container and hand a plain member stream to
Parser or Writer. The codec itself never sees compressed bytes.

Usage:
    with open("track.zip.acmi", "rb") as f, open_compressed(f) as parser:
        for record in parser:
            ...

    with open("out.zip.acmi", "wb") as f, compressed_writer(f) as writer:
        writer.write(Frame(0.0))
"""

from __future__ import annotations

import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from acmi.config import WriterSettings
from acmi.errors import InvalidArchiveError
from acmi.stream.parser import Parser
from acmi.stream.writer import Writer


@contextmanager
def open_compressed(source: BinaryIO) -> Iterator[Parser]:
    """Yield a Parser over the first member of a zip archive.

    Args:
        source: Seekable binary stream holding the archive.

    Raises:
        InvalidArchiveError: If source is not a zip archive or has no members.
    """
    try:
        archive = zipfile.ZipFile(source)
    except zipfile.BadZipFile as e:
        raise InvalidArchiveError(f"error reading zip compressed input: {e}") from e

    with archive:
        members = archive.infolist()
        if not members:
            raise InvalidArchiveError("zip compressed input has no members")
        with archive.open(members[0]) as member, Parser(member) as parser:  # type: ignore[arg-type]
            yield parser


@contextmanager
def compressed_writer(
    sink: BinaryIO, settings: WriterSettings | None = None
) -> Iterator[Writer]:
    """Yield a Writer over a single deflated archive member.

    The member is named after settings.archive_member_name. The archive is
    finalized when the context exits; sink itself stays open.
    """
    settings = settings or WriterSettings()
    with zipfile.ZipFile(sink, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
        with archive.open(settings.archive_member_name, mode="w") as member:
            writer = Writer(member, settings)  # type: ignore[arg-type]
            yield writer
            writer.flush()
