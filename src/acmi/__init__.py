"""acmi: streaming codec for ACMI (Tacview) flight recordings.

Usage:
    from acmi import Parser, Writer, Frame, Update, Property, PropertyKind

    with open("track.txt.acmi", "rb") as f:
        for record in Parser(f):
            print(record)

    with open("out.txt.acmi", "wb") as f, Writer(f) as writer:
        writer.write(Frame(0.0))
        writer.write(Update(0x3A, [Property(PropertyKind.NAME, "F-16C")]))
"""

__version__ = "0.1.0"

# Configuration
from acmi.config import WriterSettings

# Errors
from acmi.errors import (
    EolError,
    InvalidArchiveError,
    InvalidCoordinateFormatError,
    InvalidEventError,
    InvalidFileTypeError,
    InvalidIdError,
    InvalidNumericError,
    InvalidVersionError,
    MissingDelimiterError,
    ParseError,
    ReadError,
)

# Records
from acmi.records import (
    Color,
    Coords,
    Event,
    EventKind,
    Frame,
    GlobalProperty,
    GlobalPropertyKind,
    Property,
    PropertyKind,
    Record,
    Remove,
    Tag,
    UnknownColor,
    UnknownEventKind,
    UnknownGlobalProperty,
    UnknownProperty,
    UnknownTag,
    Update,
)

# Accumulation (optional)
from acmi.state import ObjectState, RecordingState, replay

# Streams
from acmi.stream import (
    Parser,
    Writer,
    compressed_writer,
    format_record,
    open_compressed,
    parse_line,
)

__all__ = [
    # Version
    "__version__",
    # Streams
    "Parser",
    "Writer",
    "parse_line",
    "format_record",
    "open_compressed",
    "compressed_writer",
    # Records
    "Record",
    "Remove",
    "Frame",
    "Update",
    "Event",
    "EventKind",
    "UnknownEventKind",
    "GlobalProperty",
    "GlobalPropertyKind",
    "UnknownGlobalProperty",
    "Property",
    "PropertyKind",
    "UnknownProperty",
    "Coords",
    "Tag",
    "UnknownTag",
    "Color",
    "UnknownColor",
    # State
    "RecordingState",
    "ObjectState",
    "replay",
    # Config
    "WriterSettings",
    # Errors
    "ParseError",
    "InvalidFileTypeError",
    "InvalidVersionError",
    "ReadError",
    "EolError",
    "MissingDelimiterError",
    "InvalidIdError",
    "InvalidNumericError",
    "InvalidEventError",
    "InvalidCoordinateFormatError",
    "InvalidArchiveError",
]
