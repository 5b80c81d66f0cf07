"""Stream reader and writer, plus zip container wrappers."""

from acmi.stream.archive import compressed_writer, open_compressed
from acmi.stream.parser import FILE_TYPE, Parser, ParserState, parse_line
from acmi.stream.writer import Writer, format_record

__all__ = [
    "FILE_TYPE",
    "Parser",
    "ParserState",
    "parse_line",
    "Writer",
    "format_record",
    "open_compressed",
    "compressed_writer",
]
