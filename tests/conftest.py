"""Shared test fixtures."""

import io
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from acmi import Parser

HEADER = "FileType=text/acmi/tacview\nFileVersion=2.2\n"


def _recording(*lines: str, header: str = HEADER) -> bytes:
    return (header + "".join(line + "\n" for line in lines)).encode("utf-8")


@pytest.fixture
def recording():
    """Build an in-memory recording (header included) from body lines."""
    return _recording


@pytest.fixture
def parse():
    """Parse body lines (header added) into a list of records."""

    def _parse(*lines: str) -> list:
        return list(Parser.from_bytes(_recording(*lines)))

    return _parse


@pytest.fixture
def sink():
    """Fresh in-memory binary sink."""
    return io.BytesIO()
