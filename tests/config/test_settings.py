"""Tests for writer configuration."""

import pytest
from pydantic import ValidationError

from acmi.config import WriterSettings


def test_defaults() -> None:
    settings = WriterSettings()
    assert settings.file_version == "2.2"
    assert settings.frame_precision == 2
    assert settings.reference_precision == 7
    assert settings.line_terminator == "\n"
    assert settings.archive_member_name == "track.txt.acmi"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ACMI_WRITER_FRAME_PRECISION", "4")
    monkeypatch.setenv("ACMI_WRITER_FILE_VERSION", "2.1")
    settings = WriterSettings()
    assert settings.frame_precision == 4
    assert settings.file_version == "2.1"


@pytest.mark.parametrize(
    "overrides",
    [
        {"file_version": "3.0"},
        {"frame_precision": -1},
        {"line_terminator": "\r"},
        {"archive_member_name": ""},
    ],
    ids=["version", "precision", "terminator", "member-name"],
)
def test_invalid_values_are_rejected(overrides) -> None:
    with pytest.raises(ValidationError):
        WriterSettings(**overrides)
