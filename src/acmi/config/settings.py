"""Configuration settings using Pydantic Settings.

Provides typed writer configuration with environment variable support.

Usage:
    from acmi.config import WriterSettings

    # Load from environment variables (ACMI_WRITER_*)
    settings = WriterSettings()

    # Or override with explicit values
    settings = WriterSettings(frame_precision=3, line_terminator="\\r\\n")
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WriterSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for recording writers.

    Attributes:
        file_version: Version written in the header, must be 2.x.
        frame_precision: Max fractional digits of frame offsets.
        reference_precision: Max fractional digits of ReferenceLatitude and
            ReferenceLongitude.
        line_terminator: Line ending written after each record.
        archive_member_name: Member name used for compressed recordings.

    Environment Variables:
        ACMI_WRITER_FILE_VERSION
        ACMI_WRITER_FRAME_PRECISION
        ACMI_WRITER_REFERENCE_PRECISION
        ACMI_WRITER_LINE_TERMINATOR
        ACMI_WRITER_ARCHIVE_MEMBER_NAME
    """

    model_config = SettingsConfigDict(
        env_prefix="ACMI_WRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    file_version: str = Field(default="2.2", pattern=r"^2\.[0-9]+$")
    frame_precision: int = Field(default=2, ge=0)
    reference_precision: int = Field(default=7, ge=0)
    line_terminator: Literal["\n", "\r\n"] = "\n"
    archive_member_name: str = Field(default="track.txt.acmi", min_length=1)
