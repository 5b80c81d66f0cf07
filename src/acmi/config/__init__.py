"""Configuration module using Pydantic Settings.

Usage:
    from acmi.config import WriterSettings

    settings = WriterSettings(file_version="2.1")
"""

from acmi.config.settings import WriterSettings

__all__ = [
    "WriterSettings",
]
