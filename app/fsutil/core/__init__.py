"""Core infrastructure for fsutil.

This module exports the exception hierarchy and the settings model
shared by every operation.
"""

from fsutil.core.errors import (
    ArchiveError,
    ArchiveOpenError,
    ExtractEntryError,
    FsutilError,
    InvalidArgumentError,
    SymlinkError,
    UnsafeEntryError,
    UnsupportedFileTypeError,
)
from fsutil.core.settings import FsutilSettings, resolve_settings

__all__ = [
    "ArchiveError",
    "ArchiveOpenError",
    "ExtractEntryError",
    "FsutilError",
    "FsutilSettings",
    "InvalidArgumentError",
    "SymlinkError",
    "UnsafeEntryError",
    "UnsupportedFileTypeError",
    "resolve_settings",
]
