"""Data models for fsutil.

This module exports the transient value types produced while copying
files and reading archives.
"""

from fsutil.models.entry import ArchiveEntry, FileKind

__all__ = [
    "ArchiveEntry",
    "FileKind",
]
