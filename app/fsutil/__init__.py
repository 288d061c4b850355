"""fsutil: small filesystem utilities.

Compressed-content detection, zip extraction, file and directory copying,
and directory emptiness checks and purging.
"""

from fsutil.archive import extract, is_compressed, list_entries
from fsutil.core import (
    ArchiveError,
    ArchiveOpenError,
    ExtractEntryError,
    FsutilError,
    FsutilSettings,
    InvalidArgumentError,
    SymlinkError,
    UnsafeEntryError,
    UnsupportedFileTypeError,
)
from fsutil.filesystem import copy_directory, copy_file, file_exists, is_empty, remove_contents
from fsutil.models import ArchiveEntry, FileKind

__all__ = [
    "ArchiveEntry",
    "ArchiveError",
    "ArchiveOpenError",
    "ExtractEntryError",
    "FileKind",
    "FsutilError",
    "FsutilSettings",
    "InvalidArgumentError",
    "SymlinkError",
    "UnsafeEntryError",
    "UnsupportedFileTypeError",
    "copy_directory",
    "copy_file",
    "extract",
    "file_exists",
    "is_compressed",
    "is_empty",
    "list_entries",
    "remove_contents",
]
