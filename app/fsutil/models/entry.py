"""Transient filesystem and archive data structures.

This module defines the classification of on-disk files used to pick a
copy strategy, and the read-only view of a zip archive entry.
"""

from __future__ import annotations

import stat
import zipfile
from dataclasses import dataclass
from enum import Enum

# MS-DOS attribute bits stored in the low byte of ZipInfo.external_attr
_DOS_READONLY = 0x01
_DOS_DIRECTORY = 0x10


class FileKind(str, Enum):
    """Type of a filesystem entry as seen by lstat.

    Attributes:
        REGULAR: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (never followed).
        OTHER: Device, socket, FIFO or anything else.
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> FileKind:
        """Classify a ``st_mode`` value."""
        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """A single named unit inside a zip archive.

    Attributes:
        name: Path of the entry relative to the archive root.
        is_dir: Whether the entry is a directory marker.
        mode: Permission bits to apply when the entry is materialized.
        size: Uncompressed size in bytes (0 for directories).
    """

    name: str
    is_dir: bool
    mode: int
    size: int = 0

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_zipinfo(cls, info: zipfile.ZipInfo) -> ArchiveEntry:
        """Build an entry from zip metadata.

        Unix-created entries carry their permission bits in the high 16
        bits of ``external_attr``. Entries without them fall back to
        0o777 for directories and 0o666 for files, minus the write bits
        when the MS-DOS read-only attribute is set.

        Args:
            info: Metadata of one member of an open ZipFile.

        Returns:
            ArchiveEntry describing the member.
        """
        is_dir = info.is_dir() or bool(info.external_attr & _DOS_DIRECTORY)
        mode = stat.S_IMODE(info.external_attr >> 16)

        if not mode:
            mode = 0o777 if is_dir else 0o666
            if info.external_attr & _DOS_READONLY:
                mode &= ~0o222

        return cls(name=info.filename, is_dir=is_dir, mode=mode, size=info.file_size)
