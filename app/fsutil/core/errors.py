"""Exception hierarchy for fsutil.

Filesystem failures that already have a precise builtin type (missing
paths, permission problems) propagate as ``OSError`` subclasses. The
classes below cover the failures specific to this library.
"""

import stat


class FsutilError(Exception):
    """Base exception for fsutil errors."""


class InvalidArgumentError(FsutilError, ValueError):
    """Raised when a required path argument is empty."""


class ArchiveError(FsutilError):
    """Base exception for archive-related errors."""


class ArchiveOpenError(ArchiveError):
    """Raised when an archive cannot be opened as a zip container."""


class ExtractEntryError(ArchiveError):
    """Raised when a single archive entry cannot be materialized.

    Attributes:
        entry_name: Name of the entry inside the archive.
    """

    def __init__(self, entry_name: str, message: str) -> None:
        super().__init__(f"Failed to extract {entry_name!r}: {message}")
        self.entry_name = entry_name


class UnsafeEntryError(ExtractEntryError):
    """Raised in strict mode for entries that escape the destination."""


class SymlinkError(FsutilError, OSError):
    """Raised when a symbolic link cannot be read or replicated."""


class UnsupportedFileTypeError(FsutilError):
    """Raised when copying a file that is neither regular nor a symlink.

    Attributes:
        mode: The ``st_mode`` of the offending file.
    """

    def __init__(self, path: str, mode: int) -> None:
        super().__init__(f"Unable to copy {path}: unsupported file mode {stat.filemode(mode)}")
        self.mode = mode
