"""Filesystem copy and inspection module.

This module provides file and directory copying with mode and symlink
preservation, existence and emptiness checks, and directory purging.
"""

from fsutil.filesystem.copy import SKIPPED_NAMES, copy_directory, copy_file
from fsutil.filesystem.dirs import file_exists, is_empty, remove_contents

__all__ = [
    "SKIPPED_NAMES",
    "copy_directory",
    "copy_file",
    "file_exists",
    "is_empty",
    "remove_contents",
]
