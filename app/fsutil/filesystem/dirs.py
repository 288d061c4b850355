"""Existence, emptiness and purge helpers for paths and directories."""

import logging
import os
import shutil

logger = logging.getLogger(__name__)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Check whether a path can be stat'ed.

    Any failure (missing path, permission denied, invalid name) yields False.

    Args:
        path: Path to check.

    Returns:
        True if os.stat succeeds on the path.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_empty(path: str | os.PathLike[str]) -> bool:
    """Check whether a directory has no entries.

    Only the first entry is read; the listing handle is closed on return.

    Args:
        path: Directory to inspect.

    Returns:
        True if the directory contains nothing.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path is not a directory.
        PermissionError: If the directory cannot be listed.
    """
    with os.scandir(path) as it:
        return next(it, None) is None


def remove_contents(path: str | os.PathLike[str]) -> None:
    """Delete every child of a directory, keeping the directory itself.

    Directories (but not symlinks to directories) are removed with
    shutil.rmtree; files and links are unlinked. Removal stops at the
    first failure.

    Args:
        path: Directory to purge.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path is not a directory.
        OSError: If a child cannot be removed.
    """
    names = os.listdir(path)

    for name in names:
        target = os.path.join(path, name)
        logger.debug("Removing %s", target)

        if os.path.isdir(target) and not os.path.islink(target):
            shutil.rmtree(target)
        else:
            os.unlink(target)

    logger.info("Removed %d entries from %s", len(names), path)
