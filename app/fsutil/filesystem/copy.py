"""File and directory copying.

Copies regular files with their permission bits, replicates symbolic
links without following them, and walks directory trees skipping the
macOS ``.Trashes`` artifact.
"""

import logging
import os
import shutil
import stat

from fsutil.core.errors import InvalidArgumentError, SymlinkError, UnsupportedFileTypeError
from fsutil.core.settings import FsutilSettings, resolve_settings
from fsutil.models.entry import FileKind

logger = logging.getLogger(__name__)

# Volume trash folder created by macOS on removable media
SKIPPED_NAMES = frozenset({".Trashes"})


def _require_path(value: str | os.PathLike[str], name: str) -> str:
    """Return ``value`` as a string path, rejecting empty input.

    Raises:
        InvalidArgumentError: If the path is empty.
    """
    path = os.fspath(value)
    if not path:
        msg = f"You must provide a {name} path"
        raise InvalidArgumentError(msg)
    return path


def copy_file(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    *,
    settings: FsutilSettings | None = None,
) -> None:
    """Copy a single file or symbolic link.

    The source is inspected with lstat, so links are never followed:
    - Regular files: content is streamed and the mode bits are replicated.
    - Symbolic links: a new link with the same (unresolved) target is created.
    - Anything else is rejected.

    Args:
        source: Path of the file to copy.
        destination: Path to create or overwrite.
        settings: Tunables; defaults to FsutilSettings().

    Raises:
        InvalidArgumentError: If either path is empty.
        FileNotFoundError: If the source does not exist.
        SymlinkError: If the link cannot be read or recreated.
        UnsupportedFileTypeError: If the source is a device, socket, FIFO or directory.
        OSError: If reading, writing or chmod fails.
    """
    src = _require_path(source, "source file")
    dst = _require_path(destination, "destination file")
    settings = resolve_settings(settings)

    source_stat = os.lstat(src)
    kind = FileKind.from_mode(source_stat.st_mode)

    if kind is FileKind.REGULAR:
        with open(src, "rb") as src_file, open(dst, "wb") as dst_file:
            shutil.copyfileobj(src_file, dst_file, settings.buffer_size)
        os.chmod(dst, stat.S_IMODE(source_stat.st_mode))
    elif kind is FileKind.SYMLINK:
        try:
            link_target = os.readlink(src)
        except OSError as e:
            raise SymlinkError(f"Unable to read symlink {src}: {e}") from e
        try:
            os.symlink(link_target, dst)
        except OSError as e:
            raise SymlinkError(f"Unable to replicate symlink {src} at {dst}: {e}") from e
    else:
        raise UnsupportedFileTypeError(src, source_stat.st_mode)

    logger.debug("Copied %s %s -> %s", kind.value, src, dst)


def copy_directory(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    recursive: bool = True,
    *,
    settings: FsutilSettings | None = None,
) -> None:
    """Copy a directory, optionally including its subdirectories.

    The destination gets the source's mode bits. Children named in
    SKIPPED_NAMES are ignored. With ``recursive=False`` only the files
    and links directly inside ``source`` are copied. The walk stops at
    the first failing child.

    Args:
        source: Directory to copy.
        destination: Directory to create (parents included).
        recursive: Descend into subdirectories.
        settings: Tunables; defaults to FsutilSettings().

    Raises:
        InvalidArgumentError: If either path is empty.
        FileNotFoundError: If the source does not exist.
        NotADirectoryError: If the source is not a directory.
        FsutilError: Any error raised by copy_file for a child.
    """
    if not os.fspath(source) or not os.fspath(destination):
        msg = "File paths must not be empty"
        raise InvalidArgumentError(msg)

    settings = resolve_settings(settings)
    _copy_tree(os.fspath(source), os.fspath(destination), recursive, settings)
    logger.info("Copied directory %s -> %s", source, destination)


def _copy_tree(src: str, dst: str, recursive: bool, settings: FsutilSettings) -> None:
    source_stat = os.stat(src)
    mode = stat.S_IMODE(source_stat.st_mode)

    # Owner needs write access while children are copied; the exact mode is applied last
    os.makedirs(dst, mode | stat.S_IRWXU, exist_ok=True)

    with os.scandir(src) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        if entry.name in SKIPPED_NAMES:
            logger.debug("Skipping %s", entry.path)
            continue

        child_dst = os.path.join(dst, entry.name)

        if entry.is_dir(follow_symlinks=False):
            if not recursive:
                logger.debug("Skipping subdirectory %s (non-recursive copy)", entry.path)
                continue
            _copy_tree(entry.path, child_dst, True, settings)
        else:
            copy_file(entry.path, child_dst, settings=settings)

    os.chmod(dst, mode)
