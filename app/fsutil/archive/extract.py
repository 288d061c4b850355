"""Zip archive extraction.

Materializes every entry of a zip archive under a destination directory,
applying each entry's stored permission bits. Extraction stops at the
first failing entry; entries already written are left in place.
"""

import logging
import lzma
import os
import shutil
import zipfile
import zlib
from pathlib import PurePosixPath

from fsutil.core.errors import ArchiveError, ArchiveOpenError, ExtractEntryError, UnsafeEntryError
from fsutil.core.settings import FsutilSettings, resolve_settings
from fsutil.models.entry import ArchiveEntry

logger = logging.getLogger(__name__)

# Errors zipfile and its decompressors raise while decoding a member
_ENTRY_ERRORS = (
    OSError,
    EOFError,
    RuntimeError,
    NotImplementedError,
    zipfile.BadZipFile,
    zlib.error,
    lzma.LZMAError,
)


def _open_archive(archive_path: str | os.PathLike[str]) -> zipfile.ZipFile:
    """Open a zip archive for reading.

    Raises:
        ArchiveOpenError: If the path is missing or not a zip container.
    """
    try:
        return zipfile.ZipFile(archive_path)
    except (OSError, zipfile.BadZipFile) as e:
        raise ArchiveOpenError(f"Cannot open archive {archive_path}: {e}") from e


def list_entries(archive_path: str | os.PathLike[str]) -> list[ArchiveEntry]:
    """List the entries of a zip archive in archive order.

    Args:
        archive_path: Path to the zip file.

    Returns:
        One ArchiveEntry per member.

    Raises:
        ArchiveOpenError: If the archive cannot be opened.
    """
    with _open_archive(archive_path) as archive:
        return [ArchiveEntry.from_zipinfo(info) for info in archive.infolist()]


def is_unsafe_entry_name(name: str) -> bool:
    """Check whether an entry name is absolute or climbs out with ``..``."""
    normalized = name.replace("\\", "/")
    if normalized.startswith("/") or (len(normalized) > 1 and normalized[1] == ":"):
        return True
    return ".." in PurePosixPath(normalized).parts


def extract(
    archive_path: str | os.PathLike[str],
    dest_dir: str | os.PathLike[str],
    *,
    settings: FsutilSettings | None = None,
    strict: bool | None = None,
) -> None:
    """Extract a zip archive into a destination directory.

    The destination (and its parents) is created with ``settings.dir_mode``
    if absent. Entries are written in archive order, each inside its own
    resource scope so handles never accumulate across entries.

    Entry names are joined with the destination as stored. Unsafe names
    (absolute, or containing ``..``) are only logged unless ``strict``
    is set, in which case they are rejected.

    Args:
        archive_path: Path to the zip file.
        dest_dir: Directory to extract into.
        settings: Tunables; defaults to FsutilSettings().
        strict: Reject unsafe entry names. Defaults to
            ``settings.reject_unsafe_entries``.

    Raises:
        ArchiveOpenError: If the archive cannot be opened.
        ExtractEntryError: If any entry cannot be written.
        UnsafeEntryError: If ``strict`` and an entry name is unsafe.
        ArchiveError: If closing the archive fails after a clean extraction.
    """
    settings = resolve_settings(settings)
    if strict is None:
        strict = settings.reject_unsafe_entries

    archive = _open_archive(archive_path)
    try:
        os.makedirs(dest_dir, settings.dir_mode, exist_ok=True)
        infos = archive.infolist()
        for info in infos:
            _extract_entry(archive, info, os.fspath(dest_dir), settings, strict=strict)
    except BaseException:
        _close_quietly(archive)
        raise

    try:
        archive.close()
    except OSError as e:
        raise ArchiveError(f"Failed to close archive {archive_path}: {e}") from e

    logger.info("Extracted %d entries from %s to %s", len(infos), archive_path, dest_dir)


def _extract_entry(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    dest_dir: str,
    settings: FsutilSettings,
    *,
    strict: bool,
) -> None:
    """Materialize a single archive member under ``dest_dir``.

    Raises:
        ExtractEntryError: Wrapping whatever failed while writing the entry.
        UnsafeEntryError: If ``strict`` and the entry name is unsafe.
    """
    entry = ArchiveEntry.from_zipinfo(info)

    if is_unsafe_entry_name(entry.name):
        if strict:
            raise UnsafeEntryError(entry.name, "entry path escapes the destination")
        logger.warning("Archive entry %r escapes the destination directory", entry.name)

    target = os.path.join(dest_dir, entry.name)
    logger.debug("Extracting %s -> %s (mode %o)", entry.name, target, entry.mode)

    try:
        if entry.is_dir:
            os.makedirs(target, entry.mode, exist_ok=True)
            # The directory may already exist from an earlier file entry or a prior run
            os.chmod(target, entry.mode)
            return

        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, settings.dir_mode, exist_ok=True)

        with archive.open(info) as src:
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, entry.mode)
            with os.fdopen(fd, "wb") as dst:
                shutil.copyfileobj(src, dst, settings.buffer_size)
        os.chmod(target, entry.mode)
    except _ENTRY_ERRORS as e:
        raise ExtractEntryError(entry.name, str(e)) from e


def _close_quietly(archive: zipfile.ZipFile) -> None:
    """Close ``archive`` while another error is propagating."""
    try:
        archive.close()
    except OSError as e:
        logger.warning("Failed to close archive after error: %s", e)
