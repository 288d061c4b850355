"""Compressed-content detection.

Classifies the leading bytes of a seekable stream with libmagic (via
python-magic) and reports whether they belong to a gzip or zip container.
"""

import logging
from typing import BinaryIO

import magic

logger = logging.getLogger(__name__)

# Number of leading bytes inspected, matching the MIME sniffing window
SNIFF_WINDOW = 512

COMPRESSED_MIME_TYPES = frozenset(
    {
        "application/gzip",
        "application/x-gzip",
        "application/zip",
        "application/java-archive",
    }
)

# Zip containers libmagic reports under their own document type
ZIP_FAMILY_PREFIXES = (
    "application/vnd.oasis.opendocument.",
    "application/vnd.openxmlformats-officedocument.",
)

# Leading bytes of a zip local file header and of a deflated gzip member
ZIP_SIGNATURE = b"PK\x03\x04"
GZIP_SIGNATURE = b"\x1f\x8b\x08"


def is_compressed_mime_type(mime_type: str) -> bool:
    """Check whether a MIME type names a gzip or zip-family container."""
    return (
        mime_type in COMPRESSED_MIME_TYPES
        or mime_type.endswith("+zip")
        or mime_type.startswith(ZIP_FAMILY_PREFIXES)
    )


def sniff_mime_type(data: bytes) -> str:
    """Return the MIME type libmagic assigns to ``data``.

    Args:
        data: Leading bytes of some content; may be shorter than the window.

    Returns:
        MIME type string such as "application/zip".
    """
    return magic.from_buffer(data[:SNIFF_WINDOW], mime=True)


def is_compressed(source: BinaryIO | None) -> bool:
    """Check whether a stream holds gzip- or zip-compressed content.

    Reads up to SNIFF_WINDOW bytes and then rewinds the stream to offset
    0, whatever the outcome. Failures are logged and reported as "not
    compressed"; nothing is raised.

    Args:
        source: Seekable binary stream, or None.

    Returns:
        True if the content is gzip or any zip-based container, False otherwise.
    """
    if source is None:
        return False

    try:
        data = source.read(SNIFF_WINDOW)
        mime_type = sniff_mime_type(data)
    except (OSError, ValueError, magic.MagicException) as e:
        logger.warning("Could not sniff content type: %s", e)
        return False
    finally:
        _rewind(source)

    logger.debug("Sniffed content type %s", mime_type)
    if is_compressed_mime_type(mime_type):
        return True
    # Zip-based formats libmagic names by their content still start with a zip header
    return isinstance(data, bytes) and data.startswith((ZIP_SIGNATURE, GZIP_SIGNATURE))


def _rewind(source: BinaryIO) -> None:
    """Seek back to the start of ``source``, logging failures."""
    try:
        source.seek(0)
    except (OSError, ValueError) as e:
        logger.warning("Could not rewind stream after sniffing: %s", e)
