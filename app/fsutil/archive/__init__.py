"""Archive detection and extraction module.

This module provides content sniffing for compressed streams and
extraction of zip archives onto the filesystem.
"""

from fsutil.archive.extract import extract, is_unsafe_entry_name, list_entries
from fsutil.archive.sniff import (
    COMPRESSED_MIME_TYPES,
    SNIFF_WINDOW,
    is_compressed,
    is_compressed_mime_type,
    sniff_mime_type,
)

__all__ = [
    "COMPRESSED_MIME_TYPES",
    "SNIFF_WINDOW",
    "extract",
    "is_compressed",
    "is_compressed_mime_type",
    "is_unsafe_entry_name",
    "list_entries",
    "sniff_mime_type",
]
