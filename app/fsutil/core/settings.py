"""Tunables shared by the extraction and copy operations.

Operations accept an optional ``FsutilSettings``; when omitted they use
the model defaults.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DIR_MODE = 0o755
DEFAULT_BUFFER_SIZE = 1024 * 1024


class FsutilSettings(BaseModel):
    """Tunables shared by the extraction and copy operations.

    Attributes:
        dir_mode: Permission bits for the extraction root and for parent
            directories implied by file entries.
        buffer_size: Chunk size in bytes for streaming copies.
        reject_unsafe_entries: Refuse archive entries that are absolute or
            climb out of the destination with ``..``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dir_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode for directories created by extraction"),
    ] = DEFAULT_DIR_MODE
    buffer_size: Annotated[
        int,
        Field(ge=4096, le=64 * 1024 * 1024, description="Copy chunk size in bytes"),
    ] = DEFAULT_BUFFER_SIZE
    reject_unsafe_entries: Annotated[
        bool,
        Field(description="Reject archive entries escaping the destination"),
    ] = False


def resolve_settings(settings: FsutilSettings | None) -> FsutilSettings:
    """Return ``settings`` or the built-in defaults when None."""
    return settings if settings is not None else FsutilSettings()
