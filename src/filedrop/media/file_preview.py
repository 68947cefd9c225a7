"""Preview metadata for the HTML file info page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .media_models import StoredFile

SIZE_SUFFIXES = ("B", "KB", "MB", "GB", "TB")
MODIFIED_FORMAT = "%Y-%m-%d %H:%M:%S"

# Player dimensions advertised to link unfurlers.
VIDEO_PLAYER_WIDTH = 996
VIDEO_PLAYER_HEIGHT = 626


def human_readable_size(size_bytes: int) -> str:
    """Render ``size_bytes`` with 1024-based units and two decimals."""
    size = float(size_bytes)
    index = 0
    while size >= 1024.0 and index < len(SIZE_SUFFIXES) - 1:
        size /= 1024.0
        index += 1
    return f"{size:.2f} {SIZE_SUFFIXES[index]}"


def format_modified(modified_at: datetime | None) -> str:
    if modified_at is None:
        return "Unknown"
    return modified_at.strftime(MODIFIED_FORMAT)


def preview_kind(content_type: str) -> str | None:
    """Return ``"image"``/``"video"`` for rich previews, ``None`` otherwise."""
    if content_type.startswith("image/"):
        return "image"
    if content_type.startswith("video/"):
        return "video"
    return None


@dataclass(frozen=True, slots=True)
class FilePreview:
    name: str
    file_url: str
    content_type: str
    size_display: str
    modified_display: str
    kind: str | None
    player_width: int = VIDEO_PLAYER_WIDTH
    player_height: int = VIDEO_PLAYER_HEIGHT

    @property
    def description(self) -> str:
        return f"Size: {self.size_display} · Last modified: {self.modified_display}"


def build_file_preview(stored: StoredFile, file_url: str) -> FilePreview:
    content_type = stored.content_type
    return FilePreview(
        name=stored.name,
        file_url=file_url,
        content_type=content_type,
        size_display=human_readable_size(stored.size_bytes),
        modified_display=format_modified(stored.modified_at),
        kind=preview_kind(content_type),
    )


__all__ = [
    "FilePreview",
    "build_file_preview",
    "format_modified",
    "human_readable_size",
    "preview_kind",
]
