"""Value objects describing stored files."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def guess_content_type(filename: str) -> str:
    """Best-effort MIME type derived from the filename extension."""
    guess, _ = mimetypes.guess_type(filename, strict=False)
    return guess or DEFAULT_CONTENT_TYPE


@dataclass(frozen=True, slots=True)
class StoredFile:
    """Snapshot of a file in the upload directory."""

    name: str
    path: Path
    size_bytes: int
    modified_at: datetime | None

    @property
    def content_type(self) -> str:
        return guess_content_type(self.name)
