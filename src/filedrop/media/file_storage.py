"""Filesystem access confined to the flat upload directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO

from starlette.datastructures import UploadFile

from .media_errors import (
    FilenameCollisionError,
    InvalidFilenameError,
    StorageIOError,
    StoredFileNotFoundError,
)
from .media_models import StoredFile

CHUNK_SIZE = 1 * 1024 * 1024  # 1 MiB

_FORBIDDEN_SEQUENCES = ("/", "\\", "\x00", "..")


@dataclass(slots=True)
class FileStorage:
    """Create, stat, read and remove files inside ``root``."""

    root: Path
    chunk_size_bytes: int = CHUNK_SIZE
    log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def ensure_structure(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def path_for(self, name: str) -> Path:
        """Resolve ``name`` to a path that is a direct child of ``root``."""
        if not name or name in {".", ".."}:
            raise InvalidFilenameError(name)
        if any(seq in name for seq in _FORBIDDEN_SEQUENCES):
            raise InvalidFilenameError(name)

        root = self.root.resolve()
        candidate = (root / name).resolve()
        if candidate.parent != root:
            raise InvalidFilenameError(name)
        return candidate

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_file()
        except InvalidFilenameError:
            return False

    def stat(self, name: str) -> StoredFile:
        path = self.path_for(name)
        try:
            info = path.stat()
        except FileNotFoundError as exc:
            raise StoredFileNotFoundError(name) from exc
        except OSError as exc:
            raise StorageIOError(f"stat failed for {name}") from exc
        if not path.is_file():
            raise StoredFileNotFoundError(name)

        try:
            modified_at: datetime | None = datetime.fromtimestamp(info.st_mtime, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            modified_at = None
        return StoredFile(
            name=name,
            path=path,
            size_bytes=info.st_size,
            modified_at=modified_at,
        )

    def open_read(self, name: str) -> BinaryIO:
        path = self.path_for(name)
        try:
            return path.open("rb")
        except FileNotFoundError as exc:
            raise StoredFileNotFoundError(name) from exc
        except OSError as exc:
            raise StorageIOError(f"open failed for {name}") from exc

    async def save_stream(self, name: str, upload: UploadFile) -> StoredFile:
        """Exclusively create ``name`` and copy the upload into it chunk by chunk."""
        target = self.path_for(name)
        try:
            sink = target.open("xb")
        except FileExistsError as exc:
            raise FilenameCollisionError(name) from exc
        except OSError as exc:
            self.log.error("storage.write.open_failed", extra={"stored_name": name}, exc_info=exc)
            raise StorageIOError(f"cannot create {name}") from exc

        size = 0
        try:
            with sink:
                while True:
                    chunk = await upload.read(self.chunk_size_bytes)
                    if not chunk:
                        break
                    sink.write(chunk)
                    size += len(chunk)
        except OSError as exc:
            target.unlink(missing_ok=True)
            self.log.error(
                "storage.write.failed",
                extra={"stored_name": name, "bytes_written": size},
                exc_info=exc,
            )
            raise StorageIOError(f"write failed for {name}") from exc
        except BaseException:
            target.unlink(missing_ok=True)
            raise

        self.log.info("storage.write.done", extra={"stored_name": name, "size_bytes": size})
        return self.stat(name)

    def remove(self, name: str) -> None:
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise StoredFileNotFoundError(name) from exc
        except OSError as exc:
            self.log.error("storage.remove.failed", extra={"stored_name": name}, exc_info=exc)
            raise StorageIOError(f"remove failed for {name}") from exc
        self.log.info("storage.remove.done", extra={"stored_name": name})


__all__ = ["CHUNK_SIZE", "FileStorage"]
