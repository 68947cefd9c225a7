"""Helpers for serving stored files to anyone holding the public URL."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fastapi.responses import FileResponse

from ..api.errors import internal_error, not_found_error
from .file_links import build_file_url
from .file_preview import FilePreview, build_file_preview
from .file_storage import FileStorage
from .media_errors import InvalidFilenameError, StorageIOError, StoredFileNotFoundError
from .media_models import StoredFile


@dataclass(slots=True)
class PublicFileService:
    """Expose stored files and their preview metadata."""

    storage: FileStorage
    public_url: str
    log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def _lookup(self, name: str) -> StoredFile:
        try:
            return self.storage.stat(name)
        except InvalidFilenameError as exc:
            self.log.warning("public.file.invalid_name", extra={"stored_name": name})
            raise not_found_error() from exc
        except StoredFileNotFoundError as exc:
            self.log.debug("public.file.not_found", extra={"stored_name": name})
            raise not_found_error() from exc
        except StorageIOError as exc:
            self.log.exception("public.file.stat_failed", extra={"stored_name": name})
            raise internal_error() from exc

    def open_file(self, name: str) -> FileResponse:
        """Return an inline ``FileResponse`` for ``name`` or raise :class:`ApiError`."""
        stored = self._lookup(name)
        return FileResponse(
            path=stored.path,
            media_type=stored.content_type,
            filename=stored.name,
            content_disposition_type="inline",
        )

    def describe(self, name: str) -> FilePreview:
        stored = self._lookup(name)
        return build_file_preview(stored, build_file_url(self.public_url, stored.name))


__all__ = ["PublicFileService"]
