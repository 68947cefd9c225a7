"""Domain service for storing uploads and honouring signed deletes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from starlette.datastructures import UploadFile

from ..media.file_links import build_delete_url, build_file_url, build_info_url
from ..media.file_storage import FileStorage
from ..media.filenames import ID_LENGTH, build_stored_name
from ..media.media_errors import FilenameCollisionError, StorageIOError
from ..media.media_models import StoredFile
from ..security.capability import DeleteTokenSigner
from .upload_errors import InvalidDeleteTokenError
from .upload_schemas import UploadReceipt

logger = logging.getLogger(__name__)

MAX_NAME_ATTEMPTS = 3


@dataclass(slots=True)
class UploadService:
    """Coordinates naming, storage and link signing for uploads."""

    storage: FileStorage
    signer: DeleteTokenSigner
    public_url: str
    id_length: int = ID_LENGTH
    max_name_attempts: int = MAX_NAME_ATTEMPTS
    log: logging.Logger = field(default_factory=lambda: logger)

    async def store_upload(self, upload: UploadFile) -> UploadReceipt:
        """Persist ``upload`` under a fresh random name and return its links."""
        stored = await self._store_with_fresh_name(upload)
        receipt = self.build_receipt(stored)
        self.log.info(
            "upload.stored",
            extra={
                "stored_name": stored.name,
                "original_name": upload.filename,
                "size_bytes": stored.size_bytes,
                "url": receipt.url,
            },
        )
        return receipt

    async def _store_with_fresh_name(self, upload: UploadFile) -> StoredFile:
        for attempt in range(1, self.max_name_attempts + 1):
            name = build_stored_name(upload.filename, length=self.id_length)
            try:
                return await self.storage.save_stream(name, upload)
            except FilenameCollisionError:
                self.log.warning(
                    "upload.name_collision",
                    extra={"stored_name": name, "attempt": attempt},
                )
        raise StorageIOError(
            f"no free filename after {self.max_name_attempts} attempts"
        )

    def build_receipt(self, stored: StoredFile) -> UploadReceipt:
        token = self.signer.sign(stored.name)
        return UploadReceipt(
            url=build_file_url(self.public_url, stored.name),
            delete_url=build_delete_url(self.public_url, token, stored.name),
            info_url=build_info_url(self.public_url, stored.name),
            size_bytes=stored.size_bytes,
        )

    def delete_file(self, name: str, token: str) -> None:
        """Remove ``name`` once ``token`` is verified.

        The token is checked before the filesystem is touched so an invalid
        token never reveals whether the file exists.
        """
        if not self.signer.verify(name, token):
            self.log.warning("delete.unauthorized", extra={"stored_name": name})
            raise InvalidDeleteTokenError(name)
        self.storage.remove(name)
        self.log.info("delete.done", extra={"stored_name": name})


__all__ = ["MAX_NAME_ATTEMPTS", "UploadService"]
