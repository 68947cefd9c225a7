"""HTTP routes for uploading files and deleting them with signed links."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from ..api.errors import bad_request_error, internal_error, not_found_error, unauthorized_error
from ..auth.auth_dependencies import require_upload_credential
from ..media.media_errors import InvalidFilenameError, StorageIOError, StoredFileNotFoundError
from .upload_errors import InvalidDeleteTokenError, MalformedUploadError
from .upload_schemas import UploadReceipt
from .upload_service import UploadService

router = APIRouter(tags=["upload"])
logger = logging.getLogger(__name__)


def get_upload_service(request: Request) -> UploadService:
    """Fetch upload service from application state."""
    try:
        return request.app.state.upload_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("UploadService is not configured") from exc


async def _read_form(request: Request) -> FormData:
    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/form-data"):
        raise MalformedUploadError("expected multipart/form-data body")
    try:
        return await request.form()
    except (MultiPartException, StarletteHTTPException) as exc:
        raise MalformedUploadError("unreadable multipart body") from exc


def _first_file_field(form: FormData) -> UploadFile:
    for _, value in form.multi_items():
        if isinstance(value, UploadFile):
            return value
    raise MalformedUploadError("no file field in multipart body")


@router.post(
    "/upload",
    response_model=UploadReceipt,
    dependencies=[Depends(require_upload_credential)],
)
async def upload_file(
    request: Request,
    service: UploadService = Depends(get_upload_service),
) -> UploadReceipt:
    """Store the first file field of the multipart body and return its links."""
    try:
        form = await _read_form(request)
    except MalformedUploadError as exc:
        logger.warning("upload.malformed", extra={"reason": str(exc)})
        raise bad_request_error("Malformed upload request.") from exc

    try:
        try:
            upload = _first_file_field(form)
        except MalformedUploadError as exc:
            logger.warning("upload.malformed", extra={"reason": str(exc)})
            raise bad_request_error("Malformed upload request.") from exc

        try:
            return await service.store_upload(upload)
        except StorageIOError as exc:
            logger.exception("upload.storage_failed")
            raise internal_error("Failed to store file.") from exc
    finally:
        await form.close()


@router.delete(
    "/delete/{token}/{filename}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
)
def delete_file(
    token: str,
    filename: str,
    service: UploadService = Depends(get_upload_service),
) -> PlainTextResponse:
    """Delete ``filename`` when ``token`` is its valid delete capability."""
    try:
        service.delete_file(filename, token)
    except InvalidDeleteTokenError as exc:
        raise unauthorized_error("Invalid delete token") from exc
    except (StoredFileNotFoundError, InvalidFilenameError) as exc:
        raise not_found_error() from exc
    except StorageIOError as exc:
        logger.exception("delete.storage_failed", extra={"stored_name": filename})
        raise internal_error("Failed to delete file.") from exc
    return PlainTextResponse("File deleted successfully")


__all__ = ["get_upload_service", "router"]
