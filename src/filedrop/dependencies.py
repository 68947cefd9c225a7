"""Dependency wiring helpers."""

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .api.errors import ApiError, api_error_handler
from .config import AppConfig
from .media.file_storage import FileStorage
from .media.public_file_service import PublicFileService
from .public.public_files_router import build_public_files_router
from .security.capability import DeleteTokenSigner
from .upload.upload_api import router as upload_router
from .upload.upload_service import UploadService

HEALTH_MESSAGE = "Still alive"


def include_routers(app: FastAPI, config: AppConfig) -> None:
    """Mount module routers and attach services."""
    storage = FileStorage(config.upload_dir, chunk_size_bytes=config.chunk_size_bytes)
    storage.ensure_structure()
    signer = DeleteTokenSigner(config.upload_password)

    upload_service = UploadService(
        storage=storage,
        signer=signer,
        public_url=config.public_url,
    )
    public_file_service = PublicFileService(storage=storage, public_url=config.public_url)

    app.state.config = config
    app.state.upload_service = upload_service
    app.state.public_file_service = public_file_service

    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]

    @app.get("/", tags=["health"], response_class=PlainTextResponse)
    def healthz() -> str:
        return HEALTH_MESSAGE

    app.include_router(upload_router)
    # Catch-all ``/{filename}`` must be registered last.
    app.include_router(build_public_files_router(public_file_service))
