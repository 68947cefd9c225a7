"""Public file endpoints: raw download and HTML info page."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..media.public_file_service import PublicFileService

TEMPLATES = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def build_public_files_router(service: PublicFileService) -> APIRouter:
    router = APIRouter(tags=["public-files"])

    @router.get("/file/{filename}", name="public:file-raw")
    def get_file(filename: str):
        return service.open_file(filename)

    @router.get("/{filename}", name="public:file-info", response_class=HTMLResponse)
    def get_file_info(request: Request, filename: str):
        preview = service.describe(filename)
        return TEMPLATES.TemplateResponse(
            request,
            "file_info.html",
            {"preview": preview},
        )

    return router
