"""Response models for the upload API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UploadReceipt(BaseModel):
    """Links handed back to the uploader."""

    success: bool = True
    url: str = Field(description="Raw download URL of the stored file.")
    delete_url: str = Field(description="Signed URL that deletes the stored file.")
    info_url: str = Field(description="HTML preview page for link unfurling.")
    size_bytes: int = Field(ge=0)
