"""Common authentication dependencies for FastAPI routers."""

from __future__ import annotations

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..api.errors import unauthorized_error
from ..config import AppConfig
from ..security.capability import constant_time_equals

security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


def get_config(request: Request) -> AppConfig:
    try:
        return request.app.state.config  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("AppConfig is not configured") from exc


def require_upload_credential(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    config: AppConfig = Depends(get_config),
) -> None:
    """Reject the request unless it carries ``Bearer <upload password>``."""
    if credentials is None:
        logger.warning("upload.unauthorized", extra={"reason": "missing_credential"})
        raise unauthorized_error("Invalid password.")

    if not constant_time_equals(credentials.credentials, config.upload_password):
        logger.warning("upload.unauthorized", extra={"reason": "wrong_credential"})
        raise unauthorized_error("Invalid password.")


__all__ = ["get_config", "require_upload_credential"]
