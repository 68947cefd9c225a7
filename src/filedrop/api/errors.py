"""Reusable error primitives for API exception handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from fastapi import Request, status
from fastapi.responses import PlainTextResponse


@dataclass(slots=True)
class ApiError(Exception):
    """Structured application-level error for HTTP handlers.

    Bodies are plain text and carry only ``message``; internal details stay in
    the logs.
    """

    status_code: int
    code: str
    message: str
    headers: Mapping[str, str] | None = None

    def to_response(self) -> PlainTextResponse:
        """Materialise the error into a ``PlainTextResponse`` instance."""

        return PlainTextResponse(
            self.message,
            status_code=self.status_code,
            headers=dict(self.headers or {}),
        )


async def api_error_handler(_: Request, exc: ApiError) -> PlainTextResponse:
    """Convert :class:`ApiError` exceptions into plain-text responses."""

    return exc.to_response()


def unauthorized_error(message: str) -> ApiError:
    """Return an :class:`ApiError` representing an authentication failure."""

    return ApiError(status.HTTP_401_UNAUTHORIZED, "unauthorized", message)


def bad_request_error(message: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, "bad_request", message)


def not_found_error(message: str = "File not found") -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, "not_found", message)


def internal_error(message: str = "Internal server error") -> ApiError:
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", message)


__all__ = [
    "ApiError",
    "api_error_handler",
    "bad_request_error",
    "internal_error",
    "not_found_error",
    "unauthorized_error",
]
