"""HTTP-facing helpers shared by filedrop routers."""

from .errors import ApiError, api_error_handler

__all__ = ["ApiError", "api_error_handler"]
