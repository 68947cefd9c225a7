"""Exceptions raised while accepting uploads."""


class UploadError(Exception):
    """Base class for upload-related errors."""


class MalformedUploadError(UploadError):
    """Raised when the request body carries no usable file field."""


class InvalidDeleteTokenError(UploadError):
    """Raised when a delete token does not match the filename."""
