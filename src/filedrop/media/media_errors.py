"""Domain-specific exceptions for stored files."""


class StorageError(Exception):
    """Base class for storage-related errors."""


class InvalidFilenameError(StorageError):
    """Raised when a filename would escape the upload directory."""


class StoredFileNotFoundError(StorageError):
    """Raised when the requested file does not exist."""


class FilenameCollisionError(StorageError):
    """Raised when a generated filename is already taken."""


class StorageIOError(StorageError):
    """Raised when the filesystem fails to write, read or remove a file."""
