"""Random stored-filename generation."""

from __future__ import annotations

import secrets
import string

ID_ALPHABET = string.ascii_letters + string.digits + "_-"
ID_LENGTH = 8

_FORBIDDEN_EXTENSION_CHARS = frozenset("/\\\x00")


def generate_id(length: int = ID_LENGTH) -> str:
    """Return a URL-safe random identifier of ``length`` characters."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def extract_extension(original_filename: str | None) -> str:
    """Return the trailing dot-segment of the client filename, or ``""``.

    ``archive.tar.gz`` yields ``gz``; ``README`` and ``.bashrc`` yield nothing.
    """
    if not original_filename:
        return ""
    basename = original_filename.replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, extension = basename.rpartition(".")
    if not dot or not stem:
        return ""
    if any(ch in _FORBIDDEN_EXTENSION_CHARS for ch in extension):
        return ""
    return extension


def build_stored_name(original_filename: str | None, *, length: int = ID_LENGTH) -> str:
    """Combine a fresh identifier with the original extension, if any."""
    identifier = generate_id(length)
    extension = extract_extension(original_filename)
    if not extension:
        return identifier
    return f"{identifier}.{extension}"


__all__ = ["ID_ALPHABET", "ID_LENGTH", "build_stored_name", "extract_extension", "generate_id"]
