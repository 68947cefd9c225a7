"""Stateless delete capability tokens.

A token is ``HMAC-SHA256(secret, filename)`` rendered as lowercase hex. It is
recomputed on every verification, so nothing about issued tokens is stored:
the token itself is the authorisation, scoped to exactly one filename.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from hashlib import sha256

TOKEN_LENGTH = sha256().digest_size * 2


def generate_delete_token(filename: str, secret: str) -> str:
    """Return the hex HMAC-SHA256 of ``filename`` keyed with ``secret``."""

    return hmac.new(secret.encode("utf-8"), filename.encode("utf-8"), sha256).hexdigest()


def constant_time_equals(left: str, right: str) -> bool:
    """Compare two strings without leaking the first mismatch position."""

    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


def verify_delete_token(filename: str, token: str, secret: str) -> bool:
    """Check ``token`` against the expected token for ``filename``.

    Never raises: malformed input is just another mismatch.
    """

    expected = generate_delete_token(filename, secret)
    return constant_time_equals(expected, token)


@dataclass(frozen=True, slots=True)
class DeleteTokenSigner:
    """Bind the shared secret once and sign/verify filenames with it."""

    secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("delete token secret must not be empty")

    def sign(self, filename: str) -> str:
        return generate_delete_token(filename, self.secret)

    def verify(self, filename: str, token: str) -> bool:
        return verify_delete_token(filename, token, self.secret)


__all__ = [
    "TOKEN_LENGTH",
    "DeleteTokenSigner",
    "constant_time_equals",
    "generate_delete_token",
    "verify_delete_token",
]
