"""Security primitives (delete capability tokens, credential checks)."""

from .capability import (
    DeleteTokenSigner,
    constant_time_equals,
    generate_delete_token,
    verify_delete_token,
)

__all__ = [
    "DeleteTokenSigner",
    "constant_time_equals",
    "generate_delete_token",
    "verify_delete_token",
]
