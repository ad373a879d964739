"""Security utilities."""

from .jwt import (
    create_access_token,
    decode_access_token,
    get_username_from_token,
    is_token_expired,
)
from .password import dummy_verify, hash_password, needs_update, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "needs_update",
    "create_access_token",
    "decode_access_token",
    "is_token_expired",
    "get_username_from_token",
]
