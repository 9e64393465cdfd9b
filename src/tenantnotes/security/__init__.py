"""Security utilities."""

from .jwt import TokenClaims, create_access_token, decode_access_token
from .password import dummy_verify, hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "TokenClaims",
    "create_access_token",
    "decode_access_token",
]
