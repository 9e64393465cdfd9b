"""Password hashing utilities."""

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256 so long passwords are not truncated at 72 bytes
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")

# Verified against when the user does not exist, so unknown emails cost a full hash check
_DUMMY_HASH = None


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify(plain_password: str) -> bool:
    """Burn the same work as a real verification. Always returns False."""
    global _DUMMY_HASH
    if _DUMMY_HASH is None:
        _DUMMY_HASH = pwd_context.hash("not-a-real-password")
    pwd_context.verify(plain_password, _DUMMY_HASH)
    return False
