"""Session token issuing and verification."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import get_settings
from ..core.exceptions import InvalidTokenError

TOKEN_TYPE = "access"


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a session token."""

    user_id: uuid.UUID
    tenant_id: uuid.UUID
    tenant_slug: str
    role: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "sub": str(self.user_id),
            "tenant_id": str(self.tenant_id),
            "tenant_slug": self.tenant_slug,
            "role": self.role,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "TokenClaims":
        try:
            return cls(
                user_id=uuid.UUID(payload["sub"]),
                tenant_id=uuid.UUID(payload["tenant_id"]),
                tenant_slug=str(payload["tenant_slug"]),
                role=str(payload["role"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Token is missing identity claims") from e


def create_access_token(claims: TokenClaims, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a session token for the given claims."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = claims.to_payload()
    to_encode.update({"iat": now, "exp": now + expires_delta, "type": TOKEN_TYPE})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """Check signature, expiry and type; return the embedded claims.

    Raises InvalidTokenError on any failure.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise InvalidTokenError() from e

    if payload.get("type") != TOKEN_TYPE:
        raise InvalidTokenError()

    return TokenClaims.from_payload(payload)
