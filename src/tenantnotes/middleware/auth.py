"""Authentication middleware: bearer token extraction and role gates."""

from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import AuthenticationError, AuthorizationError
from ..core.models.user import Role
from ..security import TokenClaims, decode_access_token


class JWTBearer(HTTPBearer):
    """Bearer token authentication that resolves to the token's claims."""

    def __init__(self):
        # errors are raised here so they come out as 401, not HTTPBearer's default
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> TokenClaims:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise AuthenticationError("Access token required")
        if credentials.scheme.lower() != "bearer":
            raise AuthenticationError("Invalid authentication scheme")

        return decode_access_token(credentials.credentials)


jwt_bearer = JWTBearer()


async def get_current_principal(claims: TokenClaims = Depends(jwt_bearer)) -> TokenClaims:
    """Identity of the authenticated caller: user, tenant, tenant slug, role."""
    return claims


def require_roles(*roles: Role) -> Callable:
    """Build a dependency that only lets the listed roles through.

    Usage: ``claims: TokenClaims = Depends(require_roles(Role.ADMIN))``.
    """
    allowed = {role.value for role in roles}

    async def role_gate(claims: TokenClaims = Depends(get_current_principal)) -> TokenClaims:
        if claims.role not in allowed:
            raise AuthorizationError("Insufficient permissions")
        return claims

    return role_gate


require_admin = require_roles(Role.ADMIN)
