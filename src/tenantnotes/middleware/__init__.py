"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_principal, require_admin, require_roles

__all__ = ["JWTBearer", "get_current_principal", "require_roles", "require_admin"]
