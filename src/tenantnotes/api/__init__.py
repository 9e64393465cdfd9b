"""API routers for Tenant Notes."""

from .auth import router as auth_router
from .health import router as health_router
from .invitations import router as invitations_router
from .notes import router as notes_router
from .tenant import router as tenant_router
from .tenant import slug_router as tenant_slug_router

__all__ = [
    "auth_router",
    "notes_router",
    "invitations_router",
    "tenant_router",
    "tenant_slug_router",
    "health_router",
]
