"""
Service layer: business rules on top of the repositories.
"""

from .interfaces import (
    IAuthService,
    IHealthService,
    IInvitationService,
    INoteService,
    ITenantService,
)

from .auth_service import AuthService
from .health_service import HealthService
from .invitation_service import InvitationService
from .note_service import NoteService
from .tenant_service import TenantService

__all__ = [
    # Interfaces
    "IAuthService",
    "IInvitationService",
    "INoteService",
    "ITenantService",
    "IHealthService",
    # Implementations
    "AuthService",
    "InvitationService",
    "NoteService",
    "TenantService",
    "HealthService",
]
