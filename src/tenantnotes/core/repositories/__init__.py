"""Repository layer for data access."""

from .invitation_repository import InvitationRepository
from .note_repository import NoteRepository
from .tenant_repository import TenantRepository
from .user_repository import UserRepository

__all__ = [
    "TenantRepository",
    "UserRepository",
    "NoteRepository",
    "InvitationRepository",
]
