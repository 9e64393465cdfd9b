"""
Pydantic schemas for API requests and responses.

All request/response models serialize with camelCase field names.
"""

from .auth import AuthResponse, LoginRequest, RegisterRequest, TenantSummary, UserResponse
from .common import HealthCheckResponse, StatusResponse
from .invitations import (
    AcceptInviteRequest,
    InvitationListItem,
    InviteRequest,
    InviteResponse,
)
from .notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate, Pagination
from .tenant import TenantInfoResponse, TenantUserResponse, UpgradeResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "AuthResponse",
    "UserResponse",
    "TenantSummary",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListResponse",
    "Pagination",
    # Invitation schemas
    "InviteRequest",
    "AcceptInviteRequest",
    "InviteResponse",
    "InvitationListItem",
    # Tenant schemas
    "TenantInfoResponse",
    "UpgradeResponse",
    "TenantUserResponse",
    # Common schemas
    "StatusResponse",
    "HealthCheckResponse",
]
