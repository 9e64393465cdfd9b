"""
Service interfaces for the Tenant Notes application.

Every method that acts on behalf of a signed-in user takes the caller's
``TokenClaims``; tenant scoping is derived from them, never from input.
"""

from abc import ABC, abstractmethod
from typing import List, Union

from ...security.jwt import TokenClaims
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.invitations import (
    AcceptInviteRequest,
    InvitationListItem,
    InviteRequest,
    InviteResponse,
)
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..schemas.tenant import TenantInfoResponse, TenantUserResponse, UpgradeResponse


class IAuthService(ABC):
    """Login, organization sign-up and current-user lookup."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a session token."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Create a tenant with its first admin."""

    @abstractmethod
    async def get_current_user(self, claims: TokenClaims) -> UserResponse:
        """Get the signed-in user."""


class IInvitationService(ABC):
    """Invitation issue/accept/list."""

    @abstractmethod
    async def invite_user(self, claims: TokenClaims, request: InviteRequest) -> InviteResponse:
        """Issue an invitation into the caller's tenant."""

    @abstractmethod
    async def accept_invitation(self, token: str, request: AcceptInviteRequest) -> AuthResponse:
        """Consume an invitation and create the member account."""

    @abstractmethod
    async def list_invitations(self, claims: TokenClaims) -> List[InvitationListItem]:
        """All invitations of the caller's tenant."""


class INoteService(ABC):
    """Tenant-scoped note CRUD."""

    @abstractmethod
    async def create_note(self, claims: TokenClaims, request: NoteCreate) -> NoteResponse:
        """Create new note."""

    @abstractmethod
    async def list_notes(
        self, claims: TokenClaims, page: Union[int, str, None], limit: Union[int, str, None]
    ) -> NoteListResponse:
        """List tenant notes with pagination."""

    @abstractmethod
    async def get_note(self, claims: TokenClaims, note_id: str) -> NoteResponse:
        """Get note by ID."""

    @abstractmethod
    async def update_note(
        self, claims: TokenClaims, note_id: str, request: NoteUpdate
    ) -> NoteResponse:
        """Update existing note."""

    @abstractmethod
    async def delete_note(self, claims: TokenClaims, note_id: str) -> None:
        """Delete note."""


class ITenantService(ABC):
    """Tenant info, plan upgrade, member listing."""

    @abstractmethod
    async def get_tenant_info(self, claims: TokenClaims) -> TenantInfoResponse:
        """Tenant with usage stats."""

    @abstractmethod
    async def upgrade_tenant(self, claims: TokenClaims) -> UpgradeResponse:
        """Move the caller's tenant to the PRO plan."""

    @abstractmethod
    async def upgrade_tenant_by_slug(self, claims: TokenClaims, slug: str) -> UpgradeResponse:
        """Upgrade addressed by slug; only the caller's own tenant."""

    @abstractmethod
    async def list_tenant_users(self, claims: TokenClaims) -> List[TenantUserResponse]:
        """Tenant users with their note counts."""


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
