"""Invitation service implementation."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import TokenClaims, hash_password
from ..exceptions import ConflictError, ValidationError, store_errors
from ..logging import get_logger
from ..models.user import Role
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse
from ..schemas.invitations import (
    AcceptInviteRequest,
    InvitationCreated,
    InvitationCreator,
    InvitationListItem,
    InviteRequest,
    InviteResponse,
)
from .auth_service import issue_session
from .interfaces import IInvitationService
from .validators import is_blank

logger = get_logger("services.invitations")

INVITE_TOKEN_BYTES = 32


def generate_invite_token() -> str:
    """64 hex chars of CSPRNG output."""
    return secrets.token_hex(INVITE_TOKEN_BYTES)


class InvitationService(IInvitationService):
    """Issues and consumes tenant invitations.

    An invitation moves from unused to used exactly once. Expired or used
    invitations are terminal.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.invitation_repo = InvitationRepository(session)
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    def build_invite_link(self, token: str) -> str:
        return f"{self.settings.frontend_url.rstrip('/')}/invite/accept/{token}"

    @store_errors("Error sending invitation")
    async def invite_user(self, claims: TokenClaims, request: InviteRequest) -> InviteResponse:
        if is_blank(request.email):
            raise ValidationError("Email is required")

        if await self.user_repo.is_email_taken(request.email):
            raise ConflictError("User with this email already exists")

        now = datetime.now(timezone.utc)
        if await self.invitation_repo.find_pending(request.email, claims.tenant_id, now):
            raise ConflictError("Invitation already sent to this email")

        token = generate_invite_token()
        invitation = await self.invitation_repo.create_invitation(
            {
                "email": request.email,
                "token": token,
                "tenant_id": claims.tenant_id,
                "created_by": claims.user_id,
                "expires_at": now + timedelta(hours=self.settings.invitation_expire_hours),
            }
        )
        await self.session.commit()

        logger.info(
            "Invitation created",
            extra={"tenant_id": str(claims.tenant_id), "invitation_id": str(invitation.id)},
        )
        # No mail transport; the link is handed back to the admin
        return InviteResponse(
            message="Invitation sent successfully",
            invitation=InvitationCreated(
                id=invitation.id,
                email=invitation.email,
                expires_at=invitation.expires_at,
                invite_link=self.build_invite_link(token),
            ),
        )

    @store_errors("Error accepting invitation")
    async def accept_invitation(self, token: str, request: AcceptInviteRequest) -> AuthResponse:
        if not token:
            raise ValidationError("Invalid invitation token")
        if is_blank(request.password):
            raise ValidationError("Password is required")

        invitation = await self.invitation_repo.get_by_token(token, for_update=True)
        if invitation is None or not invitation.can_be_accepted():
            await self.session.rollback()
            raise ValidationError("Invalid or expired invitation")

        tenant = invitation.tenant
        invitation_id = invitation.id
        try:
            user = await self.user_repo.create_user(
                {
                    "email": invitation.email,
                    "password_hash": hash_password(request.password),
                    "role": Role.MEMBER,
                    "tenant_id": invitation.tenant_id,
                }
            )
            await self.invitation_repo.mark_used(invitation)
            await self.session.commit()
        except IntegrityError as e:
            # someone registered this email between invite and accept
            await self.session.rollback()
            logger.warning(
                "Invitation accept conflict", extra={"invitation_id": str(invitation_id)}
            )
            raise ConflictError("User with this email already exists") from e

        logger.info(
            "Invitation accepted",
            extra={"tenant_id": str(tenant.id), "user_id": str(user.id)},
        )
        return issue_session(user, tenant)

    @store_errors("Error fetching invitations")
    async def list_invitations(self, claims: TokenClaims) -> List[InvitationListItem]:
        invitations = await self.invitation_repo.list_for_tenant(claims.tenant_id)
        return [
            InvitationListItem(
                id=inv.id,
                email=inv.email,
                used=inv.used,
                expires_at=inv.expires_at,
                created_at=inv.created_at,
                creator=InvitationCreator(email=inv.creator.email),
            )
            for inv in invitations
        ]
