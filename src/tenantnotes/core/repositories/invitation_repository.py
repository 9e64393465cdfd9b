"""Invitation repository for database operations."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.invitation import Invitation


class InvitationRepository:
    """Repository for invitation database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_invitation(self, invitation_data: dict) -> Invitation:
        """Create new invitation (flushed, not committed)."""
        invitation = Invitation(**invitation_data)
        self.session.add(invitation)
        await self.session.flush()
        return invitation

    async def get_by_token(self, token: str, for_update: bool = False) -> Optional[Invitation]:
        """Get invitation by its secret token.

        With ``for_update`` the invitation row stays locked until commit so
        two concurrent accepts cannot both see it unused.
        """
        stmt = select(Invitation).where(Invitation.token == token)
        if for_update:
            stmt = stmt.with_for_update(of=Invitation)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_pending(self, email: str, tenant_id: UUID, now: datetime) -> Optional[Invitation]:
        """Unused, unexpired invitation for this email in this tenant."""
        stmt = (
            select(Invitation)
            .where(
                Invitation.email == email,
                Invitation.tenant_id == tenant_id,
                Invitation.used.is_(False),
                Invitation.expires_at > now,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_for_tenant(self, tenant_id: UUID) -> List[Invitation]:
        """All invitations of a tenant, newest first."""
        stmt = (
            select(Invitation)
            .where(Invitation.tenant_id == tenant_id)
            .order_by(desc(Invitation.created_at))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def mark_used(self, invitation: Invitation) -> Invitation:
        invitation.used = True
        await self.session.flush()
        return invitation
