"""User repository for database operations."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..models.user import User


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user (flushed, not committed)."""
        user = User(**user_data)
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_in_tenant(self, user_id: UUID, tenant_id: UUID) -> Optional[User]:
        """Get user by ID only if it belongs to the tenant."""
        stmt = select(User).where(User.id == user_id, User.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        """Check if email exists in any tenant."""
        return await self.get_by_email(email) is not None

    async def list_with_note_counts(self, tenant_id: UUID) -> List[Tuple[User, int]]:
        """Users of a tenant, newest first, each with the number of notes they wrote."""
        note_count = (
            select(func.count(Note.id))
            .where(Note.author_id == User.id)
            .correlate(User)
            .scalar_subquery()
        )
        stmt = (
            select(User, note_count.label("note_count"))
            .where(User.tenant_id == tenant_id)
            .order_by(desc(User.created_at))
        )
        result = await self.session.execute(stmt)
        return [(user, count) for user, count in result.all()]
