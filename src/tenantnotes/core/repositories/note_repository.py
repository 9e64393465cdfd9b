"""Note repository for database operations."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


class NoteRepository:
    """Repository for note database operations.

    Every lookup is scoped by tenant; there is deliberately no way to fetch
    a note by id alone.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note (flushed, not committed)."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.flush()
        return note

    async def get_in_tenant(self, note_id: UUID, tenant_id: UUID) -> Optional[Note]:
        """Get note by ID if it belongs to the tenant."""
        stmt = (
            select(Note)
            .where(Note.id == note_id, Note.tenant_id == tenant_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_for_tenant(self, tenant_id: UUID) -> int:
        stmt = select(func.count(Note.id)).where(Note.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_for_tenant(
        self, tenant_id: UUID, page: int = 1, per_page: int = 10
    ) -> Tuple[List[Note], int]:
        """List tenant notes newest first with pagination."""
        offset = (page - 1) * per_page

        total_count = await self.count_for_tenant(tenant_id)

        stmt = (
            select(Note)
            .where(Note.tenant_id == tenant_id)
            .order_by(desc(Note.created_at), desc(Note.id))
            .offset(offset)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total_count

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply field changes to a note."""
        for key, value in update_data.items():
            setattr(note, key, value)
        await self.session.flush()
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete a note."""
        await self.session.delete(note)
        await self.session.flush()
