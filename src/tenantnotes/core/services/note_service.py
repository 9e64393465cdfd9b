"""Note service implementation."""

from typing import Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import TokenClaims
from ..exceptions import AuthorizationError, NotFoundError, ValidationError, store_errors
from ..logging import get_logger
from ..models.note import Note
from ..models.tenant import Plan
from ..models.user import Role
from ..repositories.note_repository import NoteRepository
from ..repositories.tenant_repository import TenantRepository
from ..schemas.notes import (
    NoteAuthor,
    NoteCreate,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    Pagination,
)
from .interfaces import INoteService
from .validators import is_blank

logger = get_logger("services.notes")

NOTE_LIMIT_MESSAGE = "Note limit reached. Please upgrade to Pro for unlimited notes."


def _positive_int(value, default: int) -> int:
    """Parse a paging value; anything missing, unparseable or below 1 gives the default."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


def _parse_note_id(note_id: str) -> Optional[UUID]:
    try:
        return UUID(str(note_id))
    except ValueError:
        return None


class NoteService(INoteService):
    """Note CRUD scoped to the caller's tenant.

    Lookups never cross tenants: a note id from another tenant is reported
    exactly like an id that does not exist.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.tenant_repo = TenantRepository(session)
        self.settings = get_settings()

    @store_errors("Error creating note")
    async def create_note(self, claims: TokenClaims, request: NoteCreate) -> NoteResponse:
        """Create new note, enforcing the FREE plan limit."""
        if is_blank(request.title) or is_blank(request.content):
            raise ValidationError("Title and content are required")

        # Row lock on the tenant serializes concurrent creates for the count check
        tenant = await self.tenant_repo.get_by_id(claims.tenant_id, for_update=True)
        if tenant is None:
            raise NotFoundError("Tenant not found")

        if tenant.plan == Plan.FREE:
            note_count = await self.note_repo.count_for_tenant(tenant.id)
            if note_count >= self.settings.free_plan_note_limit:
                await self.session.rollback()
                logger.info("Note limit reached", extra={"tenant_id": str(tenant.id)})
                raise AuthorizationError(NOTE_LIMIT_MESSAGE)

        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "tenant_id": claims.tenant_id,
                "author_id": claims.user_id,
            }
        )
        await self.session.commit()

        created = await self.note_repo.get_in_tenant(note.id, claims.tenant_id)
        return self._note_to_response(created)

    @store_errors("Error fetching notes")
    async def list_notes(
        self,
        claims: TokenClaims,
        page: Union[int, str, None] = None,
        limit: Union[int, str, None] = None,
    ) -> NoteListResponse:
        """List tenant notes newest first.

        Bad paging values fall back to page 1 and the default page size;
        the page size is capped at ``max_page_size``.
        """
        page = _positive_int(page, 1)
        limit = min(_positive_int(limit, self.settings.default_page_size), self.settings.max_page_size)

        notes, total = await self.note_repo.list_for_tenant(claims.tenant_id, page, limit)

        return NoteListResponse(
            notes=[self._note_to_response(note) for note in notes],
            pagination=Pagination.create(page=page, limit=limit, total=total),
        )

    @store_errors("Error fetching note")
    async def get_note(self, claims: TokenClaims, note_id: str) -> NoteResponse:
        note = await self._get_tenant_note(claims, note_id)
        return self._note_to_response(note)

    @store_errors("Error updating note")
    async def update_note(
        self, claims: TokenClaims, note_id: str, request: NoteUpdate
    ) -> NoteResponse:
        """Overwrite title and content. Only the author may edit."""
        if is_blank(request.title) or is_blank(request.content):
            raise ValidationError("Title and content are required")

        note = await self._get_tenant_note(claims, note_id)
        if not note.is_authored_by(claims.user_id):
            raise AuthorizationError("You can only update your own notes")

        await self.note_repo.update_note(note, {"title": request.title, "content": request.content})
        await self.session.commit()

        updated = await self.note_repo.get_in_tenant(note.id, claims.tenant_id)
        return self._note_to_response(updated)

    @store_errors("Error deleting note")
    async def delete_note(self, claims: TokenClaims, note_id: str) -> None:
        """Delete a note. Authors delete their own; admins delete any in the tenant."""
        note = await self._get_tenant_note(claims, note_id)
        if not note.is_authored_by(claims.user_id) and claims.role != Role.ADMIN.value:
            raise AuthorizationError("You can only delete your own notes")

        await self.note_repo.delete_note(note)
        await self.session.commit()
        logger.info(
            "Note deleted",
            extra={"note_id": str(note_id), "tenant_id": str(claims.tenant_id)},
        )

    async def _get_tenant_note(self, claims: TokenClaims, note_id: str) -> Note:
        parsed = _parse_note_id(note_id)
        note = await self.note_repo.get_in_tenant(parsed, claims.tenant_id) if parsed else None
        if note is None:
            raise NotFoundError("Note not found")
        return note

    @staticmethod
    def _note_to_response(note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            tenant_id=note.tenant_id,
            author_id=note.author_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
            author=NoteAuthor(id=note.author.id, email=note.author.email),
        )
