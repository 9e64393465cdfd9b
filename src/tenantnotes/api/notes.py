"""Notes API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_principal
from ..security import TokenClaims

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_note(
    request: NoteCreate,
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(claims, request)


@router.get("", response_model=NoteListResponse)
@router.get("/", response_model=NoteListResponse, include_in_schema=False)
async def list_notes(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """List the tenant's notes, newest first.

    Unparseable paging values fall back to the defaults; limit is capped.
    """
    note_service = NoteService(session)
    return await note_service.list_notes(claims, page=page, limit=limit)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(claims, note_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    request: NoteUpdate,
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note (author only)."""
    note_service = NoteService(session)
    return await note_service.update_note(claims, note_id, request)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note (author or tenant admin)."""
    note_service = NoteService(session)
    await note_service.delete_note(claims, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
