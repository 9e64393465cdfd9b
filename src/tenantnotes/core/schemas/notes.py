"""
Note management schemas.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from .common import CamelModel


class NoteCreate(CamelModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, max_length=200, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Meeting Notes", "content": "Notes from the team meeting..."}
        }
    )


class NoteUpdate(NoteCreate):
    """Note update request schema. Both fields are replaced."""


class NoteAuthor(CamelModel):
    id: uuid.UUID
    email: str


class NoteResponse(CamelModel):
    """Note as returned by every notes endpoint."""

    id: uuid.UUID
    title: str
    content: str
    tenant_id: uuid.UUID
    author_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    author: NoteAuthor


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def create(cls, page: int, limit: int, total: int) -> "Pagination":
        # ceil without floats
        pages = (total + limit - 1) // limit
        return cls(page=page, limit=limit, total=total, pages=pages)


class NoteListResponse(CamelModel):
    notes: List[NoteResponse]
    pagination: Pagination
