# Note model for tenant content
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .tenant import Tenant
    from .user import User


class Note(BaseModel):
    """Note owned by a tenant and written by one of its users."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="notes")
    # author is always rendered with the note
    author: Mapped["User"] = relationship(
        "User", back_populates="notes", lazy="joined", innerjoin=True
    )

    __table_args__ = (
        Index("idx_notes_tenant_id", "tenant_id"),
        Index("idx_notes_author_id", "author_id"),
        Index("idx_notes_tenant_created", "tenant_id", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', tenant_id={self.tenant_id})>"

    def is_authored_by(self, user_id: uuid.UUID) -> bool:
        return self.author_id == user_id
