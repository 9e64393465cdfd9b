"""
User model - a member of exactly one tenant.
"""

import enum
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .invitation import Invitation
    from .note import Note
    from .tenant import Tenant


class Role(str, enum.Enum):
    """Role of a user inside its tenant."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class User(BaseModel):
    """User account with email/password auth."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", native_enum=False, length=10),
        default=Role.MEMBER,
        nullable=False,
    )

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )

    # Relations
    tenant: Mapped["Tenant"] = relationship(
        "Tenant", back_populates="users", lazy="joined", innerjoin=True
    )

    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    invitations_sent: Mapped[List["Invitation"]] = relationship(
        "Invitation",
        back_populates="creator",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_users_email", "email"),
        Index("idx_users_tenant_id", "tenant_id"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}', role={self.role.value})>"
