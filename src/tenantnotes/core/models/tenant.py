"""
Tenant model - an organization whose data is isolated from every other tenant.
"""

import enum
from typing import TYPE_CHECKING, List

from sqlalchemy import Enum, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .invitation import Invitation
    from .note import Note
    from .user import User


class Plan(str, enum.Enum):
    """Subscription plan attached to a tenant."""

    FREE = "FREE"
    PRO = "PRO"


class Tenant(BaseModel):
    """Organization owning users, notes and invitations."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    plan: Mapped[Plan] = mapped_column(
        Enum(Plan, name="tenant_plan", native_enum=False, length=10),
        default=Plan.FREE,
        nullable=False,
    )

    users: Mapped[List["User"]] = relationship(
        "User",
        back_populates="tenant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="tenant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    invitations: Mapped[List["Invitation"]] = relationship(
        "Invitation",
        back_populates="tenant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("idx_tenants_slug", "slug"),)

    def __repr__(self) -> str:
        return f"<Tenant(slug='{self.slug}', plan={self.plan.value})>"

    @staticmethod
    def slugify(name: str) -> str:
        """Lowercase the name, trim it and join its words with hyphens."""
        return "-".join(name.lower().split())
