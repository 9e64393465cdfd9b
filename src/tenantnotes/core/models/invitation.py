"""
Invitation model - single-use, time-limited ticket to join a tenant.
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID, UTCDateTime

if TYPE_CHECKING:
    from .tenant import Tenant
    from .user import User


class Invitation(BaseModel):
    """Pending or consumed invitation.

    Lifecycle is one-way: ``used`` flips from False to True when the
    invitation is accepted, and an invitation past ``expires_at`` can no
    longer be accepted even if unused.
    """

    __tablename__ = "invitations"

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    token: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    used: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    created_by: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    tenant: Mapped["Tenant"] = relationship(
        "Tenant", back_populates="invitations", lazy="joined", innerjoin=True
    )
    creator: Mapped["User"] = relationship(
        "User", back_populates="invitations_sent", lazy="joined", innerjoin=True
    )

    __table_args__ = (
        Index("idx_invitations_token", "token"),
        Index("idx_invitations_tenant_email", "tenant_id", "email"),
    )

    def __repr__(self) -> str:
        return f"<Invitation(email='{self.email}', used={self.used})>"

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at < now

    def can_be_accepted(self, now: Optional[datetime] = None) -> bool:
        return not self.used and not self.is_expired(now)
