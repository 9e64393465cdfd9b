"""
Tenant schemas - info, plan upgrade, member listing.
"""

import uuid
from datetime import datetime
from typing import Optional

from ..models.tenant import Plan
from ..models.user import Role
from .common import CamelModel


class TenantStats(CamelModel):
    total_users: int
    total_notes: int
    note_limit: Optional[int] = None  # None means unlimited


class TenantInfoResponse(CamelModel):
    id: uuid.UUID
    name: str
    slug: str
    plan: Plan
    created_at: datetime
    stats: TenantStats


class UpgradedTenant(CamelModel):
    id: uuid.UUID
    name: str
    plan: Plan


class UpgradeResponse(CamelModel):
    message: str
    tenant: UpgradedTenant


class TenantUserResponse(CamelModel):
    id: uuid.UUID
    email: str
    role: Role
    created_at: datetime
    note_count: int
