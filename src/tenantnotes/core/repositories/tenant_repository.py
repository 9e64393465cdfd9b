"""Tenant repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tenant import Plan, Tenant
from ..models.user import User


class TenantRepository:
    """Repository for tenant database operations.

    Writes are flushed, not committed; the calling service owns the
    transaction boundary.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_tenant(self, tenant_data: dict) -> Tenant:
        """Create new tenant."""
        tenant = Tenant(**tenant_data)
        self.session.add(tenant)
        await self.session.flush()
        return tenant

    async def get_by_id(self, tenant_id: UUID, for_update: bool = False) -> Optional[Tenant]:
        """Get tenant by ID, optionally locking the row until commit."""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Tenant]:
        """Get tenant by slug."""
        stmt = select(Tenant).where(Tenant.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_plan(self, tenant: Tenant, plan: Plan) -> Tenant:
        """Change the tenant's plan."""
        tenant.plan = plan
        await self.session.flush()
        return tenant

    async def count_users(self, tenant_id: UUID) -> int:
        stmt = select(func.count(User.id)).where(User.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
