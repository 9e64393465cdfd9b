"""Tenant service implementation."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import TokenClaims
from ..exceptions import AuthorizationError, NotFoundError, ValidationError, store_errors
from ..logging import get_logger
from ..models.tenant import Plan, Tenant
from ..repositories.note_repository import NoteRepository
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.tenant import (
    TenantInfoResponse,
    TenantStats,
    TenantUserResponse,
    UpgradedTenant,
    UpgradeResponse,
)
from .interfaces import ITenantService

logger = get_logger("services.tenant")


class TenantService(ITenantService):
    """Tenant info, plan upgrade and member listing."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenant_repo = TenantRepository(session)
        self.user_repo = UserRepository(session)
        self.note_repo = NoteRepository(session)
        self.settings = get_settings()

    @store_errors("Error fetching tenant information")
    async def get_tenant_info(self, claims: TokenClaims) -> TenantInfoResponse:
        tenant = await self.tenant_repo.get_by_id(claims.tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant not found")

        total_users = await self.tenant_repo.count_users(tenant.id)
        total_notes = await self.note_repo.count_for_tenant(tenant.id)

        return TenantInfoResponse(
            id=tenant.id,
            name=tenant.name,
            slug=tenant.slug,
            plan=tenant.plan,
            created_at=tenant.created_at,
            stats=TenantStats(
                total_users=total_users,
                total_notes=total_notes,
                note_limit=self.settings.free_plan_note_limit if tenant.plan == Plan.FREE else None,
            ),
        )

    @store_errors("Error upgrading tenant")
    async def upgrade_tenant(self, claims: TokenClaims) -> UpgradeResponse:
        tenant = await self.tenant_repo.get_by_id(claims.tenant_id, for_update=True)
        return await self._upgrade(tenant)

    @store_errors("Error upgrading tenant")
    async def upgrade_tenant_by_slug(self, claims: TokenClaims, slug: str) -> UpgradeResponse:
        if slug != claims.tenant_slug:
            logger.warning(
                "Cross-tenant upgrade refused",
                extra={"tenant_id": str(claims.tenant_id), "requested_slug": slug},
            )
            raise AuthorizationError("You can only upgrade your own organization")

        tenant = await self.tenant_repo.get_by_slug(slug)
        return await self._upgrade(tenant)

    @store_errors("Error fetching tenant users")
    async def list_tenant_users(self, claims: TokenClaims) -> List[TenantUserResponse]:
        rows = await self.user_repo.list_with_note_counts(claims.tenant_id)
        return [
            TenantUserResponse(
                id=user.id,
                email=user.email,
                role=user.role,
                created_at=user.created_at,
                note_count=note_count,
            )
            for user, note_count in rows
        ]

    async def _upgrade(self, tenant: Tenant | None) -> UpgradeResponse:
        if tenant is None:
            raise NotFoundError("Tenant not found")
        if tenant.plan == Plan.PRO:
            raise ValidationError("Tenant is already on the Pro plan")

        await self.tenant_repo.set_plan(tenant, Plan.PRO)
        await self.session.commit()
        logger.info("Tenant upgraded", extra={"tenant_id": str(tenant.id)})

        return UpgradeResponse(
            message="Upgrade successful! You now have unlimited notes.",
            tenant=UpgradedTenant(id=tenant.id, name=tenant.name, plan=tenant.plan),
        )
