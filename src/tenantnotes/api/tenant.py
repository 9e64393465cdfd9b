"""Tenant API endpoints.

The same router is mounted under ``/api/tenant`` and ``/tenants``; the slug
upgrade route only makes sense under the latter.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.tenant import TenantInfoResponse, TenantUserResponse, UpgradeResponse
from ..core.services import TenantService
from ..database import get_db_session
from ..middleware.auth import get_current_principal, require_admin
from ..security import TokenClaims

router = APIRouter(tags=["tenant"])


@router.get("/info", response_model=TenantInfoResponse)
async def get_tenant_info(
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Tenant details with user/note counts and the plan's note limit."""
    tenant_service = TenantService(session)
    return await tenant_service.get_tenant_info(claims)


@router.post("/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant(
    claims: TokenClaims = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Upgrade the caller's tenant to PRO (admins only)."""
    tenant_service = TenantService(session)
    return await tenant_service.upgrade_tenant(claims)


@router.get("/users", response_model=List[TenantUserResponse])
async def list_tenant_users(
    claims: TokenClaims = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Users of the tenant with their note counts (admins only)."""
    tenant_service = TenantService(session)
    return await tenant_service.list_tenant_users(claims)


slug_router = APIRouter(tags=["tenant"])


@slug_router.post("/{slug}/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant_by_slug(
    slug: str,
    claims: TokenClaims = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Upgrade a tenant addressed by slug; admins may only upgrade their own."""
    tenant_service = TenantService(session)
    return await tenant_service.upgrade_tenant_by_slug(claims, slug)
