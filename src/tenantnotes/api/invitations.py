"""Invitation API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import AuthResponse
from ..core.schemas.invitations import (
    AcceptInviteRequest,
    InvitationListItem,
    InviteRequest,
    InviteResponse,
)
from ..core.services import InvitationService
from ..database import get_db_session
from ..middleware.auth import require_admin
from ..security import TokenClaims

router = APIRouter(tags=["invitations"])


@router.post("/invite", response_model=InviteResponse, status_code=status.HTTP_201_CREATED)
async def invite_user(
    request: InviteRequest,
    claims: TokenClaims = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Invite someone into the caller's tenant (admins only)."""
    invitation_service = InvitationService(session)
    return await invitation_service.invite_user(claims, request)


@router.post("/accept/{token}", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def accept_invite(
    token: str,
    request: AcceptInviteRequest,
    session: AsyncSession = Depends(get_db_session),
):
    """Accept an invitation and create the member account."""
    invitation_service = InvitationService(session)
    return await invitation_service.accept_invitation(token, request)


@router.get("/invitations", response_model=List[InvitationListItem])
async def list_invitations(
    claims: TokenClaims = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Invitations of the caller's tenant, newest first (admins only)."""
    invitation_service = InvitationService(session)
    return await invitation_service.list_invitations(claims)
