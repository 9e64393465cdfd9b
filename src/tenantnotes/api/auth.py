"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_principal
from ..security import TokenClaims

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login with email and password."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register an organization and its first admin."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    claims: TokenClaims = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    return await auth_service.get_current_user(claims)
