"""Authentication service implementation."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import (
    TokenClaims,
    create_access_token,
    dummy_verify,
    hash_password,
    verify_password,
)
from ..exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    store_errors,
)
from ..logging import get_logger
from ..models.tenant import Plan, Tenant
from ..models.user import Role, User
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TenantSummary,
    UserResponse,
)
from .interfaces import IAuthService
from .validators import is_blank

logger = get_logger("services.auth")

INVALID_CREDENTIALS = "Invalid credentials"


def user_to_response(user: User, tenant: Tenant) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        role=user.role,
        tenant=TenantSummary(id=tenant.id, name=tenant.name, slug=tenant.slug, plan=tenant.plan),
    )


def issue_session(user: User, tenant: Tenant) -> AuthResponse:
    """Sign a token bound to the user's tenant and role."""
    claims = TokenClaims(
        user_id=user.id,
        tenant_id=tenant.id,
        tenant_slug=tenant.slug,
        role=user.role.value,
    )
    return AuthResponse(token=create_access_token(claims), user=user_to_response(user, tenant))


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.tenant_repo = TenantRepository(session)

    @store_errors("Internal server error")
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a session token.

        Unknown email and wrong password answer with the same message.
        """
        if is_blank(request.email) or is_blank(request.password):
            raise ValidationError("Email and password are required")

        user = await self.user_repo.get_by_email(request.email)
        if user is None:
            dummy_verify(request.password)
            logger.warning("Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(request.password, user.password_hash):
            logger.warning("Login failed: wrong password", extra={"user_id": str(user.id)})
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("User logged in", extra={"user_id": str(user.id), "tenant_id": str(user.tenant_id)})
        return issue_session(user, user.tenant)

    @store_errors("Internal server error")
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Create a FREE tenant and its ADMIN user as one unit."""
        if is_blank(request.email) or is_blank(request.password) or is_blank(request.tenant_name):
            raise ValidationError("Email, password, and tenant name are required")

        if await self.user_repo.is_email_taken(request.email):
            raise ConflictError("User already exists")

        password_hash = hash_password(request.password)
        slug = Tenant.slugify(request.tenant_name)

        try:
            tenant = await self.tenant_repo.create_tenant(
                {"name": request.tenant_name, "slug": slug, "plan": Plan.FREE}
            )
            user = await self.user_repo.create_user(
                {
                    "email": request.email,
                    "password_hash": password_hash,
                    "role": Role.ADMIN,
                    "tenant_id": tenant.id,
                }
            )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                "Registration conflict",
                extra={"slug": slug, "constraint": str(e.orig)[:200]},
            )
            if await self.user_repo.is_email_taken(request.email):
                raise ConflictError("User already exists") from e
            raise ConflictError("Organization name already taken") from e

        logger.info("Tenant registered", extra={"tenant_id": str(tenant.id), "slug": slug})
        return issue_session(user, tenant)

    @store_errors("Internal server error")
    async def get_current_user(self, claims: TokenClaims) -> UserResponse:
        """Get the signed-in user, scoped to the token's tenant."""
        user = await self.user_repo.get_in_tenant(claims.user_id, claims.tenant_id)
        if not user:
            raise NotFoundError("User not found")
        return user_to_response(user, user.tenant)
