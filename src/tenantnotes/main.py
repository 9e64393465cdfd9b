# Main application entry point
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import (
    auth_router,
    health_router,
    invitations_router,
    notes_router,
    tenant_router,
    tenant_slug_router,
)
from .config import get_settings
from .core.exceptions import register_exception_handlers
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import StatusResponse
from .database import create_tables, engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Tenant Notes application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    if settings.skip_lifespan_db:
        logger.info("Skipping DB table creation (skip_lifespan_db is set)")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Tenant Notes application")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant notes API: organizations, invitations, plans and notes",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(invitations_router, prefix="/api")
app.include_router(tenant_router, prefix="/api/tenant")
app.include_router(health_router, prefix="/api")
# the tenant routes are also reachable under /tenants, plus the slug upgrade
app.include_router(tenant_router, prefix="/tenants")
app.include_router(tenant_slug_router, prefix="/tenants")


@app.get("/health", response_model=StatusResponse)
async def basic_health():
    """Liveness probe, no dependency checks."""
    return StatusResponse(status="OK", timestamp=datetime.now(timezone.utc))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tenantnotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
