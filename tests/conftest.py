"""Shared pytest fixtures configured to use SQLite in-memory."""

import logging
import os
from uuid import uuid4

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SKIP_LIFESPAN_DB", "1")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from tenantnotes.core.models import BaseModel  # noqa: E402
from tenantnotes.database import get_db_session  # noqa: E402
from tenantnotes.main import app  # noqa: E402

# aiosqlite is very chatty at DEBUG
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

DEFAULT_PASSWORD = "password123"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,  # one connection, so every session sees the same memory DB
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces ON DELETE CASCADE with this pragma
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_maker):
    """Session for arranging and inspecting data directly."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def test_app(session_maker):
    """App whose requests each get their own session on the test database."""

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_tenant(async_client):
    """Register an organization and return the auth response body."""

    async def _register(tenant_name: str = None, email: str = None, password: str = DEFAULT_PASSWORD):
        suffix = uuid4().hex[:8]
        payload = {
            "email": email or f"admin-{suffix}@example.com",
            "password": password,
            "tenantName": tenant_name or f"Org {suffix}",
        }
        resp = await async_client.post("/api/auth/register", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register


@pytest.fixture
def add_member(async_client):
    """Invite and accept a MEMBER into the admin's tenant; returns the auth body."""

    async def _add(admin_token: str, email: str = None, password: str = DEFAULT_PASSWORD):
        email = email or f"member-{uuid4().hex[:8]}@example.com"
        invite = await async_client.post(
            "/api/invite", json={"email": email}, headers=bearer(admin_token)
        )
        assert invite.status_code == 201, invite.text
        token = invite.json()["invitation"]["inviteLink"].rsplit("/", 1)[-1]
        accepted = await async_client.post(f"/api/accept/{token}", json={"password": password})
        assert accepted.status_code == 201, accepted.text
        return accepted.json()

    return _add


@pytest.fixture
def create_note(async_client):
    async def _create(token: str, title: str = "Title", content: str = "Content"):
        return await async_client.post(
            "/api/notes", json={"title": title, "content": content}, headers=bearer(token)
        )

    return _create
