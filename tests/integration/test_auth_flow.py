"""End-to-end tests for registration, login and the profile endpoint."""

import pytest


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_register_creates_free_tenant_with_admin(async_client):
    resp = await async_client.post(
        "/api/auth/register",
        json={"email": "a@x.com", "password": "pw123456", "tenantName": "Acme"},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["token"]
    assert body["user"]["email"] == "a@x.com"
    assert body["user"]["role"] == "ADMIN"
    assert body["user"]["tenant"]["slug"] == "acme"
    assert body["user"]["tenant"]["plan"] == "FREE"


@pytest.mark.asyncio
async def test_register_slugifies_multiword_names(register_tenant):
    body = await register_tenant(tenant_name="Big Space  Co")
    assert body["user"]["tenant"]["slug"] == "big-space-co"


@pytest.mark.asyncio
async def test_register_duplicate_email(async_client, register_tenant):
    await register_tenant(email="dup@x.com")
    resp = await async_client.post(
        "/api/auth/register",
        json={"email": "dup@x.com", "password": "pw123456", "tenantName": "Other"},
    )
    assert resp.status_code == 409
    assert resp.json() == {"message": "User already exists"}


@pytest.mark.asyncio
async def test_register_duplicate_organization_name(async_client, register_tenant):
    await register_tenant(tenant_name="Acme")
    resp = await async_client.post(
        "/api/auth/register",
        json={"email": "other@x.com", "password": "pw123456", "tenantName": "acme"},
    )
    assert resp.status_code == 409
    assert resp.json() == {"message": "Organization name already taken"}

    # the failed registration left no user behind
    login = await async_client.post(
        "/api/auth/login", json={"email": "other@x.com", "password": "pw123456"}
    )
    assert login.status_code == 401


@pytest.mark.asyncio
async def test_register_missing_fields(async_client):
    resp = await async_client.post("/api/auth/register", json={"email": "a@x.com"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Email, password, and tenant name are required"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@x.com", "password": "pw123456", "tenantName": "   "},
        {"email": "  ", "password": "pw123456", "tenantName": "Acme"},
        {"email": "a@x.com", "password": " ", "tenantName": "Acme"},
    ],
    ids=["blank-tenant", "blank-email", "blank-password"],
)
async def test_register_rejects_whitespace_only_fields(async_client, payload):
    resp = await async_client.post("/api/auth/register", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Email, password, and tenant name are required"}

    # nothing was created, so the same organization name is still free
    ok = await async_client.post(
        "/api/auth/register",
        json={"email": "fresh@x.com", "password": "pw123456", "tenantName": "Acme"},
    )
    assert ok.status_code == 201


@pytest.mark.asyncio
async def test_login_success_returns_token_and_tenant(async_client, register_tenant):
    await register_tenant(tenant_name="Acme", email="a@x.com", password="pw123456")

    resp = await async_client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw123456"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["token"]
    assert body["user"]["tenant"]["name"] == "Acme"


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_are_indistinguishable(async_client, register_tenant):
    await register_tenant(email="a@x.com", password="pw123456")

    wrong = await async_client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})
    unknown = await async_client.post(
        "/api/auth/login", json={"email": "ghost@x.com", "password": "pw123456"}
    )

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"message": "Invalid credentials"}


@pytest.mark.asyncio
async def test_login_missing_fields(async_client):
    resp = await async_client.post("/api/auth/login", json={"email": "a@x.com"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Email and password are required"}


@pytest.mark.asyncio
async def test_me_returns_profile(async_client, register_tenant):
    body = await register_tenant(tenant_name="Acme", email="a@x.com")

    resp = await async_client.get("/api/auth/me", headers=auth(body["token"]))

    assert resp.status_code == 200
    assert resp.json()["id"] == body["user"]["id"]
    assert resp.json()["tenant"]["slug"] == "acme"


@pytest.mark.asyncio
async def test_me_requires_token(async_client):
    resp = await async_client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json() == {"message": "Access token required"}


@pytest.mark.asyncio
async def test_me_rejects_bad_token(async_client):
    resp = await async_client.get("/api/auth/me", headers=auth("garbage"))
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid or expired token"}
