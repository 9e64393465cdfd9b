"""Unit tests for the error taxonomy and the store_errors wrapper."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tenantnotes.core.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    register_exception_handlers,
    store_errors,
)


class FakeSession:
    def __init__(self):
        self.rolled_back = False

    async def rollback(self):
        self.rolled_back = True


class BrokenService:
    def __init__(self):
        self.session = FakeSession()

    @store_errors("Error fetching notes")
    async def fail(self):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    @store_errors("Error fetching notes")
    async def conflict(self):
        raise ConflictError("User already exists")


@pytest.mark.asyncio
async def test_store_errors_sanitizes_database_failures():
    svc = BrokenService()
    with pytest.raises(InternalError) as exc:
        await svc.fail()
    assert exc.value.message == "Error fetching notes"
    assert exc.value.status_code == 500
    assert svc.session.rolled_back is True


@pytest.mark.asyncio
async def test_store_errors_passes_domain_errors_through():
    svc = BrokenService()
    with pytest.raises(ConflictError):
        await svc.conflict()
    assert svc.session.rolled_back is False


def test_authentication_error_sets_challenge_header():
    err = AuthenticationError()
    assert err.status_code == 401
    assert err.headers == {"WWW-Authenticate": "Bearer"}


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Note not found")

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"id": item_id}

    return app


def test_app_error_renders_message_body():
    resp = TestClient(_app()).get("/missing")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Note not found"}


def test_unknown_route_message():
    resp = TestClient(_app()).get("/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Route not found"}


def test_request_validation_is_400_with_message():
    resp = TestClient(_app()).get("/items/abc")
    assert resp.status_code == 400
    assert "item_id" in resp.json()["message"]
