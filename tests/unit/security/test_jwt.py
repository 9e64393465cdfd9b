"""Unit tests for security/jwt.py"""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from tenantnotes.core.exceptions import InvalidTokenError
from tenantnotes.security.jwt import TokenClaims, create_access_token, decode_access_token


class DummySettings:
    secret_key = "test-secret"
    algorithm = "HS256"
    access_token_expire_minutes = 30


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    from tenantnotes.security import jwt as jwt_module

    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())


def _claims(role: str = "ADMIN") -> TokenClaims:
    return TokenClaims(
        user_id=uuid.uuid4(), tenant_id=uuid.uuid4(), tenant_slug="acme", role=role
    )


def test_create_and_decode_access_token():
    claims = _claims()
    token = create_access_token(claims, expires_delta=timedelta(minutes=5))
    assert isinstance(token, str)

    decoded = decode_access_token(token)
    assert decoded == claims


def test_payload_carries_identity_claims():
    claims = _claims(role="MEMBER")
    token = create_access_token(claims)
    payload = jwt.decode(token, DummySettings.secret_key, algorithms=["HS256"])

    assert payload["sub"] == str(claims.user_id)
    assert payload["tenant_id"] == str(claims.tenant_id)
    assert payload["tenant_slug"] == "acme"
    assert payload["role"] == "MEMBER"
    assert payload["type"] == "access"
    assert payload["exp"] > payload["iat"]


def test_decode_expired_token():
    token = create_access_token(_claims(), expires_delta=timedelta(seconds=-10))
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_decode_access_token_invalid_signature():
    payload = _claims().to_payload()
    payload["type"] = "access"
    token = jwt.encode(payload, "another-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_decode_rejects_garbage():
    with pytest.raises(InvalidTokenError):
        decode_access_token("not-a-jwt")


def test_decode_rejects_wrong_token_type():
    payload = _claims().to_payload()
    payload["type"] = "refresh"
    token = jwt.encode(payload, DummySettings.secret_key, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_decode_rejects_missing_tenant_claim():
    payload = {"sub": str(uuid.uuid4()), "role": "ADMIN", "type": "access"}
    token = jwt.encode(payload, DummySettings.secret_key, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_from_payload_rejects_malformed_uuid():
    with pytest.raises(InvalidTokenError):
        TokenClaims.from_payload(
            {"sub": "nope", "tenant_id": str(uuid.uuid4()), "tenant_slug": "a", "role": "ADMIN"}
        )
