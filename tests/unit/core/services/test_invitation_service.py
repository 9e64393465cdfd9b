"""Unit tests for InvitationService (tenantnotes/core/services/invitation_service.py)."""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from tenantnotes.core.exceptions import ConflictError, ValidationError
from tenantnotes.core.models.tenant import Plan
from tenantnotes.core.models.user import Role
from tenantnotes.core.schemas.invitations import AcceptInviteRequest, InviteRequest
from tenantnotes.core.services import invitation_service as inv_module
from tenantnotes.core.services.invitation_service import InvitationService, generate_invite_token
from tenantnotes.security import TokenClaims


class FakeSession:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1


class FakeUserRepo:
    def __init__(self, taken=()):
        self.taken = set(taken)
        self.created = []

    async def is_email_taken(self, email):
        return email in self.taken

    async def create_user(self, data):
        self.created.append(data)
        return SimpleNamespace(id=uuid.uuid4(), **data)


class FakeInvitationRepo:
    def __init__(self, pending=None, by_token=None):
        self.pending = pending
        self.by_token = by_token
        self.created = []
        self.locked = False

    async def find_pending(self, email, tenant_id, now):
        return self.pending

    async def create_invitation(self, data):
        self.created.append(data)
        return SimpleNamespace(id=uuid.uuid4(), **data)

    async def get_by_token(self, token, for_update=False):
        self.locked = for_update
        return self.by_token

    async def mark_used(self, invitation):
        invitation.used = True
        return invitation


def _claims():
    return TokenClaims(uuid.uuid4(), uuid.uuid4(), "acme", "ADMIN")


def _service(monkeypatch, user_repo, invitation_repo):
    monkeypatch.setattr(inv_module, "UserRepository", lambda s: user_repo)
    monkeypatch.setattr(inv_module, "InvitationRepository", lambda s: invitation_repo)
    return InvitationService(session=FakeSession())


def _invitation(expires_in=timedelta(hours=1), used=False):
    tenant = SimpleNamespace(id=uuid.uuid4(), name="Acme", slug="acme", plan=Plan.FREE)
    inv = SimpleNamespace(
        id=uuid.uuid4(),
        email="new@acme.test",
        tenant_id=tenant.id,
        tenant=tenant,
        used=used,
        expires_at=datetime.now(timezone.utc) + expires_in,
    )
    inv.can_be_accepted = lambda now=None: not inv.used and inv.expires_at > datetime.now(timezone.utc)
    return inv


def test_generate_invite_token_is_64_hex_chars():
    token = generate_invite_token()
    assert len(token) == 64
    int(token, 16)
    assert generate_invite_token() != token


@pytest.mark.asyncio
async def test_invite_user_returns_link(monkeypatch):
    inv_repo = FakeInvitationRepo()
    svc = _service(monkeypatch, FakeUserRepo(), inv_repo)
    claims = _claims()

    res = await svc.invite_user(claims, InviteRequest(email="b@x.com"))

    data = inv_repo.created[0]
    assert res.message == "Invitation sent successfully"
    assert res.invitation.invite_link.endswith(f"/invite/accept/{data['token']}")
    assert data["tenant_id"] == claims.tenant_id
    assert data["created_by"] == claims.user_id
    lifetime = data["expires_at"] - datetime.now(timezone.utc)
    assert timedelta(hours=23, minutes=59) < lifetime <= timedelta(hours=24)
    assert svc.session.commits == 1


@pytest.mark.asyncio
async def test_invite_existing_user_conflicts(monkeypatch):
    svc = _service(monkeypatch, FakeUserRepo(taken={"b@x.com"}), FakeInvitationRepo())
    with pytest.raises(ConflictError) as exc:
        await svc.invite_user(_claims(), InviteRequest(email="b@x.com"))
    assert exc.value.message == "User with this email already exists"


@pytest.mark.asyncio
async def test_invite_with_pending_invitation_conflicts(monkeypatch):
    svc = _service(monkeypatch, FakeUserRepo(), FakeInvitationRepo(pending=object()))
    with pytest.raises(ConflictError) as exc:
        await svc.invite_user(_claims(), InviteRequest(email="b@x.com"))
    assert exc.value.message == "Invitation already sent to this email"


@pytest.mark.asyncio
async def test_invite_requires_email(monkeypatch):
    svc = _service(monkeypatch, FakeUserRepo(), FakeInvitationRepo())
    with pytest.raises(ValidationError):
        await svc.invite_user(_claims(), InviteRequest())


@pytest.mark.asyncio
async def test_accept_creates_member_and_marks_used(monkeypatch):
    invitation = _invitation()
    user_repo = FakeUserRepo()
    inv_repo = FakeInvitationRepo(by_token=invitation)
    monkeypatch.setattr(inv_module, "hash_password", lambda p: "hashed")
    svc = _service(monkeypatch, user_repo, inv_repo)

    res = await svc.accept_invitation("tok", AcceptInviteRequest(password="pw123456"))

    assert inv_repo.locked is True
    assert invitation.used is True
    assert user_repo.created[0]["role"] == Role.MEMBER
    assert user_repo.created[0]["tenant_id"] == invitation.tenant_id
    assert res.user.email == "new@acme.test"
    assert res.user.role == Role.MEMBER
    assert svc.session.commits == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "invitation",
    [None, _invitation(used=True), _invitation(expires_in=timedelta(seconds=-1))],
    ids=["unknown", "used", "expired"],
)
async def test_accept_rejects_unusable_invitations(monkeypatch, invitation):
    user_repo = FakeUserRepo()
    svc = _service(monkeypatch, user_repo, FakeInvitationRepo(by_token=invitation))

    with pytest.raises(ValidationError) as exc:
        await svc.accept_invitation("tok", AcceptInviteRequest(password="pw"))

    assert exc.value.message == "Invalid or expired invitation"
    assert user_repo.created == []


@pytest.mark.asyncio
async def test_accept_requires_password(monkeypatch):
    svc = _service(monkeypatch, FakeUserRepo(), FakeInvitationRepo(by_token=_invitation()))
    with pytest.raises(ValidationError) as exc:
        await svc.accept_invitation("tok", AcceptInviteRequest())
    assert exc.value.message == "Password is required"
