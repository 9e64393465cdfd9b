"""
Invitation schemas.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel


class InviteRequest(CamelModel):
    email: Optional[str] = Field(default=None, max_length=255, description="Invitee email")

    model_config = ConfigDict(json_schema_extra={"example": {"email": "b@x.com"}})


class AcceptInviteRequest(CamelModel):
    password: Optional[str] = Field(
        default=None, max_length=128, description="Password for the new account"
    )


class InvitationCreated(CamelModel):
    id: uuid.UUID
    email: str
    expires_at: datetime
    invite_link: str = Field(description="Link the invitee opens to join")


class InviteResponse(CamelModel):
    message: str
    invitation: InvitationCreated


class InvitationCreator(CamelModel):
    email: str


class InvitationListItem(CamelModel):
    id: uuid.UUID
    email: str
    used: bool
    expires_at: datetime
    created_at: datetime
    creator: InvitationCreator
