"""
Authentication schemas.

Request fields are optional at the schema level so that missing values are
reported by the services with the same 400 messages the API documents.
"""

import uuid
from typing import Optional

from pydantic import ConfigDict, Field

from ..models.tenant import Plan
from ..models.user import Role
from .common import CamelModel


class LoginRequest(CamelModel):
    """User login request schema."""

    email: Optional[str] = Field(default=None, max_length=255, description="Account email")
    password: Optional[str] = Field(default=None, max_length=128, description="Account password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "admin@acme.test", "password": "password123"}}
    )


class RegisterRequest(CamelModel):
    """Organization sign-up: creates a tenant and its first admin."""

    email: Optional[str] = Field(default=None, max_length=255, description="Admin email")
    password: Optional[str] = Field(default=None, max_length=128, description="Admin password")
    tenant_name: Optional[str] = Field(
        default=None, max_length=100, description="Organization display name"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "a@x.com", "password": "pw123456", "tenantName": "Acme"}
        }
    )


class TenantSummary(CamelModel):
    id: uuid.UUID
    name: str
    slug: str
    plan: Plan


class UserResponse(CamelModel):
    """User information with its tenant."""

    id: uuid.UUID = Field(description="User unique identifier")
    email: str
    role: Role
    tenant: TenantSummary


class AuthResponse(CamelModel):
    """Session token plus the authenticated user."""

    token: str = Field(description="Bearer token for the Authorization header")
    user: UserResponse
