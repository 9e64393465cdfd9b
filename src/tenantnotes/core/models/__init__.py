"""
Database models for the Tenant Notes application.

SQLAlchemy ORM models for the multi-tenant schema. Every tenant-owned row
carries a ``tenant_id`` foreign key; repositories always filter on it.

Models included:
    - Tenant: organization with a FREE or PRO plan
    - User: account belonging to one tenant, ADMIN or MEMBER
    - Note: content owned by a tenant and written by a user
    - Invitation: single-use ticket for joining a tenant
"""

from .base import BaseModel
from .invitation import Invitation
from .note import Note
from .tenant import Plan, Tenant
from .user import Role, User

__all__ = [
    "BaseModel",
    "Tenant",
    "Plan",
    "User",
    "Role",
    "Note",
    "Invitation",
]
