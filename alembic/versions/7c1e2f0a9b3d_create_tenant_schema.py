"""Create tenants, users, notes and invitations tables

Revision ID: 7c1e2f0a9b3d
Revises:
Create Date: 2026-10-19 09:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from tenantnotes.core.models.types import GUID, UTCDateTime


# revision identifiers, used by Alembic.
revision: str = '7c1e2f0a9b3d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', UTCDateTime(), nullable=False),
        sa.Column('updated_at', UTCDateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'tenants',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('slug', sa.String(length=120), nullable=False),
        sa.Column(
            'plan',
            sa.Enum('FREE', 'PRO', name='tenant_plan', native_enum=False, length=10),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint('slug'),
    )
    op.create_index('idx_tenants_slug', 'tenants', ['slug'])

    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column(
            'role',
            sa.Enum('ADMIN', 'MEMBER', name='user_role', native_enum=False, length=10),
            nullable=False,
        ),
        sa.Column('tenant_id', GUID(), sa.ForeignKey('tenants.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('email'),
    )
    op.create_index('idx_users_email', 'users', ['email'])
    op.create_index('idx_users_tenant_id', 'users', ['tenant_id'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('tenant_id', GUID(), sa.ForeignKey('tenants.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_notes_tenant_id', 'notes', ['tenant_id'])
    op.create_index('idx_notes_author_id', 'notes', ['author_id'])
    op.create_index('idx_notes_tenant_created', 'notes', ['tenant_id', 'created_at'])

    op.create_table(
        'invitations',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('token', sa.String(length=128), nullable=False),
        sa.Column('used', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('expires_at', UTCDateTime(), nullable=False),
        sa.Column('tenant_id', GUID(), sa.ForeignKey('tenants.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_by', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('token'),
    )
    op.create_index('idx_invitations_token', 'invitations', ['token'])
    op.create_index('idx_invitations_tenant_email', 'invitations', ['tenant_id', 'email'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_invitations_tenant_email', table_name='invitations')
    op.drop_index('idx_invitations_token', table_name='invitations')
    op.drop_table('invitations')
    op.drop_index('idx_notes_tenant_created', table_name='notes')
    op.drop_index('idx_notes_author_id', table_name='notes')
    op.drop_index('idx_notes_tenant_id', table_name='notes')
    op.drop_table('notes')
    op.drop_index('idx_users_tenant_id', table_name='users')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')
    op.drop_index('idx_tenants_slug', table_name='tenants')
    op.drop_table('tenants')
