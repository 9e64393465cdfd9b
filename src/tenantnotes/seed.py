"""Load demo tenants, users and notes.

Run with ``python -m tenantnotes.seed``. Existing rows are wiped first.
"""

import asyncio

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from .core.logging import get_logger, setup_logging
from .core.models import Invitation, Note, Plan, Role, Tenant, User
from .database import AsyncSessionLocal, create_tables, engine
from .security import hash_password

logger = get_logger("seed")

DEMO_PASSWORD = "password123"

TENANTS = [
    {"name": "Acme Corporation", "slug": "acme", "plan": Plan.FREE},
    {"name": "Globex Corporation", "slug": "globex", "plan": Plan.PRO},
]


async def clear_data(session: AsyncSession) -> None:
    for model in (Note, Invitation, User, Tenant):
        await session.execute(delete(model))


async def seed(session: AsyncSession) -> dict:
    """Insert the demo data set and return the created tenants by slug."""
    await clear_data(session)

    password_hash = hash_password(DEMO_PASSWORD)
    tenants = {}
    users = {}

    for data in TENANTS:
        tenant = Tenant(**data)
        session.add(tenant)
        await session.flush()
        tenants[tenant.slug] = tenant

        for prefix, role in (("admin", Role.ADMIN), ("user", Role.MEMBER)):
            user = User(
                email=f"{prefix}@{tenant.slug}.test",
                password_hash=password_hash,
                role=role,
                tenant_id=tenant.id,
            )
            session.add(user)
            users[user.email] = user

    await session.flush()

    notes = [
        ("Welcome to Acme Notes", "This is your first note in the Acme workspace.", "admin@acme.test"),
        ("Meeting Notes", "Notes from the team meeting...", "user@acme.test"),
        ("Globex Project Ideas", "Ideas for the new project initiative.", "admin@globex.test"),
    ]
    for title, content, author_email in notes:
        author = users[author_email]
        session.add(Note(title=title, content=content, tenant_id=author.tenant_id, author_id=author.id))

    await session.commit()
    logger.info(
        "Seeding finished",
        extra={"tenants": len(tenants), "users": len(users), "notes": len(notes)},
    )
    return tenants


async def main() -> None:
    setup_logging()
    await create_tables()
    async with AsyncSessionLocal() as session:
        await seed(session)
    await engine.dispose()

    print("Test credentials (password: %s):" % DEMO_PASSWORD)
    for data in TENANTS:
        print(f"  admin@{data['slug']}.test / user@{data['slug']}.test")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
