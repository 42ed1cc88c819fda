"""Idempotent seed data: the bootstrap admin account and sample tenants.

Run standalone with ``python -m src.athlete_analytics.core.seed``.
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.db import dispose_engine, get_session, init_db
from src.athlete_analytics.core.logging import get_logger, setup_logging
from src.athlete_analytics.core.security import hash_password
from src.athlete_analytics.models import Role, Tenant, User
from src.athlete_analytics.repositories import TenantRepository, UserRepository

logger = get_logger(__name__)

ADMIN_EMAIL = "admin@athleteanalytics.com"
# The bootstrap credential predates the strength policy; it is only enforced on API input
ADMIN_PASSWORD = "admin123"

SEED_TENANTS = [
    {
        "name": "Elite Sports Academy",
        "city": "New York",
        "state": "New York",
        "country": "USA",
        "description": "Premier sports training facility",
    },
    {
        "name": "Champions Fitness Center",
        "city": "Los Angeles",
        "state": "California",
        "country": "USA",
        "description": "Comprehensive fitness and athletic development",
    },
    {
        "name": "Athletic Performance Institute",
        "city": "Chicago",
        "state": "Illinois",
        "country": "USA",
        "description": "Professional athlete training and analytics",
    },
]


async def seed_database(session: AsyncSession) -> None:
    """Create the admin account and sample tenants when they are missing."""
    user_repo = UserRepository(session)
    tenant_repo = TenantRepository(session)

    try:
        if await user_repo.get_by_email(ADMIN_EMAIL) is None:
            user_repo.add(
                User(
                    email=ADMIN_EMAIL,
                    hashed_password=hash_password(ADMIN_PASSWORD),
                    role=Role.ADMIN.value,
                    first_name="System",
                    last_name="Administrator",
                    tenant_unique_id="admin_user_001",
                )
            )
            logger.info("Seeded admin user", email=ADMIN_EMAIL)

        for data in SEED_TENANTS:
            if await tenant_repo.get_by_name(data["name"]) is None:
                tenant_repo.add(Tenant(**data, is_active=True))
                logger.info("Seeded tenant", name=data["name"])

        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.error("Seeding failed", error=str(e))
        raise


async def main() -> None:
    setup_logging()
    await init_db()
    try:
        async with get_session() as session:
            await seed_database(session)
        logger.info("Seed completed")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
