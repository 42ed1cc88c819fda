"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite database file with freshly created tables.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.athlete_analytics.api.dependencies import get_db_session
from src.athlete_analytics.core.db import get_session, init_db
from src.athlete_analytics.main import app
from src.athlete_analytics.models import Role, Tenant, User
from tests.helpers import auth_headers, create_tenant, create_user


@pytest.fixture(scope="function")
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a per-test database engine with all tables created."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
    )
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    The session does NOT auto-commit. Helpers in tests.helpers commit for you;
    direct writes must call `await session.commit()` before the API can see them.
    """
    async with get_session(engine) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the application with sessions bound to the test database."""

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def tenant(db_session: AsyncSession) -> Tenant:
    return await create_tenant(db_session)


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, role=Role.ADMIN.value, first_name="Admin")


@pytest.fixture
async def athlete_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, role=Role.ATHLETE.value)


@pytest.fixture
async def coach_user(db_session: AsyncSession) -> User:
    """A user whose global role is coach (grants no team permissions by itself)."""
    return await create_user(db_session, role=Role.COACH.value)


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def athlete_headers(athlete_user: User) -> dict[str, str]:
    return auth_headers(athlete_user)


@pytest.fixture
def coach_headers(coach_user: User) -> dict[str, str]:
    return auth_headers(coach_user)
