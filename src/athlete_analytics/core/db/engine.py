"""Database engine management."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.athlete_analytics.core.config import get_settings

_engine: AsyncEngine | None = None


def _engine_kwargs() -> dict[str, Any]:
    """Pool arguments for the configured driver.

    SQLite (local runs and tests) has no server-side pool; an in-memory database
    must share one connection or every session sees an empty schema.
    """
    settings = get_settings()
    if settings.is_sqlite:
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in settings.database_url:
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


def get_engine() -> AsyncEngine:
    """Get or create the database engine owned by the process bootstrap."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            **_engine_kwargs(),
        )
    return _engine


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Create all tables from model metadata."""
    # Registers every table on SQLModel.metadata
    import src.athlete_analytics.models  # noqa: F401

    if engine is None:
        engine = get_engine()
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
