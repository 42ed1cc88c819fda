from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from src.athlete_analytics.api.middlewares import setup_middlewares
from src.athlete_analytics.api.v1.router import api_router
from src.athlete_analytics.core.config import get_settings
from src.athlete_analytics.core.db import dispose_engine, get_session, init_db
from src.athlete_analytics.core.exceptions import setup_exception_handlers
from src.athlete_analytics.core.logging import get_logger, setup_logging
from src.athlete_analytics.core.rate_limit import limiter
from src.athlete_analytics.core.seed import seed_database

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", environment=settings.app_env)

    await init_db()
    if settings.seed_on_startup:
        async with get_session() as session:
            await seed_database(session)

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "health", "description": "Service liveness"},
    {"name": "auth", "description": "Login and session tokens"},
    {"name": "users", "description": "User accounts and profiles"},
    {"name": "tenants", "description": "Tenant (organization) management"},
    {"name": "teams", "description": "Teams, members, games, activities and schedules"},
    {"name": "analytics", "description": "Team and tenant aggregates"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant athlete and team management API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter
    setup_middlewares(app, settings)

    app.include_router(api_router)

    # Prometheus metrics instrumentation
    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    return app


app = create_app()
