"""Rate limiting configuration.

One slowapi limiter per process with in-memory storage. Every route gets the
default limit through ``SlowAPIMiddleware``; the login route adds a stricter
per-endpoint limit on top.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.athlete_analytics.core.config import get_settings
from src.athlete_analytics.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Rate limit key from client IP only.

    Never include client-controlled headers in the key: rotating them would
    create unlimited buckets.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the process limiter. Disabled in testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    return Limiter(key_func=get_rate_limit_key, default_limits=[settings.default_rate_limit])


limiter = create_limiter()
