"""Database utilities - engine and session."""

from src.athlete_analytics.core.db.engine import dispose_engine, get_engine, init_db
from src.athlete_analytics.core.db.session import create_session_factory, get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    "init_db",
    # Session
    "create_session_factory",
    "get_session",
]
