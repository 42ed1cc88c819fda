"""Repository layer - data access abstraction."""

from src.athlete_analytics.repositories.base import BaseRepository
from src.athlete_analytics.repositories.team_events import (
    TeamActivityRepository,
    TeamGameRepository,
    TeamScheduleRepository,
)
from src.athlete_analytics.repositories.team_repository import (
    TeamMemberRepository,
    TeamRepository,
)
from src.athlete_analytics.repositories.tenant_repository import TenantRepository
from src.athlete_analytics.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "TeamActivityRepository",
    "TeamGameRepository",
    "TeamMemberRepository",
    "TeamRepository",
    "TeamScheduleRepository",
    "TenantRepository",
    "UserRepository",
]
