"""Model exports.

Import from here: `from src.athlete_analytics.models import User, Team`
"""

from src.athlete_analytics.models.enums import GameResult, Role, ScheduleType, TeamRole
from src.athlete_analytics.models.team import (
    Team,
    TeamActivity,
    TeamGame,
    TeamMember,
    TeamSchedule,
)
from src.athlete_analytics.models.tenant import Tenant
from src.athlete_analytics.models.user import User

__all__ = [
    # Enums
    "GameResult",
    "Role",
    "ScheduleType",
    "TeamRole",
    # Tables
    "Team",
    "TeamActivity",
    "TeamGame",
    "TeamMember",
    "TeamSchedule",
    "Tenant",
    "User",
]
