"""Service layer - business logic orchestration."""

from src.athlete_analytics.services.analytics_service import AnalyticsService
from src.athlete_analytics.services.auth_service import AuthService
from src.athlete_analytics.services.team_access import TeamAccess
from src.athlete_analytics.services.team_event_service import TeamEventService
from src.athlete_analytics.services.team_member_service import TeamMemberService
from src.athlete_analytics.services.team_service import TeamService
from src.athlete_analytics.services.tenant_service import TenantService
from src.athlete_analytics.services.user_service import UserService

__all__ = [
    "AnalyticsService",
    "AuthService",
    "TeamAccess",
    "TeamEventService",
    "TeamMemberService",
    "TeamService",
    "TenantService",
    "UserService",
]
