"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Auth
from src.athlete_analytics.api.dependencies.auth import (
    AdminPrincipal,
    CurrentPrincipal,
    OwnerOrAdmin,
    get_current_principal,
    require_existing_owner,
    require_owner,
    require_roles,
)

# Database
from src.athlete_analytics.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.athlete_analytics.api.dependencies.repositories import (
    TeamActivityRepo,
    TeamGameRepo,
    TeamMemberRepo,
    TeamRepo,
    TeamScheduleRepo,
    TenantRepo,
    UserRepo,
    get_team_activity_repository,
    get_team_game_repository,
    get_team_member_repository,
    get_team_repository,
    get_team_schedule_repository,
    get_tenant_repository,
    get_user_repository,
)

# Services
from src.athlete_analytics.api.dependencies.services import (
    AnalyticsServiceDep,
    AuthServiceDep,
    TeamAccessDep,
    TeamEventServiceDep,
    TeamMemberServiceDep,
    TeamServiceDep,
    TenantServiceDep,
    UserServiceDep,
    get_analytics_service,
    get_auth_service,
    get_team_access,
    get_team_event_service,
    get_team_member_service,
    get_team_service,
    get_tenant_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AdminPrincipal",
    "CurrentPrincipal",
    "OwnerOrAdmin",
    "get_current_principal",
    "require_existing_owner",
    "require_owner",
    "require_roles",
    # Repositories
    "TeamActivityRepo",
    "TeamGameRepo",
    "TeamMemberRepo",
    "TeamRepo",
    "TeamScheduleRepo",
    "TenantRepo",
    "UserRepo",
    "get_team_activity_repository",
    "get_team_game_repository",
    "get_team_member_repository",
    "get_team_repository",
    "get_team_schedule_repository",
    "get_tenant_repository",
    "get_user_repository",
    # Services
    "AnalyticsServiceDep",
    "AuthServiceDep",
    "TeamAccessDep",
    "TeamEventServiceDep",
    "TeamMemberServiceDep",
    "TeamServiceDep",
    "TenantServiceDep",
    "UserServiceDep",
    "get_analytics_service",
    "get_auth_service",
    "get_team_access",
    "get_team_event_service",
    "get_team_member_service",
    "get_team_service",
    "get_tenant_service",
    "get_user_service",
]
