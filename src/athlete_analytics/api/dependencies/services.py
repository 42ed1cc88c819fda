"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.athlete_analytics.api.dependencies.db import DBSession
from src.athlete_analytics.api.dependencies.repositories import (
    TeamActivityRepo,
    TeamGameRepo,
    TeamMemberRepo,
    TeamRepo,
    TeamScheduleRepo,
    TenantRepo,
    UserRepo,
)
from src.athlete_analytics.services import (
    AnalyticsService,
    AuthService,
    TeamAccess,
    TeamEventService,
    TeamMemberService,
    TeamService,
    TenantService,
    UserService,
)


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_user_service(
    user_repo: UserRepo,
    member_repo: TeamMemberRepo,
    team_repo: TeamRepo,
    session: DBSession,
) -> UserService:
    return UserService(user_repo, member_repo, team_repo, session)


def get_tenant_service(tenant_repo: TenantRepo, session: DBSession) -> TenantService:
    return TenantService(tenant_repo, session)


def get_team_access(team_repo: TeamRepo, member_repo: TeamMemberRepo) -> TeamAccess:
    """Resource-scoped permission resolver shared by the team services of one request."""
    return TeamAccess(team_repo, member_repo)


TeamAccessDep = Annotated[TeamAccess, Depends(get_team_access)]


def get_team_service(
    team_repo: TeamRepo,
    member_repo: TeamMemberRepo,
    tenant_repo: TenantRepo,
    user_repo: UserRepo,
    game_repo: TeamGameRepo,
    activity_repo: TeamActivityRepo,
    schedule_repo: TeamScheduleRepo,
    access: TeamAccessDep,
    session: DBSession,
) -> TeamService:
    return TeamService(
        team_repo,
        member_repo,
        tenant_repo,
        user_repo,
        game_repo,
        activity_repo,
        schedule_repo,
        access,
        session,
    )


def get_team_member_service(
    member_repo: TeamMemberRepo,
    user_repo: UserRepo,
    access: TeamAccessDep,
    session: DBSession,
) -> TeamMemberService:
    return TeamMemberService(member_repo, user_repo, access, session)


def get_team_event_service(
    game_repo: TeamGameRepo,
    activity_repo: TeamActivityRepo,
    schedule_repo: TeamScheduleRepo,
    access: TeamAccessDep,
    session: DBSession,
) -> TeamEventService:
    return TeamEventService(game_repo, activity_repo, schedule_repo, access, session)


def get_analytics_service(
    team_repo: TeamRepo,
    member_repo: TeamMemberRepo,
    tenant_repo: TenantRepo,
    game_repo: TeamGameRepo,
    schedule_repo: TeamScheduleRepo,
) -> AnalyticsService:
    return AnalyticsService(team_repo, member_repo, tenant_repo, game_repo, schedule_repo)


# Type aliases for cleaner injection
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
TenantServiceDep = Annotated[TenantService, Depends(get_tenant_service)]
TeamServiceDep = Annotated[TeamService, Depends(get_team_service)]
TeamMemberServiceDep = Annotated[TeamMemberService, Depends(get_team_member_service)]
TeamEventServiceDep = Annotated[TeamEventService, Depends(get_team_event_service)]
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
