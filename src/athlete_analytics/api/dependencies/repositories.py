"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.athlete_analytics.api.dependencies.db import DBSession
from src.athlete_analytics.repositories import (
    TeamActivityRepository,
    TeamGameRepository,
    TeamMemberRepository,
    TeamRepository,
    TeamScheduleRepository,
    TenantRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_tenant_repository(session: DBSession) -> TenantRepository:
    return TenantRepository(session)


def get_team_repository(session: DBSession) -> TeamRepository:
    return TeamRepository(session)


def get_team_member_repository(session: DBSession) -> TeamMemberRepository:
    return TeamMemberRepository(session)


def get_team_game_repository(session: DBSession) -> TeamGameRepository:
    return TeamGameRepository(session)


def get_team_activity_repository(session: DBSession) -> TeamActivityRepository:
    return TeamActivityRepository(session)


def get_team_schedule_repository(session: DBSession) -> TeamScheduleRepository:
    return TeamScheduleRepository(session)


# Type aliases for cleaner injection
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
TenantRepo = Annotated[TenantRepository, Depends(get_tenant_repository)]
TeamRepo = Annotated[TeamRepository, Depends(get_team_repository)]
TeamMemberRepo = Annotated[TeamMemberRepository, Depends(get_team_member_repository)]
TeamGameRepo = Annotated[TeamGameRepository, Depends(get_team_game_repository)]
TeamActivityRepo = Annotated[TeamActivityRepository, Depends(get_team_activity_repository)]
TeamScheduleRepo = Annotated[TeamScheduleRepository, Depends(get_team_schedule_repository)]
