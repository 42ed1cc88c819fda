"""Team endpoints: teams, members, games, activities, schedules and dashboard.

Every team-scoped route resolves the team before its permission check, so a
missing team is always a 404 and never a 403.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.athlete_analytics.api.dependencies import (
    CurrentPrincipal,
    TeamEventServiceDep,
    TeamMemberServiceDep,
    TeamServiceDep,
)
from src.athlete_analytics.schemas.common import ApiResponse, PaginationMeta
from src.athlete_analytics.schemas.team import (
    ActivityCreate,
    ActivityListData,
    ActivityListQuery,
    AddMembersData,
    AddMembersRequest,
    AddSchedulesData,
    AddSchedulesRequest,
    GameCreate,
    GameListData,
    GameListQuery,
    GameUpdate,
    RemoveMemberData,
    ScheduleListData,
    ScheduleListQuery,
    ScheduleUpdate,
    TeamActivityRead,
    TeamComplete,
    TeamCreate,
    TeamCreatedData,
    TeamCreationData,
    TeamDashboard,
    TeamEditData,
    TeamGameRead,
    TeamListData,
    TeamListQuery,
    TeamMemberRead,
    TeamMemberUpdate,
    TeamRead,
    TeamScheduleRead,
    TeamSearchData,
    TeamSearchQuery,
    TeamUpdate,
)

router = APIRouter(prefix="/teams", tags=["teams"])

_TEAM_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Caller lacks the required team role"},
    404: {"description": "Team not found"},
}


@router.post(
    "",
    response_model=ApiResponse[TeamCreatedData],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Duplicate user IDs in members"},
        404: {"description": "Tenant or user not found"},
    },
)
async def create_team(
    data: TeamCreate, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamCreatedData]:
    """Create a team, optionally with its initial members."""
    team, members = await service.create_team(principal, data)
    return ApiResponse(
        data=TeamCreatedData(team=TeamRead.model_validate(team), members=members),
        message="Team created successfully",
    )


@router.get("", response_model=ApiResponse[TeamListData])
async def list_teams(
    query: Annotated[TeamListQuery, Query()],
    principal: CurrentPrincipal,
    service: TeamServiceDep,
) -> ApiResponse[TeamListData]:
    teams, total = await service.list_teams(query)
    return ApiResponse(
        data=TeamListData(
            teams=teams, pagination=PaginationMeta.build(query.page, query.limit, total)
        ),
        message="Teams retrieved successfully",
    )


@router.get("/search", response_model=ApiResponse[TeamSearchData])
async def search_teams(
    query: Annotated[TeamSearchQuery, Query()],
    principal: CurrentPrincipal,
    service: TeamServiceDep,
) -> ApiResponse[TeamSearchData]:
    teams, total, filters = await service.search_teams(query)
    return ApiResponse(
        data=TeamSearchData(
            teams=teams,
            pagination=PaginationMeta.build(query.page, query.limit, total),
            filters=filters,
        ),
        message="Teams search completed successfully",
    )


@router.get("/creation-data", response_model=ApiResponse[TeamCreationData])
async def get_creation_data(
    principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamCreationData]:
    """Static categories and team roles offered by the creation form."""
    return ApiResponse(
        data=service.creation_data(), message="Team creation data retrieved successfully"
    )


@router.get("/{team_id}", response_model=ApiResponse[TeamRead], responses=_TEAM_RESPONSES)
async def get_team(
    team_id: int, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamRead]:
    team = await service.get_team(team_id)
    return ApiResponse(data=TeamRead.model_validate(team), message="Team retrieved successfully")


@router.get("/{team_id}/complete", response_model=ApiResponse[TeamComplete], responses=_TEAM_RESPONSES)
async def get_team_complete(
    team_id: int, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamComplete]:
    """Team with members, recent games and activities, and upcoming schedules."""
    return ApiResponse(
        data=await service.get_complete(team_id),
        message="Complete team details retrieved successfully",
    )


@router.get("/{team_id}/edit-data", response_model=ApiResponse[TeamEditData], responses=_TEAM_RESPONSES)
async def get_team_edit_data(
    team_id: int, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamEditData]:
    return ApiResponse(
        data=await service.get_edit_data(team_id, principal),
        message="Team edit data retrieved successfully",
    )


@router.get("/{team_id}/dashboard", response_model=ApiResponse[TeamDashboard], responses=_TEAM_RESPONSES)
async def get_team_dashboard(
    team_id: int, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamDashboard]:
    """Dashboard for any active member of the team (or an admin)."""
    return ApiResponse(
        data=await service.get_dashboard(team_id, principal),
        message="Team dashboard retrieved successfully",
    )


@router.put("/{team_id}", response_model=ApiResponse[TeamRead], responses=_TEAM_RESPONSES)
async def update_team(
    team_id: int, data: TeamUpdate, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[TeamRead]:
    team = await service.update_team(team_id, principal, data)
    return ApiResponse(data=TeamRead.model_validate(team), message="Team updated successfully")


@router.delete("/{team_id}", response_model=ApiResponse[None], responses=_TEAM_RESPONSES)
async def delete_team(
    team_id: int, principal: CurrentPrincipal, service: TeamServiceDep
) -> ApiResponse[None]:
    """Delete a team and everything it owns. Admins only."""
    await service.delete_team(team_id, principal)
    return ApiResponse(message="Team deleted successfully")


# --- Members ---


@router.post(
    "/{team_id}/members",
    response_model=ApiResponse[AddMembersData],
    status_code=status.HTTP_201_CREATED,
    responses={**_TEAM_RESPONSES, 409: {"description": "User is already a member"}},
)
async def add_team_members(
    team_id: int,
    data: AddMembersRequest,
    principal: CurrentPrincipal,
    service: TeamMemberServiceDep,
) -> ApiResponse[AddMembersData]:
    added, total = await service.add_members(team_id, principal, data.members)
    return ApiResponse(
        data=AddMembersData(added_members=added, team_total_members=total),
        message="Team members added successfully",
    )


@router.patch(
    "/{team_id}/members/{member_id}",
    response_model=ApiResponse[TeamMemberRead],
    responses=_TEAM_RESPONSES,
)
async def update_team_member(
    team_id: int,
    member_id: int,
    data: TeamMemberUpdate,
    principal: CurrentPrincipal,
    service: TeamMemberServiceDep,
) -> ApiResponse[TeamMemberRead]:
    member = await service.update_member(team_id, member_id, principal, data)
    return ApiResponse(data=member, message="Team member updated successfully")


@router.delete(
    "/{team_id}/members/{member_id}",
    response_model=ApiResponse[RemoveMemberData],
    responses=_TEAM_RESPONSES,
)
async def remove_team_member(
    team_id: int, member_id: int, principal: CurrentPrincipal, service: TeamMemberServiceDep
) -> ApiResponse[RemoveMemberData]:
    total = await service.remove_member(team_id, member_id, principal)
    return ApiResponse(
        data=RemoveMemberData(team_total_members=total),
        message="Team member removed successfully",
    )


# --- Games ---


@router.post(
    "/{team_id}/games",
    response_model=ApiResponse[TeamGameRead],
    status_code=status.HTTP_201_CREATED,
    responses=_TEAM_RESPONSES,
)
async def add_team_game(
    team_id: int, data: GameCreate, principal: CurrentPrincipal, service: TeamEventServiceDep
) -> ApiResponse[TeamGameRead]:
    game = await service.add_game(team_id, principal, data)
    return ApiResponse(
        data=TeamGameRead.model_validate(game), message="Game result added successfully"
    )


@router.get("/{team_id}/games", response_model=ApiResponse[GameListData], responses=_TEAM_RESPONSES)
async def list_team_games(
    team_id: int,
    query: Annotated[GameListQuery, Query()],
    principal: CurrentPrincipal,
    service: TeamEventServiceDep,
) -> ApiResponse[GameListData]:
    games, total, statistics = await service.list_games(team_id, query)
    return ApiResponse(
        data=GameListData(
            games=[TeamGameRead.model_validate(g) for g in games],
            statistics=statistics,
            pagination=PaginationMeta.build(query.page, query.limit, total),
        ),
        message="Team games retrieved successfully",
    )


@router.put(
    "/{team_id}/games/{game_id}", response_model=ApiResponse[TeamGameRead], responses=_TEAM_RESPONSES
)
async def update_team_game(
    team_id: int,
    game_id: int,
    data: GameUpdate,
    principal: CurrentPrincipal,
    service: TeamEventServiceDep,
) -> ApiResponse[TeamGameRead]:
    game = await service.update_game(team_id, game_id, principal, data)
    return ApiResponse(data=TeamGameRead.model_validate(game), message="Game updated successfully")


@router.delete(
    "/{team_id}/games/{game_id}", response_model=ApiResponse[None], responses=_TEAM_RESPONSES
)
async def delete_team_game(
    team_id: int, game_id: int, principal: CurrentPrincipal, service: TeamEventServiceDep
) -> ApiResponse[None]:
    await service.delete_game(team_id, game_id, principal)
    return ApiResponse(message="Game deleted successfully")


# --- Activities ---


@router.post(
    "/{team_id}/activities",
    response_model=ApiResponse[TeamActivityRead],
    status_code=status.HTTP_201_CREATED,
    responses=_TEAM_RESPONSES,
)
async def add_team_activity(
    team_id: int, data: ActivityCreate, principal: CurrentPrincipal, service: TeamEventServiceDep
) -> ApiResponse[TeamActivityRead]:
    activity = await service.add_activity(team_id, principal, data)
    return ApiResponse(
        data=TeamActivityRead.model_validate(activity),
        message="Team activity added successfully",
    )


@router.get(
    "/{team_id}/activities", response_model=ApiResponse[ActivityListData], responses=_TEAM_RESPONSES
)
async def list_team_activities(
    team_id: int,
    query: Annotated[ActivityListQuery, Query()],
    principal: CurrentPrincipal,
    service: TeamEventServiceDep,
) -> ApiResponse[ActivityListData]:
    activities, total = await service.list_activities(team_id, query)
    return ApiResponse(
        data=ActivityListData(
            activities=[TeamActivityRead.model_validate(a) for a in activities],
            pagination=PaginationMeta.build(query.page, query.limit, total),
        ),
        message="Team activities retrieved successfully",
    )


# --- Schedules ---


@router.post(
    "/{team_id}/schedules",
    response_model=ApiResponse[AddSchedulesData],
    status_code=status.HTTP_201_CREATED,
    responses=_TEAM_RESPONSES,
)
async def add_team_schedules(
    team_id: int,
    data: AddSchedulesRequest,
    principal: CurrentPrincipal,
    service: TeamEventServiceDep,
) -> ApiResponse[AddSchedulesData]:
    schedules = await service.add_schedules(team_id, principal, data.schedules)
    return ApiResponse(
        data=AddSchedulesData(
            added_schedules=[TeamScheduleRead.model_validate(s) for s in schedules]
        ),
        message="Team schedules added successfully",
    )


@router.get(
    "/{team_id}/schedules", response_model=ApiResponse[ScheduleListData], responses=_TEAM_RESPONSES
)
async def list_team_schedules(
    team_id: int,
    query: Annotated[ScheduleListQuery, Query()],
    principal: CurrentPrincipal,
    service: TeamEventServiceDep,
) -> ApiResponse[ScheduleListData]:
    schedules, total = await service.list_schedules(team_id, query)
    return ApiResponse(
        data=ScheduleListData(
            schedules=[TeamScheduleRead.model_validate(s) for s in schedules],
            pagination=PaginationMeta.build(query.page, query.limit, total),
        ),
        message="Team schedules retrieved successfully",
    )


@router.put(
    "/{team_id}/schedules/{schedule_id}",
    response_model=ApiResponse[TeamScheduleRead],
    responses=_TEAM_RESPONSES,
)
async def update_team_schedule(
    team_id: int,
    schedule_id: int,
    data: ScheduleUpdate,
    principal: CurrentPrincipal,
    service: TeamEventServiceDep,
) -> ApiResponse[TeamScheduleRead]:
    schedule = await service.update_schedule(team_id, schedule_id, principal, data)
    return ApiResponse(
        data=TeamScheduleRead.model_validate(schedule),
        message="Team schedule updated successfully",
    )


@router.delete(
    "/{team_id}/schedules/{schedule_id}",
    response_model=ApiResponse[None],
    responses=_TEAM_RESPONSES,
)
async def delete_team_schedule(
    team_id: int, schedule_id: int, principal: CurrentPrincipal, service: TeamEventServiceDep
) -> ApiResponse[None]:
    await service.delete_schedule(team_id, schedule_id, principal)
    return ApiResponse(message="Team schedule deleted successfully")
