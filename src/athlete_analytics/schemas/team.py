"""Team, membership, game, activity and schedule schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.models.enums import GameResult, ScheduleType, TeamRole
from src.athlete_analytics.schemas.common import (
    NaiveUTCDatetime,
    PageParams,
    PaginationMeta,
    SortOrder,
    to_naive_utc,
)
from src.athlete_analytics.schemas.user import UserBrief

MAX_MEMBERS_PER_REQUEST = 50
MAX_SCHEDULES_PER_REQUEST = 50


def _not_in_future(value: datetime) -> datetime:
    if to_naive_utc(value) > utc_now():
        raise ValueError("Date cannot be in the future")
    return value


def _in_future(value: datetime) -> datetime:
    if to_naive_utc(value) <= utc_now():
        raise ValueError("Scheduled date must be in the future")
    return value


# --- Teams ---


class TeamMemberInput(BaseModel):
    user_id: int = Field(gt=0)
    role: TeamRole = TeamRole.MEMBER


class TeamCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    tenant_id: int = Field(gt=0)
    goals: str | None = Field(default=None, max_length=2000)
    members: list[TeamMemberInput] = Field(default_factory=list, max_length=MAX_MEMBERS_PER_REQUEST)


class TeamUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    goals: str | None = Field(default=None, max_length=2000)


class TeamRead(BaseModel):
    id: int
    name: str
    category: str
    tenant_id: int
    goals: str | None = None
    total_members: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TeamStats(BaseModel):
    wins: int = 0
    losses: int = 0
    draws: int = 0


class TeamSummary(TeamRead, TeamStats):
    captains_count: int = 0
    coaches_count: int = 0


class TeamListQuery(PageParams):
    category: str | None = Field(default=None, max_length=100)
    tenant_id: int | None = Field(default=None, gt=0)
    search: str | None = Field(default=None, max_length=255)
    sort_by: Literal["name", "created_at", "total_members", "category"] = "created_at"
    sort_order: SortOrder = "desc"
    include_inactive: bool = False


class TeamSearchQuery(PageParams):
    q: str | None = Field(default=None, max_length=255)
    category: str | None = Field(default=None, max_length=100)
    tenant_id: int | None = Field(default=None, gt=0)
    has_members: bool | None = None
    active_only: bool | None = None


class TeamListData(BaseModel):
    teams: list[TeamSummary]
    pagination: PaginationMeta


class TeamSearchFilters(BaseModel):
    available_categories: list[str]
    member_count_ranges: list[str]


class TeamSearchData(TeamListData):
    filters: TeamSearchFilters


class TeamCreationData(BaseModel):
    available_categories: list[str]
    suggested_roles: list[TeamRole]


# --- Members ---


class TeamMemberRead(BaseModel):
    id: int
    team_id: int
    user_id: int
    role: TeamRole
    is_active: bool
    joined_at: datetime
    user: UserBrief | None = None

    model_config = {"from_attributes": True}


class TeamCreatedData(BaseModel):
    team: TeamRead
    members: list[TeamMemberRead]


class AddMembersRequest(BaseModel):
    members: list[TeamMemberInput] = Field(min_length=1, max_length=MAX_MEMBERS_PER_REQUEST)


class AddMembersData(BaseModel):
    added_members: list[TeamMemberRead]
    team_total_members: int


class TeamMemberUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    role: TeamRole | None = None
    is_active: bool | None = None


class RemoveMemberData(BaseModel):
    team_total_members: int


# --- Games ---


class GameCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    played_on: NaiveUTCDatetime
    played_against: str = Field(min_length=1, max_length=255)
    result: GameResult
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("played_on")
    @classmethod
    def validate_played_on(cls, v: datetime) -> datetime:
        return _not_in_future(v)


class GameUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    result: GameResult | None = None
    description: str | None = Field(default=None, max_length=1000)


class TeamGameRead(BaseModel):
    id: int
    team_id: int
    name: str
    played_on: datetime
    played_against: str
    result: GameResult
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GameListQuery(PageParams):
    result: GameResult | None = None
    from_date: NaiveUTCDatetime | None = None
    to_date: NaiveUTCDatetime | None = None
    sort_by: Literal["played_on", "created_at"] = "played_on"
    sort_order: SortOrder = "desc"


class GameStatistics(BaseModel):
    total_games: int
    wins: int
    losses: int
    draws: int
    win_percentage: float


class GameListData(BaseModel):
    games: list[TeamGameRead]
    statistics: GameStatistics
    pagination: PaginationMeta


# --- Activities ---


class ActivityCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class TeamActivityRead(BaseModel):
    id: int
    team_id: int
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ActivityListQuery(PageParams):
    search: str | None = Field(default=None, max_length=255)
    sort_by: Literal["created_at", "name"] = "created_at"
    sort_order: SortOrder = "desc"


class ActivityListData(BaseModel):
    activities: list[TeamActivityRead]
    pagination: PaginationMeta


# --- Schedules ---


class ScheduleInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    type: ScheduleType
    description: str | None = Field(default=None, max_length=1000)
    scheduled_at: NaiveUTCDatetime
    location: str | None = Field(default=None, max_length=255)

    @field_validator("scheduled_at")
    @classmethod
    def validate_scheduled_at(cls, v: datetime) -> datetime:
        return _in_future(v)


class AddSchedulesRequest(BaseModel):
    schedules: list[ScheduleInput] = Field(min_length=1, max_length=MAX_SCHEDULES_PER_REQUEST)


class ScheduleUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    scheduled_at: NaiveUTCDatetime | None = None
    location: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("scheduled_at")
    @classmethod
    def validate_scheduled_at(cls, v: datetime | None) -> datetime | None:
        return _in_future(v) if v is not None else v


class TeamScheduleRead(BaseModel):
    id: int
    team_id: int
    name: str
    type: ScheduleType
    description: str | None = None
    scheduled_at: datetime
    location: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AddSchedulesData(BaseModel):
    added_schedules: list[TeamScheduleRead]


class ScheduleListQuery(PageParams):
    type: ScheduleType | None = None
    upcoming: bool | None = None
    from_date: NaiveUTCDatetime | None = None
    to_date: NaiveUTCDatetime | None = None
    sort_by: Literal["scheduled_at", "created_at"] = "scheduled_at"
    sort_order: SortOrder = "asc"


class ScheduleListData(BaseModel):
    schedules: list[TeamScheduleRead]
    pagination: PaginationMeta


# --- Composite views ---


class TeamComplete(TeamRead, TeamStats):
    members: list[TeamMemberRead]
    recent_games: list[TeamGameRead]
    upcoming_schedules: list[TeamScheduleRead]
    recent_activities: list[TeamActivityRead]


class TeamEditTeam(BaseModel):
    id: int
    name: str
    category: str
    goals: str | None = None

    model_config = {"from_attributes": True}


class TeamEditPermissions(BaseModel):
    can_edit_team: bool
    can_manage_members: bool
    can_add_games: bool
    can_schedule_events: bool


class TeamEditData(BaseModel):
    team: TeamEditTeam
    current_members: list[TeamMemberRead]
    permissions: TeamEditPermissions


class TeamRoleCounts(BaseModel):
    captains: int
    co_captains: int
    coaches: int
    members: int


class TeamDashboard(BaseModel):
    team_summary: TeamSummary
    upcoming_events: list[TeamScheduleRead]
    recent_activities: list[TeamActivityRead]
    recent_games: list[TeamGameRead]
    team_roles: TeamRoleCounts
