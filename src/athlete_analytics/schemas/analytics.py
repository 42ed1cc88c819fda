from datetime import datetime

from pydantic import BaseModel

from src.athlete_analytics.models.enums import TeamRole


class UserTeamEntry(BaseModel):
    team_id: int
    team_name: str
    team_category: str
    my_role: TeamRole
    joined_at: datetime
    total_members: int
    wins: int
    upcoming_events_count: int


class UserTeamsSummary(BaseModel):
    total_teams: int
    captain_of: int
    member_of: int
    total_upcoming_events: int


class UserTeamsOverview(BaseModel):
    teams: list[UserTeamEntry]
    summary: UserTeamsSummary


class TenantOverview(BaseModel):
    total_teams: int
    total_members: int
    total_games: int
    active_teams: int
    categories: list[str]


class PerformanceStats(BaseModel):
    overall_win_rate: float
    total_wins: int
    total_losses: int
    total_draws: int


class CategoryBreakdown(BaseModel):
    category: str
    teams_count: int
    members_count: int
    games_count: int
    win_rate: float


class UpcomingEventCounts(BaseModel):
    games: int
    sessions: int
    activities: int


class TenantTeamsAnalytics(BaseModel):
    overview: TenantOverview
    performance_stats: PerformanceStats
    category_breakdown: list[CategoryBreakdown]
    upcoming_events: UpcomingEventCounts
