"""Read-only aggregates over teams, games and schedules."""

from collections import Counter

from src.athlete_analytics.core.exceptions import NotFoundError
from src.athlete_analytics.models import GameResult, ScheduleType, TeamRole
from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.repositories import (
    TeamGameRepository,
    TeamMemberRepository,
    TeamRepository,
    TeamScheduleRepository,
    TenantRepository,
)
from src.athlete_analytics.schemas.analytics import (
    CategoryBreakdown,
    PerformanceStats,
    TenantOverview,
    TenantTeamsAnalytics,
    UpcomingEventCounts,
    UserTeamEntry,
    UserTeamsOverview,
    UserTeamsSummary,
)


def win_rate(wins: int, total: int) -> float:
    """Percentage of wins, rounded to two decimals. Zero games is a 0.0 rate."""
    return round(wins / total * 100, 2) if total else 0.0


class AnalyticsService:
    def __init__(
        self,
        team_repo: TeamRepository,
        member_repo: TeamMemberRepository,
        tenant_repo: TenantRepository,
        game_repo: TeamGameRepository,
        schedule_repo: TeamScheduleRepository,
    ):
        self.team_repo = team_repo
        self.member_repo = member_repo
        self.tenant_repo = tenant_repo
        self.game_repo = game_repo
        self.schedule_repo = schedule_repo

    async def user_teams(self, user_id: int) -> UserTeamsOverview:
        """Active memberships of a user with per-team wins and upcoming events."""
        memberships = await self.member_repo.list_active_for_user(user_id)
        team_ids = [team.id for _, team in memberships]
        results = await self.game_repo.result_counts(team_ids)  # type: ignore[arg-type]
        upcoming = await self.schedule_repo.upcoming_counts(team_ids, utc_now())  # type: ignore[arg-type]

        entries = [
            UserTeamEntry(
                team_id=team.id,  # type: ignore[arg-type]
                team_name=team.name,
                team_category=team.category,
                my_role=TeamRole(member.role),
                joined_at=member.joined_at,
                total_members=team.total_members,
                wins=results[team.id][GameResult.WIN.value],  # type: ignore[index]
                upcoming_events_count=sum(upcoming[team.id].values()),  # type: ignore[index]
            )
            for member, team in memberships
        ]
        summary = UserTeamsSummary(
            total_teams=len(entries),
            captain_of=sum(1 for e in entries if e.my_role == TeamRole.CAPTAIN),
            member_of=sum(1 for e in entries if e.my_role == TeamRole.MEMBER),
            total_upcoming_events=sum(e.upcoming_events_count for e in entries),
        )
        return UserTeamsOverview(teams=entries, summary=summary)

    async def tenant_analytics(self, tenant_id: int) -> TenantTeamsAnalytics:
        """Overview, performance and category breakdown for every team of a tenant."""
        if await self.tenant_repo.get_by_id(tenant_id) is None:
            raise NotFoundError("Tenant not found", code="TENANT_NOT_FOUND")

        teams = await self.team_repo.list_for_tenant(tenant_id)
        team_ids: list[int] = [team.id for team in teams]  # type: ignore[misc]
        role_counts = await self.member_repo.role_counts(team_ids)
        results = await self.game_repo.result_counts(team_ids)
        upcoming = await self.schedule_repo.upcoming_counts(team_ids, utc_now())

        active_members = {team_id: sum(role_counts[team_id].values()) for team_id in team_ids}
        games_total = {team_id: sum(results[team_id].values()) for team_id in team_ids}
        categories = list(dict.fromkeys(team.category for team in teams))

        all_results: Counter[str] = Counter()
        all_upcoming: Counter[str] = Counter()
        for team_id in team_ids:
            all_results.update(results[team_id])
            all_upcoming.update(upcoming[team_id])
        total_games = sum(games_total.values())

        breakdown = []
        for category in categories:
            ids = [team.id for team in teams if team.category == category]
            wins = sum(results[i][GameResult.WIN.value] for i in ids)  # type: ignore[index]
            games = sum(games_total[i] for i in ids)  # type: ignore[index]
            breakdown.append(
                CategoryBreakdown(
                    category=category,
                    teams_count=len(ids),
                    members_count=sum(active_members[i] for i in ids),  # type: ignore[index]
                    games_count=games,
                    win_rate=win_rate(wins, games),
                )
            )

        return TenantTeamsAnalytics(
            overview=TenantOverview(
                total_teams=len(teams),
                total_members=sum(active_members.values()),
                total_games=total_games,
                active_teams=sum(1 for count in active_members.values() if count > 0),
                categories=categories,
            ),
            performance_stats=PerformanceStats(
                overall_win_rate=win_rate(all_results[GameResult.WIN.value], total_games),
                total_wins=all_results[GameResult.WIN.value],
                total_losses=all_results[GameResult.LOSS.value],
                total_draws=all_results[GameResult.DRAW.value],
            ),
            category_breakdown=breakdown,
            upcoming_events=UpcomingEventCounts(
                games=all_upcoming[ScheduleType.GAME.value],
                sessions=all_upcoming[ScheduleType.SESSION.value],
                activities=all_upcoming[ScheduleType.ACTIVITY.value],
            ),
        )
