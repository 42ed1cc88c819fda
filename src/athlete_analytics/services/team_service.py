"""Team service - team records and their composite read views."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.exceptions import (
    AppError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
)
from src.athlete_analytics.core.logging import get_logger
from src.athlete_analytics.core.security import Principal
from src.athlete_analytics.models import (
    GameResult,
    Team,
    TeamMember,
    TeamRole,
    User,
)
from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.repositories import (
    TeamActivityRepository,
    TeamGameRepository,
    TeamMemberRepository,
    TeamRepository,
    TeamScheduleRepository,
    TenantRepository,
    UserRepository,
)
from src.athlete_analytics.schemas.team import (
    TeamActivityRead,
    TeamComplete,
    TeamCreate,
    TeamCreationData,
    TeamDashboard,
    TeamEditData,
    TeamEditPermissions,
    TeamEditTeam,
    TeamGameRead,
    TeamListQuery,
    TeamMemberInput,
    TeamMemberRead,
    TeamRead,
    TeamRoleCounts,
    TeamScheduleRead,
    TeamSearchFilters,
    TeamSearchQuery,
    TeamSummary,
    TeamUpdate,
)
from src.athlete_analytics.schemas.user import UserBrief
from src.athlete_analytics.services.team_access import TeamAccess

logger = get_logger(__name__)

CREATION_CATEGORIES = ["Football", "Basketball", "Cricket", "Tennis", "Swimming", "Athletics"]
SEARCH_CATEGORIES = ["Football", "Basketball", "Cricket", "Tennis"]
MEMBER_COUNT_RANGES = ["1-10", "11-20", "21+"]
RECENT_ITEMS = 5


def member_view(member: TeamMember, user: User | None = None) -> TeamMemberRead:
    return TeamMemberRead(
        id=member.id,  # type: ignore[arg-type]
        team_id=member.team_id,
        user_id=member.user_id,
        role=TeamRole(member.role),
        is_active=member.is_active,
        joined_at=member.joined_at,
        user=UserBrief.model_validate(user) if user is not None else None,
    )


async def validate_new_members(
    members: list[TeamMemberInput], user_repo: UserRepository
) -> None:
    """Reject duplicate user ids in one request and ids with no account."""
    user_ids = [m.user_id for m in members]
    if len(set(user_ids)) != len(user_ids):
        raise BadRequestError(
            "Duplicate user IDs found in members list", code="DUPLICATE_MEMBERS"
        )
    found = {u.id for u in await user_repo.get_many(user_ids)}
    missing = sorted(set(user_ids) - found)
    if missing:
        raise NotFoundError(
            "User not found", code="USER_NOT_FOUND", details={"user_ids": missing}
        )


class TeamService:
    """Team records, listings and composite views."""

    def __init__(
        self,
        team_repo: TeamRepository,
        member_repo: TeamMemberRepository,
        tenant_repo: TenantRepository,
        user_repo: UserRepository,
        game_repo: TeamGameRepository,
        activity_repo: TeamActivityRepository,
        schedule_repo: TeamScheduleRepository,
        access: TeamAccess,
        session: AsyncSession,
    ):
        self.team_repo = team_repo
        self.member_repo = member_repo
        self.tenant_repo = tenant_repo
        self.user_repo = user_repo
        self.game_repo = game_repo
        self.activity_repo = activity_repo
        self.schedule_repo = schedule_repo
        self.access = access
        self.session = session

    # --- Writes ---

    async def create_team(
        self, principal: Principal, data: TeamCreate
    ) -> tuple[Team, list[TeamMemberRead]]:
        if await self.tenant_repo.get_by_id(data.tenant_id) is None:
            raise NotFoundError("Tenant not found", code="TENANT_NOT_FOUND")
        await validate_new_members(data.members, self.user_repo)

        try:
            team = Team(
                name=data.name,
                category=data.category,
                tenant_id=data.tenant_id,
                goals=data.goals,
                total_members=len(data.members),
            )
            self.team_repo.add(team)
            await self.session.flush()

            members = [
                TeamMember(team_id=team.id, user_id=m.user_id, role=m.role.value)  # type: ignore[arg-type]
                for m in data.members
            ]
            for member in members:
                self.member_repo.add(member)
            await self.session.commit()
            await self.session.refresh(team)
        except AppError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create team", error=str(e))
            raise

        logger.info(
            "Team created",
            team_id=team.id,
            tenant_id=team.tenant_id,
            created_by=principal.id,
            members=len(members),
        )
        rows = await self.member_repo.list_with_users(team.id)  # type: ignore[arg-type]
        return team, [member_view(member, user) for member, user in rows]

    async def update_team(self, team_id: int, principal: Principal, data: TeamUpdate) -> Team:
        team = await self.access.require(team_id, principal, "update this team")
        update_data = data.model_dump(exclude_unset=True)
        try:
            for field, value in update_data.items():
                setattr(team, field, value)
            team.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(team)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Team updated", team_id=team.id, fields=sorted(update_data))
        return team

    async def delete_team(self, team_id: int, principal: Principal) -> None:
        """Delete a team and everything it owns. Global admins only."""
        team = await self.access.get_team_or_404(team_id)
        if not principal.is_admin:
            raise ForbiddenError("Only admins can delete teams")

        try:
            await self.member_repo.delete_for_team(team_id)
            await self.game_repo.delete_for_team(team_id)
            await self.activity_repo.delete_for_team(team_id)
            await self.schedule_repo.delete_for_team(team_id)
            await self.team_repo.delete(team)
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to delete team", team_id=team_id, error=str(e))
            raise

        logger.info("Team deleted", team_id=team_id, deleted_by=principal.id)

    # --- Reads ---

    async def get_team(self, team_id: int) -> Team:
        return await self.access.get_team_or_404(team_id)

    async def summarize(self, teams: list[Team], include_inactive: bool = False) -> list[TeamSummary]:
        team_ids = [t.id for t in teams]
        results = await self.game_repo.result_counts(team_ids)  # type: ignore[arg-type]
        roles = await self.member_repo.role_counts(team_ids, include_inactive)  # type: ignore[arg-type]
        return [
            TeamSummary(
                **TeamRead.model_validate(team).model_dump(),
                wins=results[team.id][GameResult.WIN.value],  # type: ignore[index]
                losses=results[team.id][GameResult.LOSS.value],  # type: ignore[index]
                draws=results[team.id][GameResult.DRAW.value],  # type: ignore[index]
                captains_count=roles[team.id][TeamRole.CAPTAIN.value],  # type: ignore[index]
                coaches_count=roles[team.id][TeamRole.COACH.value],  # type: ignore[index]
            )
            for team in teams
        ]

    async def list_teams(self, query: TeamListQuery) -> tuple[list[TeamSummary], int]:
        teams, total = await self.team_repo.list_teams(
            page=query.page,
            limit=query.limit,
            category=query.category,
            tenant_id=query.tenant_id,
            search=query.search,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )
        return await self.summarize(teams, query.include_inactive), total

    async def search_teams(
        self, query: TeamSearchQuery
    ) -> tuple[list[TeamSummary], int, TeamSearchFilters]:
        include_inactive = query.active_only is False
        teams, total = await self.team_repo.list_teams(
            page=query.page,
            limit=query.limit,
            category=query.category,
            tenant_id=query.tenant_id,
            search=query.q,
            has_members=query.has_members,
        )
        filters = TeamSearchFilters(
            available_categories=SEARCH_CATEGORIES,
            member_count_ranges=MEMBER_COUNT_RANGES,
        )
        return await self.summarize(teams, include_inactive), total, filters

    def creation_data(self) -> TeamCreationData:
        return TeamCreationData(
            available_categories=CREATION_CATEGORIES,
            suggested_roles=list(TeamRole),
        )

    async def get_complete(self, team_id: int) -> TeamComplete:
        team = await self.access.get_team_or_404(team_id)
        rows = await self.member_repo.list_with_users(team_id)
        results = (await self.game_repo.result_counts([team_id]))[team_id]
        games = await self.game_repo.recent(team_id, RECENT_ITEMS)
        schedules = await self.schedule_repo.upcoming(team_id, utc_now(), RECENT_ITEMS)
        activities = await self.activity_repo.recent(team_id, RECENT_ITEMS)
        return TeamComplete(
            **TeamRead.model_validate(team).model_dump(),
            members=[member_view(member, user) for member, user in rows],
            recent_games=[TeamGameRead.model_validate(g) for g in games],
            upcoming_schedules=[TeamScheduleRead.model_validate(s) for s in schedules],
            recent_activities=[TeamActivityRead.model_validate(a) for a in activities],
            wins=results[GameResult.WIN.value],
            losses=results[GameResult.LOSS.value],
            draws=results[GameResult.DRAW.value],
        )

    async def get_edit_data(self, team_id: int, principal: Principal) -> TeamEditData:
        team = await self.access.get_team_or_404(team_id)
        can_manage = await self.access.can_manage(team, principal)
        rows = await self.member_repo.list_with_users(team_id)
        return TeamEditData(
            team=TeamEditTeam.model_validate(team),
            current_members=[member_view(member, user) for member, user in rows],
            permissions=TeamEditPermissions(
                can_edit_team=can_manage,
                can_manage_members=can_manage,
                can_add_games=can_manage,
                can_schedule_events=can_manage,
            ),
        )

    async def get_dashboard(self, team_id: int, principal: Principal) -> TeamDashboard:
        await self.access.require_dashboard(team_id, principal)
        complete = await self.get_complete(team_id)
        roles = [m.role for m in complete.members]
        counts = TeamRoleCounts(
            captains=roles.count(TeamRole.CAPTAIN),
            co_captains=roles.count(TeamRole.CO_CAPTAIN),
            coaches=roles.count(TeamRole.COACH),
            members=roles.count(TeamRole.MEMBER),
        )
        summary = TeamSummary(
            **complete.model_dump(include=set(TeamRead.model_fields)),
            wins=complete.wins,
            losses=complete.losses,
            draws=complete.draws,
            captains_count=counts.captains,
            coaches_count=counts.coaches,
        )
        return TeamDashboard(
            team_summary=summary,
            upcoming_events=complete.upcoming_schedules,
            recent_activities=complete.recent_activities,
            recent_games=complete.recent_games,
            team_roles=counts,
        )
