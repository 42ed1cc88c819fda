"""Games, activities and schedules owned by a team."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.exceptions import NotFoundError
from src.athlete_analytics.core.logging import get_logger
from src.athlete_analytics.core.security import Principal
from src.athlete_analytics.models import GameResult, TeamActivity, TeamGame, TeamSchedule
from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.repositories import (
    TeamActivityRepository,
    TeamGameRepository,
    TeamScheduleRepository,
)
from src.athlete_analytics.schemas.team import (
    ActivityCreate,
    ActivityListQuery,
    GameCreate,
    GameListQuery,
    GameStatistics,
    GameUpdate,
    ScheduleInput,
    ScheduleListQuery,
    ScheduleUpdate,
)
from src.athlete_analytics.services.team_access import TeamAccess

logger = get_logger(__name__)


class TeamEventService:
    def __init__(
        self,
        game_repo: TeamGameRepository,
        activity_repo: TeamActivityRepository,
        schedule_repo: TeamScheduleRepository,
        access: TeamAccess,
        session: AsyncSession,
    ):
        self.game_repo = game_repo
        self.activity_repo = activity_repo
        self.schedule_repo = schedule_repo
        self.access = access
        self.session = session

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    # --- Games ---

    async def add_game(self, team_id: int, principal: Principal, data: GameCreate) -> TeamGame:
        await self.access.require(team_id, principal, "add games for this team")
        game = TeamGame(
            team_id=team_id,
            name=data.name,
            played_on=data.played_on,
            played_against=data.played_against,
            result=data.result.value,
            description=data.description,
        )
        self.game_repo.add(game)
        await self._commit()
        await self.session.refresh(game)
        logger.info("Game result added", team_id=team_id, game_id=game.id, result=game.result)
        return game

    async def list_games(
        self, team_id: int, query: GameListQuery
    ) -> tuple[list[TeamGame], int, GameStatistics]:
        await self.access.get_team_or_404(team_id)
        games, total = await self.game_repo.list_games(
            team_id,
            page=query.page,
            limit=query.limit,
            result=query.result.value if query.result else None,
            from_date=query.from_date,
            to_date=query.to_date,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )
        counts = (await self.game_repo.result_counts([team_id]))[team_id]
        total_games = sum(counts.values())
        wins = counts[GameResult.WIN.value]
        statistics = GameStatistics(
            total_games=total_games,
            wins=wins,
            losses=counts[GameResult.LOSS.value],
            draws=counts[GameResult.DRAW.value],
            win_percentage=round(wins / total_games * 100, 2) if total_games else 0.0,
        )
        return games, total, statistics

    async def _get_game(self, team_id: int, game_id: int) -> TeamGame:
        game = await self.game_repo.get_in_team(game_id, team_id)
        if game is None:
            raise NotFoundError("Game not found", code="GAME_NOT_FOUND")
        return game

    async def update_game(
        self, team_id: int, game_id: int, principal: Principal, data: GameUpdate
    ) -> TeamGame:
        await self.access.require(team_id, principal, "update games for this team")
        game = await self._get_game(team_id, game_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(game, field, value.value if isinstance(value, GameResult) else value)
        game.updated_at = utc_now()
        await self._commit()
        await self.session.refresh(game)
        logger.info("Game updated", team_id=team_id, game_id=game_id, fields=sorted(update_data))
        return game

    async def delete_game(self, team_id: int, game_id: int, principal: Principal) -> None:
        await self.access.require(team_id, principal, "delete games for this team")
        game = await self._get_game(team_id, game_id)
        await self.game_repo.delete(game)
        await self._commit()
        logger.info("Game deleted", team_id=team_id, game_id=game_id)

    # --- Activities ---

    async def add_activity(
        self, team_id: int, principal: Principal, data: ActivityCreate
    ) -> TeamActivity:
        await self.access.require(team_id, principal, "add activities for this team")
        activity = TeamActivity(team_id=team_id, name=data.name, description=data.description)
        self.activity_repo.add(activity)
        await self._commit()
        await self.session.refresh(activity)
        logger.info("Activity added", team_id=team_id, activity_id=activity.id)
        return activity

    async def list_activities(
        self, team_id: int, query: ActivityListQuery
    ) -> tuple[list[TeamActivity], int]:
        await self.access.get_team_or_404(team_id)
        return await self.activity_repo.list_activities(
            team_id,
            page=query.page,
            limit=query.limit,
            search=query.search,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )

    # --- Schedules ---

    async def add_schedules(
        self, team_id: int, principal: Principal, schedules: list[ScheduleInput]
    ) -> list[TeamSchedule]:
        await self.access.require(team_id, principal, "add schedules for this team")
        created = [
            TeamSchedule(
                team_id=team_id,
                name=s.name,
                type=s.type.value,
                description=s.description,
                scheduled_at=s.scheduled_at,
                location=s.location,
            )
            for s in schedules
        ]
        for schedule in created:
            self.schedule_repo.add(schedule)
        await self._commit()
        for schedule in created:
            await self.session.refresh(schedule)
        logger.info("Schedules added", team_id=team_id, count=len(created))
        return created

    async def list_schedules(
        self, team_id: int, query: ScheduleListQuery
    ) -> tuple[list[TeamSchedule], int]:
        await self.access.get_team_or_404(team_id)
        return await self.schedule_repo.list_schedules(
            team_id,
            page=query.page,
            limit=query.limit,
            now=utc_now(),
            type=query.type.value if query.type else None,
            upcoming=query.upcoming,
            from_date=query.from_date,
            to_date=query.to_date,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )

    async def _get_schedule(self, team_id: int, schedule_id: int) -> TeamSchedule:
        schedule = await self.schedule_repo.get_in_team(schedule_id, team_id)
        if schedule is None:
            raise NotFoundError("Schedule not found", code="SCHEDULE_NOT_FOUND")
        return schedule

    async def update_schedule(
        self, team_id: int, schedule_id: int, principal: Principal, data: ScheduleUpdate
    ) -> TeamSchedule:
        await self.access.require(team_id, principal, "update schedules for this team")
        schedule = await self._get_schedule(team_id, schedule_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(schedule, field, value)
        schedule.updated_at = utc_now()
        await self._commit()
        await self.session.refresh(schedule)
        logger.info(
            "Schedule updated", team_id=team_id, schedule_id=schedule_id, fields=sorted(update_data)
        )
        return schedule

    async def delete_schedule(self, team_id: int, schedule_id: int, principal: Principal) -> None:
        await self.access.require(team_id, principal, "delete schedules for this team")
        schedule = await self._get_schedule(team_id, schedule_id)
        await self.schedule_repo.delete(schedule)
        await self._commit()
        logger.info("Schedule deleted", team_id=team_id, schedule_id=schedule_id)
