"""Repositories for team-owned games, activities and schedules."""

from collections import Counter, defaultdict
from datetime import datetime

from sqlalchemy import delete, func, or_
from sqlmodel import select

from src.athlete_analytics.models import TeamActivity, TeamGame, TeamSchedule
from src.athlete_analytics.repositories.base import BaseRepository, contains, ordered


class TeamGameRepository(BaseRepository[TeamGame]):
    model = TeamGame

    async def get_in_team(self, game_id: int, team_id: int) -> TeamGame | None:
        result = await self.session.execute(
            select(TeamGame).where(TeamGame.id == game_id, TeamGame.team_id == team_id)
        )
        return result.scalar_one_or_none()

    async def list_games(
        self,
        team_id: int,
        page: int,
        limit: int,
        result: str | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        sort_by: str = "played_on",
        sort_order: str = "desc",
    ) -> tuple[list[TeamGame], int]:
        query = select(TeamGame).where(TeamGame.team_id == team_id)
        if result:
            query = query.where(TeamGame.result == result)
        if from_date is not None:
            query = query.where(TeamGame.played_on >= from_date)
        if to_date is not None:
            query = query.where(TeamGame.played_on <= to_date)
        column = TeamGame.created_at if sort_by == "created_at" else TeamGame.played_on
        query = ordered(query, column, sort_order, tiebreak=TeamGame.id)
        return await self.paginate(query, page, limit)

    async def recent(self, team_id: int, limit: int = 5) -> list[TeamGame]:
        result = await self.session.execute(
            select(TeamGame)
            .where(TeamGame.team_id == team_id)
            .order_by(TeamGame.played_on.desc(), TeamGame.id.desc())  # type: ignore[attr-defined, union-attr]
            .limit(limit)
        )
        return list(result.scalars().all())

    async def result_counts(self, team_ids: list[int]) -> dict[int, Counter[str]]:
        """Per-team count of games by result."""
        counts: dict[int, Counter[str]] = defaultdict(Counter)
        if not team_ids:
            return counts
        result = await self.session.execute(
            select(TeamGame.team_id, TeamGame.result, func.count())
            .where(TeamGame.team_id.in_(team_ids))  # type: ignore[attr-defined]
            .group_by(TeamGame.team_id, TeamGame.result)
        )
        for team_id, game_result, count in result.all():
            counts[team_id][game_result] = count
        return counts

    async def delete_for_team(self, team_id: int) -> None:
        await self.session.execute(delete(TeamGame).where(TeamGame.team_id == team_id))  # type: ignore[arg-type]


class TeamActivityRepository(BaseRepository[TeamActivity]):
    model = TeamActivity

    async def list_activities(
        self,
        team_id: int,
        page: int,
        limit: int,
        search: str | None = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> tuple[list[TeamActivity], int]:
        query = select(TeamActivity).where(TeamActivity.team_id == team_id)
        if search:
            query = query.where(
                or_(contains(TeamActivity.name, search), contains(TeamActivity.description, search))
            )
        column = TeamActivity.name if sort_by == "name" else TeamActivity.created_at
        query = ordered(query, column, sort_order, tiebreak=TeamActivity.id)
        return await self.paginate(query, page, limit)

    async def recent(self, team_id: int, limit: int = 5) -> list[TeamActivity]:
        result = await self.session.execute(
            select(TeamActivity)
            .where(TeamActivity.team_id == team_id)
            .order_by(TeamActivity.created_at.desc(), TeamActivity.id.desc())  # type: ignore[attr-defined, union-attr]
            .limit(limit)
        )
        return list(result.scalars().all())

    async def delete_for_team(self, team_id: int) -> None:
        await self.session.execute(delete(TeamActivity).where(TeamActivity.team_id == team_id))  # type: ignore[arg-type]


class TeamScheduleRepository(BaseRepository[TeamSchedule]):
    model = TeamSchedule

    async def get_in_team(self, schedule_id: int, team_id: int) -> TeamSchedule | None:
        result = await self.session.execute(
            select(TeamSchedule).where(
                TeamSchedule.id == schedule_id, TeamSchedule.team_id == team_id
            )
        )
        return result.scalar_one_or_none()

    async def list_schedules(
        self,
        team_id: int,
        page: int,
        limit: int,
        now: datetime,
        type: str | None = None,
        upcoming: bool | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        sort_by: str = "scheduled_at",
        sort_order: str = "asc",
    ) -> tuple[list[TeamSchedule], int]:
        query = select(TeamSchedule).where(TeamSchedule.team_id == team_id)
        if type:
            query = query.where(TeamSchedule.type == type)
        if upcoming is True:
            query = query.where(TeamSchedule.scheduled_at >= now)
        elif upcoming is False:
            query = query.where(TeamSchedule.scheduled_at < now)
        if from_date is not None:
            query = query.where(TeamSchedule.scheduled_at >= from_date)
        if to_date is not None:
            query = query.where(TeamSchedule.scheduled_at <= to_date)
        column = TeamSchedule.created_at if sort_by == "created_at" else TeamSchedule.scheduled_at
        query = ordered(query, column, sort_order, tiebreak=TeamSchedule.id)
        return await self.paginate(query, page, limit)

    async def upcoming(self, team_id: int, now: datetime, limit: int = 5) -> list[TeamSchedule]:
        result = await self.session.execute(
            select(TeamSchedule)
            .where(TeamSchedule.team_id == team_id, TeamSchedule.scheduled_at >= now)
            .order_by(TeamSchedule.scheduled_at.asc(), TeamSchedule.id.asc())  # type: ignore[attr-defined, union-attr]
            .limit(limit)
        )
        return list(result.scalars().all())

    async def upcoming_counts(self, team_ids: list[int], now: datetime) -> dict[int, Counter[str]]:
        """Per-team count of future schedules by type."""
        counts: dict[int, Counter[str]] = defaultdict(Counter)
        if not team_ids:
            return counts
        result = await self.session.execute(
            select(TeamSchedule.team_id, TeamSchedule.type, func.count())
            .where(
                TeamSchedule.team_id.in_(team_ids),  # type: ignore[attr-defined]
                TeamSchedule.scheduled_at >= now,
            )
            .group_by(TeamSchedule.team_id, TeamSchedule.type)
        )
        for team_id, schedule_type, count in result.all():
            counts[team_id][schedule_type] = count
        return counts

    async def delete_for_team(self, team_id: int) -> None:
        await self.session.execute(delete(TeamSchedule).where(TeamSchedule.team_id == team_id))  # type: ignore[arg-type]
