"""Repositories for Team and TeamMember entities."""

from collections import Counter, defaultdict

from sqlalchemy import delete, func, or_
from sqlmodel import select

from src.athlete_analytics.models import Team, TeamMember, User
from src.athlete_analytics.repositories.base import BaseRepository, contains, ordered

TEAM_SORT_COLUMNS = {
    "name": Team.name,
    "created_at": Team.created_at,
    "total_members": Team.total_members,
    "category": Team.category,
}


class TeamRepository(BaseRepository[Team]):
    """Repository for Team records."""

    model = Team

    async def list_teams(
        self,
        page: int,
        limit: int,
        category: str | None = None,
        tenant_id: int | None = None,
        search: str | None = None,
        has_members: bool | None = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> tuple[list[Team], int]:
        query = select(Team)
        if category:
            query = query.where(Team.category == category)
        if tenant_id is not None:
            query = query.where(Team.tenant_id == tenant_id)
        if search:
            query = query.where(or_(contains(Team.name, search), contains(Team.category, search)))
        if has_members is True:
            query = query.where(Team.total_members > 0)
        elif has_members is False:
            query = query.where(Team.total_members == 0)
        query = ordered(query, TEAM_SORT_COLUMNS[sort_by], sort_order, tiebreak=Team.id)
        return await self.paginate(query, page, limit)

    async def list_for_tenant(self, tenant_id: int) -> list[Team]:
        result = await self.session.execute(
            select(Team).where(Team.tenant_id == tenant_id).order_by(Team.id)
        )
        return list(result.scalars().all())

    async def get_many(self, ids: list[int]) -> list[Team]:
        if not ids:
            return []
        result = await self.session.execute(select(Team).where(Team.id.in_(ids)))  # type: ignore[union-attr]
        return list(result.scalars().all())


class TeamMemberRepository(BaseRepository[TeamMember]):
    """Repository for team membership rows."""

    model = TeamMember

    async def get_for_user(self, team_id: int, user_id: int) -> TeamMember | None:
        """The membership row for the pair, active or not."""
        result = await self.session.execute(
            select(TeamMember).where(TeamMember.team_id == team_id, TeamMember.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_active(self, team_id: int, user_id: int) -> TeamMember | None:
        result = await self.session.execute(
            select(TeamMember).where(
                TeamMember.team_id == team_id,
                TeamMember.user_id == user_id,
                TeamMember.is_active == True,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()

    async def get_in_team(self, member_id: int, team_id: int) -> TeamMember | None:
        result = await self.session.execute(
            select(TeamMember).where(TeamMember.id == member_id, TeamMember.team_id == team_id)
        )
        return result.scalar_one_or_none()

    async def existing_user_ids(self, team_id: int, user_ids: list[int]) -> set[int]:
        if not user_ids:
            return set()
        result = await self.session.execute(
            select(TeamMember.user_id).where(
                TeamMember.team_id == team_id,
                TeamMember.user_id.in_(user_ids),  # type: ignore[attr-defined]
            )
        )
        return set(result.scalars().all())

    async def list_with_users(
        self, team_id: int, active_only: bool = True
    ) -> list[tuple[TeamMember, User]]:
        query = (
            select(TeamMember, User)
            .join(User, User.id == TeamMember.user_id)
            .where(TeamMember.team_id == team_id)
            .order_by(TeamMember.joined_at, TeamMember.id)
        )
        if active_only:
            query = query.where(TeamMember.is_active == True)  # noqa: E712
        result = await self.session.execute(query)
        return [(member, user) for member, user in result.all()]

    async def count_active(self, team_id: int) -> int:
        return await self.count(
            select(TeamMember).where(
                TeamMember.team_id == team_id,
                TeamMember.is_active == True,  # noqa: E712
            )
        )

    async def role_counts(
        self, team_ids: list[int], include_inactive: bool = False
    ) -> dict[int, Counter[str]]:
        """Per-team count of members by team role."""
        counts: dict[int, Counter[str]] = defaultdict(Counter)
        if not team_ids:
            return counts
        query = (
            select(TeamMember.team_id, TeamMember.role, func.count())
            .where(TeamMember.team_id.in_(team_ids))  # type: ignore[attr-defined]
            .group_by(TeamMember.team_id, TeamMember.role)
        )
        if not include_inactive:
            query = query.where(TeamMember.is_active == True)  # noqa: E712
        result = await self.session.execute(query)
        for team_id, role, count in result.all():
            counts[team_id][role] = count
        return counts

    async def list_active_for_user(self, user_id: int) -> list[tuple[TeamMember, Team]]:
        result = await self.session.execute(
            select(TeamMember, Team)
            .join(Team, Team.id == TeamMember.team_id)
            .where(
                TeamMember.user_id == user_id,
                TeamMember.is_active == True,  # noqa: E712
            )
            .order_by(TeamMember.joined_at.desc(), TeamMember.id.desc())  # type: ignore[attr-defined, union-attr]
        )
        return [(member, team) for member, team in result.all()]

    async def team_ids_for_user(self, user_id: int) -> list[int]:
        result = await self.session.execute(
            select(TeamMember.team_id).where(TeamMember.user_id == user_id)
        )
        return sorted(set(result.scalars().all()))

    async def delete_for_user(self, user_id: int) -> None:
        await self.session.execute(delete(TeamMember).where(TeamMember.user_id == user_id))  # type: ignore[arg-type]

    async def delete_for_team(self, team_id: int) -> None:
        await self.session.execute(delete(TeamMember).where(TeamMember.team_id == team_id))  # type: ignore[arg-type]
