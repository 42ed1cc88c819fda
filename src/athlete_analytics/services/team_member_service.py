"""Team membership service."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.exceptions import AppError, ConflictError, NotFoundError
from src.athlete_analytics.core.logging import get_logger
from src.athlete_analytics.core.security import Principal
from src.athlete_analytics.models import Team, TeamMember
from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.repositories import TeamMemberRepository, UserRepository
from src.athlete_analytics.schemas.team import TeamMemberInput, TeamMemberRead, TeamMemberUpdate
from src.athlete_analytics.services.team_access import TeamAccess
from src.athlete_analytics.services.team_service import member_view, validate_new_members

logger = get_logger(__name__)


class TeamMemberService:
    """Add, update and remove team members. Keeps ``Team.total_members`` in sync."""

    def __init__(
        self,
        member_repo: TeamMemberRepository,
        user_repo: UserRepository,
        access: TeamAccess,
        session: AsyncSession,
    ):
        self.member_repo = member_repo
        self.user_repo = user_repo
        self.access = access
        self.session = session

    async def _recount(self, team: Team) -> int:
        team.total_members = await self.member_repo.count_active(team.id)  # type: ignore[arg-type]
        team.updated_at = utc_now()
        return team.total_members

    async def add_members(
        self, team_id: int, principal: Principal, members: list[TeamMemberInput]
    ) -> tuple[list[TeamMemberRead], int]:
        """Add members. Returns (added members, team total)."""
        team = await self.access.require(team_id, principal, "add members to this team")
        await validate_new_members(members, self.user_repo)

        existing = await self.member_repo.existing_user_ids(team_id, [m.user_id for m in members])
        for member in members:
            if member.user_id in existing:
                raise ConflictError(
                    f"User {member.user_id} is already a member of this team",
                    code="MEMBER_ALREADY_EXISTS",
                )

        try:
            created = [
                TeamMember(team_id=team_id, user_id=m.user_id, role=m.role.value) for m in members
            ]
            for member in created:
                self.member_repo.add(member)
            await self.session.flush()
            total = await self._recount(team)
            await self.session.commit()
        except IntegrityError as e:
            # Concurrent insert of the same (team_id, user_id)
            await self.session.rollback()
            raise ConflictError(
                "User is already a member of this team", code="MEMBER_ALREADY_EXISTS"
            ) from e
        except AppError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to add team members", team_id=team_id, error=str(e))
            raise

        logger.info(
            "Team members added",
            team_id=team_id,
            user_ids=[m.user_id for m in members],
            added_by=principal.id,
        )
        users = {u.id: u for u in await self.user_repo.get_many([m.user_id for m in created])}
        return [member_view(m, users.get(m.user_id)) for m in created], total

    async def _get_member(self, team_id: int, member_id: int) -> TeamMember:
        member = await self.member_repo.get_in_team(member_id, team_id)
        if member is None:
            raise NotFoundError("Team member not found", code="MEMBER_NOT_FOUND")
        return member

    async def update_member(
        self, team_id: int, member_id: int, principal: Principal, data: TeamMemberUpdate
    ) -> TeamMemberRead:
        team = await self.access.require(team_id, principal, "update team members")
        member = await self._get_member(team_id, member_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        try:
            if "role" in update_data:
                member.role = data.role.value  # type: ignore[union-attr]
            if "is_active" in update_data:
                member.is_active = update_data["is_active"]
            member.updated_at = utc_now()
            await self.session.flush()
            await self._recount(team)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Team member updated",
            team_id=team_id,
            member_id=member_id,
            fields=sorted(update_data),
        )
        return member_view(member, await self.user_repo.get_by_id(member.user_id))

    async def remove_member(self, team_id: int, member_id: int, principal: Principal) -> int:
        """Delete the membership row. Returns the new team total."""
        team = await self.access.require(team_id, principal, "remove team members")
        member = await self._get_member(team_id, member_id)
        try:
            await self.member_repo.delete(member)
            await self.session.flush()
            total = await self._recount(team)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Team member removed", team_id=team_id, member_id=member_id)
        return total
