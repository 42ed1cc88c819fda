"""Resource-scoped permission resolution for team endpoints.

The team is always looked up first so a missing team surfaces as 404 and never
as a permission failure. Only then is the caller's membership resolved.
"""

from collections.abc import Iterable

from src.athlete_analytics.core.exceptions import ForbiddenError, NotFoundError
from src.athlete_analytics.core.security import (
    NOT_A_MEMBER,
    MembershipStatus,
    Principal,
    can_act,
    can_view_dashboard,
)
from src.athlete_analytics.models import Team, TeamRole
from src.athlete_analytics.repositories import TeamMemberRepository, TeamRepository

# Team roles allowed to mutate a team and its games, activities and schedules
MANAGE_ROLES: frozenset[TeamRole] = frozenset({TeamRole.CAPTAIN, TeamRole.COACH})


class TeamAccess:
    """Combines team existence, membership lookup and the team-role policy."""

    def __init__(self, team_repo: TeamRepository, member_repo: TeamMemberRepository):
        self.team_repo = team_repo
        self.member_repo = member_repo

    async def get_team_or_404(self, team_id: int) -> Team:
        team = await self.team_repo.get_by_id(team_id)
        if team is None:
            raise NotFoundError("Team not found", code="TEAM_NOT_FOUND")
        return team

    async def resolve(self, team_id: int, principal_id: int) -> MembershipStatus:
        """One read: the caller's active membership on the team, if any."""
        member = await self.member_repo.get_active(team_id, principal_id)
        if member is None:
            return NOT_A_MEMBER
        return MembershipStatus(is_member=True, role=TeamRole(member.role))

    async def can_manage(self, team: Team, principal: Principal) -> bool:
        if principal.is_admin:
            return True
        membership = await self.resolve(team.id, principal.id)  # type: ignore[arg-type]
        return can_act(membership, MANAGE_ROLES, principal.role)

    async def require(
        self,
        team_id: int,
        principal: Principal,
        action: str,
        required_roles: Iterable[TeamRole] = MANAGE_ROLES,
    ) -> Team:
        """Return the team if the principal may perform ``action`` on it.

        Raises:
            NotFoundError: TEAM_NOT_FOUND, checked before any permission logic.
            ForbiddenError: "You do not have permission to <action>".
        """
        team = await self.get_team_or_404(team_id)
        membership = await self.resolve(team_id, principal.id)
        if not can_act(membership, required_roles, principal.role):
            raise ForbiddenError(f"You do not have permission to {action}")
        return team

    async def require_dashboard(self, team_id: int, principal: Principal) -> Team:
        team = await self.get_team_or_404(team_id)
        membership = await self.resolve(team_id, principal.id)
        if not can_view_dashboard(membership, principal.role):
            raise ForbiddenError("You do not have permission to view this team dashboard")
        return team
