"""Test helper functions for common data creation patterns."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.security import issue_token
from src.athlete_analytics.models import Team, TeamMember, TeamRole, Tenant, User
from tests.factories import TeamFactory, TeamMemberFactory, TenantFactory, UserFactory


def auth_headers(user: User) -> dict[str, str]:
    """Authorization header carrying a fresh session token for ``user``."""
    token = issue_token(user.id, user.email, user.role)  # type: ignore[arg-type]
    return {"Authorization": f"Bearer {token}"}


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    """Persist a user built by UserFactory.

    Args:
        session: Database session
        **user_kwargs: Additional args passed to UserFactory
    """
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def create_tenant(session: AsyncSession, **tenant_kwargs) -> Tenant:
    tenant = TenantFactory.build(**tenant_kwargs)
    session.add(tenant)
    await session.commit()
    await session.refresh(tenant)
    return tenant


async def create_team(
    session: AsyncSession,
    tenant: Tenant,
    members: list[tuple[User, TeamRole]] | None = None,
    **team_kwargs,
) -> tuple[Team, list[TeamMember]]:
    """Create a team with active memberships and a matching ``total_members``.

    Args:
        session: Database session
        tenant: Owning tenant
        members: (user, team role) pairs to enroll
        **team_kwargs: Additional args passed to TeamFactory

    Returns:
        Tuple of (team, memberships)
    """
    members = members or []
    team = TeamFactory.build(tenant_id=tenant.id, total_members=len(members), **team_kwargs)
    session.add(team)
    await session.flush()

    memberships = [
        TeamMemberFactory.build(team_id=team.id, user_id=user.id, role=role.value)
        for user, role in members
    ]
    session.add_all(memberships)
    await session.commit()
    await session.refresh(team)
    return team, memberships
