"""Integration tests for team membership endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.models import Team, TeamMember, TeamRole, Tenant, User
from tests.helpers import auth_headers, create_team, create_user

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def captain_team(
    db_session: AsyncSession, tenant: Tenant, athlete_user: User
) -> tuple[Team, list[TeamMember]]:
    """A team captained by ``athlete_user``."""
    return await create_team(db_session, tenant, members=[(athlete_user, TeamRole.CAPTAIN)])


class TestAddMembers:
    async def test_captain_adds_members(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        captain_team: tuple[Team, list[TeamMember]],
        athlete_headers: dict,
    ) -> None:
        team, _ = captain_team
        recruit = await create_user(db_session, first_name="Recruit")

        response = await client.post(
            f"/api/v1/teams/{team.id}/members",
            json={"members": [{"user_id": recruit.id, "role": "co-captain"}]},
            headers=athlete_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["team_total_members"] == 2
        [added] = data["added_members"]
        assert added["user_id"] == recruit.id
        assert added["role"] == "co-captain"
        assert added["user"]["first_name"] == "Recruit"

    async def test_existing_member_conflict(
        self,
        client: AsyncClient,
        captain_team: tuple[Team, list[TeamMember]],
        athlete_user: User,
        athlete_headers: dict,
    ) -> None:
        team, _ = captain_team

        response = await client.post(
            f"/api/v1/teams/{team.id}/members",
            json={"members": [{"user_id": athlete_user.id}]},
            headers=athlete_headers,
        )

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "MEMBER_ALREADY_EXISTS"
        assert error["message"] == f"User {athlete_user.id} is already a member of this team"

    async def test_empty_member_list_rejected(
        self,
        client: AsyncClient,
        captain_team: tuple[Team, list[TeamMember]],
        athlete_headers: dict,
    ) -> None:
        team, _ = captain_team

        response = await client.post(
            f"/api/v1/teams/{team.id}/members", json={"members": []}, headers=athlete_headers
        )
        assert response.status_code == 400

    async def test_plain_member_cannot_add(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        athlete_user: User,
        coach_user: User,
    ) -> None:
        team, _ = await create_team(db_session, tenant, members=[(athlete_user, TeamRole.MEMBER)])

        response = await client.post(
            f"/api/v1/teams/{team.id}/members",
            json={"members": [{"user_id": coach_user.id}]},
            headers=auth_headers(athlete_user),
        )

        assert response.status_code == 403
        assert response.json()["error"]["message"] == (
            "You do not have permission to add members to this team"
        )


class TestUpdateAndRemove:
    async def test_deactivate_member_recounts(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        athlete_user: User,
        coach_user: User,
    ) -> None:
        team, memberships = await create_team(
            db_session,
            tenant,
            members=[(athlete_user, TeamRole.CAPTAIN), (coach_user, TeamRole.MEMBER)],
        )
        member = memberships[1]

        response = await client.patch(
            f"/api/v1/teams/{team.id}/members/{member.id}",
            json={"is_active": False, "role": "manager"},
            headers=auth_headers(athlete_user),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["is_active"] is False
        assert data["role"] == "manager"

        team_response = await client.get(f"/api/v1/teams/{team.id}", headers=auth_headers(athlete_user))
        assert team_response.json()["data"]["total_members"] == 1

    async def test_member_from_other_team_not_found(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        captain_team: tuple[Team, list[TeamMember]],
        athlete_headers: dict,
        coach_user: User,
    ) -> None:
        team, _ = captain_team
        _, foreign = await create_team(db_session, tenant, members=[(coach_user, TeamRole.MEMBER)])

        response = await client.patch(
            f"/api/v1/teams/{team.id}/members/{foreign[0].id}",
            json={"role": "coach"},
            headers=athlete_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "MEMBER_NOT_FOUND"

    async def test_remove_member(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        athlete_user: User,
        coach_user: User,
    ) -> None:
        team, memberships = await create_team(
            db_session,
            tenant,
            members=[(athlete_user, TeamRole.CAPTAIN), (coach_user, TeamRole.MEMBER)],
        )

        response = await client.delete(
            f"/api/v1/teams/{team.id}/members/{memberships[1].id}",
            headers=auth_headers(athlete_user),
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"team_total_members": 1}

    async def test_admin_manages_without_membership(
        self,
        client: AsyncClient,
        captain_team: tuple[Team, list[TeamMember]],
        admin_headers: dict,
    ) -> None:
        team, memberships = captain_team

        response = await client.delete(
            f"/api/v1/teams/{team.id}/members/{memberships[0].id}", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["data"]["team_total_members"] == 0

    async def test_missing_team_before_permission(
        self, client: AsyncClient, coach_headers: dict
    ) -> None:
        response = await client.delete("/api/v1/teams/8080/members/1", headers=coach_headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "TEAM_NOT_FOUND"
