"""Integration tests for tenant endpoints, including non-admin visibility."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.models import Tenant
from tests.helpers import create_team, create_tenant

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

TENANT_PAYLOAD = {
    "name": "  Boston Athletic Club ",
    "city": "Boston",
    "state": "Massachusetts",
    "country": "USA",
    "description": "Track and field",
}


class TestTenantCrud:
    async def test_admin_creates_tenant(self, client: AsyncClient, admin_headers: dict) -> None:
        response = await client.post("/api/v1/tenants", json=TENANT_PAYLOAD, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Tenant created successfully"
        assert body["data"]["name"] == "Boston Athletic Club"
        assert body["data"]["is_active"] is True

    async def test_timestamps_stored_as_naive_utc(self, db_session: AsyncSession) -> None:
        """Model defaults write naive UTC datetimes and read them back unchanged."""
        tenant = Tenant(name="Naive Club", city="Austin", state="Texas", country="USA")
        db_session.add(tenant)
        await db_session.commit()
        await db_session.refresh(tenant)

        assert tenant.created_at.tzinfo is None
        assert tenant.updated_at >= tenant.created_at

    async def test_duplicate_name(
        self, client: AsyncClient, admin_headers: dict, tenant: Tenant
    ) -> None:
        response = await client.post(
            "/api/v1/tenants", json={**TENANT_PAYLOAD, "name": tenant.name}, headers=admin_headers
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "TENANT_NAME_EXISTS"

    async def test_non_admin_cannot_create(
        self, client: AsyncClient, athlete_headers: dict
    ) -> None:
        response = await client.post("/api/v1/tenants", json=TENANT_PAYLOAD, headers=athlete_headers)
        assert response.status_code == 403

    async def test_get_missing_tenant(self, client: AsyncClient, athlete_headers: dict) -> None:
        response = await client.get("/api/v1/tenants/424242", headers=athlete_headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "TENANT_NOT_FOUND"

    async def test_update_rename_conflict(
        self, client: AsyncClient, db_session: AsyncSession, admin_headers: dict, tenant: Tenant
    ) -> None:
        other = await create_tenant(db_session)

        response = await client.put(
            f"/api/v1/tenants/{tenant.id}", json={"name": other.name}, headers=admin_headers
        )
        assert response.status_code == 409

    async def test_update_keeps_own_name(
        self, client: AsyncClient, admin_headers: dict, tenant: Tenant
    ) -> None:
        response = await client.put(
            f"/api/v1/tenants/{tenant.id}",
            json={"name": tenant.name, "city": "Chicago"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["city"] == "Chicago"

    async def test_update_rejects_unknown_fields(
        self, client: AsyncClient, admin_headers: dict, tenant: Tenant
    ) -> None:
        response = await client.put(
            f"/api/v1/tenants/{tenant.id}", json={"owner": "someone"}, headers=admin_headers
        )
        assert response.status_code == 400

    async def test_status_toggle(
        self, client: AsyncClient, admin_headers: dict, tenant: Tenant
    ) -> None:
        response = await client.patch(
            f"/api/v1/tenants/{tenant.id}/status", json={"is_active": False}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"id": tenant.id, "is_active": False}

    async def test_delete_empty_tenant(
        self, client: AsyncClient, admin_headers: dict, tenant: Tenant
    ) -> None:
        response = await client.delete(f"/api/v1/tenants/{tenant.id}", headers=admin_headers)

        assert response.status_code == 200
        follow_up = await client.get(f"/api/v1/tenants/{tenant.id}", headers=admin_headers)
        assert follow_up.status_code == 404

    async def test_delete_blocked_while_teams_exist(
        self, client: AsyncClient, db_session: AsyncSession, admin_headers: dict, tenant: Tenant
    ) -> None:
        await create_team(db_session, tenant)

        response = await client.delete(f"/api/v1/tenants/{tenant.id}", headers=admin_headers)

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "TENANT_HAS_TEAMS"
        assert error["details"] == {"teams_count": 1}


class TestTenantVisibility:
    """Non-admins default to active tenants; admins see everything."""

    @pytest.fixture
    async def tenants(self, db_session: AsyncSession) -> tuple[Tenant, Tenant]:
        active = await create_tenant(db_session, name="Active Club")
        inactive = await create_tenant(db_session, name="Dormant Club", is_active=False)
        return active, inactive

    async def test_non_admin_sees_active_only(
        self, client: AsyncClient, athlete_headers: dict, tenants: tuple[Tenant, Tenant]
    ) -> None:
        response = await client.get("/api/v1/tenants", headers=athlete_headers)

        assert response.status_code == 200
        names = [t["name"] for t in response.json()["data"]["tenants"]]
        assert names == ["Active Club"]

    async def test_admin_sees_all(
        self, client: AsyncClient, admin_headers: dict, tenants: tuple[Tenant, Tenant]
    ) -> None:
        response = await client.get(
            "/api/v1/tenants", params={"sort_by": "name", "sort_order": "asc"}, headers=admin_headers
        )

        names = [t["name"] for t in response.json()["data"]["tenants"]]
        assert names == ["Active Club", "Dormant Club"]

    async def test_admin_filters_inactive(
        self, client: AsyncClient, admin_headers: dict, tenants: tuple[Tenant, Tenant]
    ) -> None:
        response = await client.get(
            "/api/v1/tenants", params={"is_active": "false"}, headers=admin_headers
        )

        names = [t["name"] for t in response.json()["data"]["tenants"]]
        assert names == ["Dormant Club"]

    async def test_non_admin_explicit_filter_passes_through(
        self, client: AsyncClient, athlete_headers: dict, tenants: tuple[Tenant, Tenant]
    ) -> None:
        response = await client.get(
            "/api/v1/tenants", params={"is_active": "false"}, headers=athlete_headers
        )

        names = [t["name"] for t in response.json()["data"]["tenants"]]
        assert names == ["Dormant Club"]

    async def test_search(
        self, client: AsyncClient, admin_headers: dict, tenants: tuple[Tenant, Tenant]
    ) -> None:
        response = await client.get(
            "/api/v1/tenants", params={"search": "dormant"}, headers=admin_headers
        )

        assert response.json()["data"]["pagination"]["total_count"] == 1

    async def test_requires_authentication(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/tenants")
        assert response.status_code == 401
