"""Tests for authentication endpoints and the bearer-token gate."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.security import issue_token, validate_token
from src.athlete_analytics.models import Role, User
from tests.factories import DEFAULT_TEST_PASSWORD
from tests.helpers import auth_headers

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestLogin:
    """Tests for POST /auth/login."""

    async def test_login_success(self, client: AsyncClient, athlete_user: User) -> None:
        """Valid credentials return the user brief and a verifiable token."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": athlete_user.email, "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Login successful"
        assert body["data"]["user"] == {
            "id": athlete_user.id,
            "email": athlete_user.email,
            "role": "athlete",
            "first_name": athlete_user.first_name,
            "last_name": athlete_user.last_name,
        }
        claims = validate_token(body["data"]["token"])
        assert claims.principal_id == athlete_user.id
        assert claims.role == Role.ATHLETE
        assert datetime.fromisoformat(body["data"]["expires_at"]).timestamp() == claims.expires_at

    async def test_login_is_case_insensitive_on_email(
        self, client: AsyncClient, athlete_user: User
    ) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": athlete_user.email.upper(), "password": DEFAULT_TEST_PASSWORD},
        )
        assert response.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, athlete_user: User) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": athlete_user.email, "password": "WrongPass123!"},
        )

        assert response.status_code == 401
        error = response.json()["error"]
        assert error["code"] == "INVALID_CREDENTIALS"
        assert error["message"] == "Invalid email or password"

    async def test_login_unknown_email_same_error(self, client: AsyncClient) -> None:
        """Unknown accounts are indistinguishable from wrong passwords."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    async def test_login_validation_error(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/auth/login", json={"email": "not-an-email"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["message"] == "Validation failed"
        assert "email" in body["error"]["details"]
        assert "password" in body["error"]["details"]


class TestGate:
    """Tests for the bearer-token gate on a protected route."""

    async def test_missing_header(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401
        error = response.json()["error"]
        assert error["code"] == "UNAUTHORIZED"
        assert error["message"] == "Authorization header is required"

    async def test_not_bearer(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth/me", headers={"Authorization": "Basic abc"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Bearer token is required"

    async def test_invalid_token(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer garbage.token.value"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid token"

    async def test_expired_token(self, client: AsyncClient, athlete_user: User) -> None:
        issued = datetime.now(UTC) - timedelta(days=2)
        token = issue_token(
            athlete_user.id, athlete_user.email, athlete_user.role, ttl=timedelta(days=1), now=issued
        )
        response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Token has expired"


class TestMeAndLogout:
    async def test_me(self, client: AsyncClient, athlete_user: User) -> None:
        response = await client.get("/api/v1/auth/me", headers=auth_headers(athlete_user))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == athlete_user.id
        assert data["tenant_unique_id"] == athlete_user.tenant_unique_id
        assert "hashed_password" not in data

    async def test_me_for_deleted_account(
        self, client: AsyncClient, db_session: AsyncSession, athlete_user: User
    ) -> None:
        """A still-valid token for a deleted account yields USER_NOT_FOUND."""
        headers = auth_headers(athlete_user)
        await db_session.delete(athlete_user)
        await db_session.commit()

        response = await client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    async def test_logout(self, client: AsyncClient, athlete_user: User) -> None:
        """Logout is stateless: the token keeps working until it expires."""
        headers = auth_headers(athlete_user)

        response = await client.post("/api/v1/auth/logout", headers=headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Logout successful"

        assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 200

    async def test_logout_requires_token(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/auth/logout")
        assert response.status_code == 401
