"""Integration tests for auth endpoints."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from kangaroute.core.auth.backend import create_access_token, decode_token
from tests.helpers import TEST_PASSWORD


pytestmark = pytest.mark.integration


class TestLogin:
    """Tests for POST /api/auth/login."""

    async def test_login_success(self, client: AsyncClient, company):
        response = await client.post(
            "/api/auth/login",
            json={"username": company.admin_username, "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["company"]["id"] == company.id
        assert "passwordHash" not in data["company"]

        token_data = decode_token(data["token"])
        assert token_data.company_id == company.id
        assert token_data.admin_username == company.admin_username
        assert token_data.email == company.email

    async def test_login_wrong_password(self, client: AsyncClient, company):
        response = await client.post(
            "/api/auth/login",
            json={"username": company.admin_username, "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect username or password"

    async def test_login_unknown_user(self, client: AsyncClient):
        """Unknown usernames get the same answer as wrong passwords."""
        response = await client.post(
            "/api/auth/login",
            json={"username": "ghost", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect username or password"

    async def test_login_inactive_company(
        self, client: AsyncClient, db: AsyncSession, company
    ):
        company.is_active = False
        await db.commit()

        response = await client.post(
            "/api/auth/login",
            json={"username": company.admin_username, "password": TEST_PASSWORD},
        )

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "body",
        [{}, {"username": "happypaws"}, {"password": "secret"}, {"username": "", "password": ""}],
    )
    async def test_login_missing_fields(self, client: AsyncClient, body: dict):
        response = await client.post("/api/auth/login", json=body)

        assert response.status_code == 400


class TestVerify:
    """Tests for GET /api/auth/verify."""

    async def test_verify_returns_profile(
        self, authenticated_client: AsyncClient, company
    ):
        response = await authenticated_client.get("/api/auth/verify")

        assert response.status_code == 200
        assert response.json()["company"]["adminUsername"] == company.admin_username

    async def test_verify_without_token(self, client: AsyncClient):
        response = await client.get("/api/auth/verify")

        assert response.status_code == 401

    async def test_verify_expired_token(self, client: AsyncClient, company):
        token = create_access_token(
            company.id,
            company.admin_username,
            company.email,
            expires_delta=timedelta(seconds=-1),
        )

        response = await client.get(
            "/api/auth/verify",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    async def test_verify_deactivated_company(
        self, authenticated_client: AsyncClient, db: AsyncSession, company
    ):
        company.is_active = False
        await db.commit()

        response = await authenticated_client.get("/api/auth/verify")

        assert response.status_code == 401
