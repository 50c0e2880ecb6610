"""Integration tests for user endpoints."""

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.integration


class TestCurrentUser:
    """Tests for GET /api/v1/users/me."""

    async def test_returns_profile(self, client: AsyncClient, viewer_user, viewer_headers):
        response = await client.get("/api/v1/users/me", headers=viewer_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == viewer_user.id
        assert data["role"] == "Viewer"
        assert "password_hash" not in data

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get("/api/v1/users/me")

        assert response.status_code == 401


class TestCreateUser:
    """Tests for POST /api/v1/users."""

    async def test_admin_creates_user(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/users",
            json={
                "email": "New.Person@Example.com",
                "name": "  New Person ",
                "role": "Manager",
                "password": "long-enough",
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new.person@example.com"
        assert data["name"] == "New Person"
        assert data["role"] == "Manager"

    async def test_new_user_can_login(self, client: AsyncClient, admin_headers):
        await client.post(
            "/api/v1/users",
            json={"email": "fresh@example.com", "name": "Fresh", "role": "Viewer", "password": "long-enough"},
            headers=admin_headers,
        )

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "fresh@example.com", "password": "long-enough"},
        )

        assert response.status_code == 200

    async def test_duplicate_email(self, client: AsyncClient, admin_headers, viewer_user):
        response = await client.post(
            "/api/v1/users",
            json={"email": viewer_user.email, "name": "Copy", "role": "Viewer", "password": "long-enough"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/email_exists")

    async def test_unknown_role(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/users",
            json={"email": "x@example.com", "name": "X", "role": "Owner", "password": "long-enough"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    async def test_short_password(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/users",
            json={"email": "x@example.com", "name": "X", "role": "Viewer", "password": "short"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    async def test_manager_cannot_create(self, client: AsyncClient, manager_headers):
        response = await client.post(
            "/api/v1/users",
            json={"email": "x@example.com", "name": "X", "role": "Viewer", "password": "long-enough"},
            headers=manager_headers,
        )

        assert response.status_code == 403


class TestListUsers:
    """Tests for GET /api/v1/users."""

    async def test_lists_by_email(self, client: AsyncClient, admin_headers, manager_user, viewer_user):
        response = await client.get("/api/v1/users", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [u["email"] for u in data["items"]] == [
            "admin@example.com",
            "manager@example.com",
            "viewer@example.com",
        ]

    async def test_search(self, client: AsyncClient, admin_headers, manager_user, viewer_user):
        response = await client.get("/api/v1/users", params={"search": "view"}, headers=admin_headers)

        assert [u["email"] for u in response.json()["items"]] == ["viewer@example.com"]

    async def test_viewer_forbidden(self, client: AsyncClient, viewer_headers):
        response = await client.get("/api/v1/users", headers=viewer_headers)

        assert response.status_code == 403
