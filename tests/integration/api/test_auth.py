"""Integration tests for auth endpoints."""

import pytest
from httpx import AsyncClient

from lowcode.core.auth import hash_password
from lowcode.core.auth.backend import decode_token
from lowcode.core.permissions.roles import Role
from lowcode.modules.users.models import User


pytestmark = pytest.mark.integration


@pytest.fixture
async def registered_user(db) -> User:
    user = User(
        email="login@example.com",
        name="Login User",
        password_hash=hash_password("SecurePass123!"),
        role=Role.MANAGER.value,
    )
    db.add(user)
    await db.flush()
    return user


class TestLogin:
    """Tests for the login endpoint."""

    async def test_login_success(self, client: AsyncClient, registered_user: User):
        """POST /api/v1/auth/login should return a token for the user and role."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "login@example.com", "password": "SecurePass123!"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] > 0

        token_data = decode_token(data["access_token"])
        assert token_data is not None
        assert token_data.user_id == registered_user.id
        assert token_data.role == Role.MANAGER

    async def test_login_email_is_case_insensitive(self, client: AsyncClient, registered_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "LOGIN@Example.com", "password": "SecurePass123!"},
        )

        assert response.status_code == 200

    async def test_login_sets_cookie(self, client: AsyncClient, registered_user: User):
        """The token is also set as an HTTP-only cookie."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "login@example.com", "password": "SecurePass123!"},
        )

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("auth_token=")
        assert "HttpOnly" in set_cookie
        assert response.cookies["auth_token"] == response.json()["access_token"]

    async def test_login_wrong_password(self, client: AsyncClient, registered_user: User):
        """POST /api/v1/auth/login should reject a wrong password."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "login@example.com", "password": "WrongPassword!"},
        )

        assert response.status_code == 401
        data = response.json()
        assert data["detail"] == "Invalid email or password"
        assert data["type"].endswith("/errors/invalid_credentials")

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "SecurePass123!"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    async def test_login_malformed_body(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/login", json={"email": "x"})

        assert response.status_code == 422


class TestTokenTransport:
    """Tokens are accepted from the Authorization header or the cookie."""

    async def test_cookie_authenticates(self, client: AsyncClient, registered_user: User):
        login = await client.post(
            "/api/v1/auth/login",
            json={"email": "login@example.com", "password": "SecurePass123!"},
        )
        token = login.json()["access_token"]

        response = await client.get(
            "/api/v1/users/me",
            headers={"Cookie": f"auth_token={token}"},
        )

        assert response.status_code == 200
        assert response.json()["email"] == "login@example.com"

    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/api/v1/models")

        assert response.status_code == 401
        assert response.json()["type"].endswith("/errors/missing_token")

    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/models",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["type"].endswith("/errors/invalid_token")


class TestLogout:
    """Tests for the logout endpoint."""

    async def test_logout_clears_cookie(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/logout")

        assert response.status_code == 204
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("auth_token=")
        assert "Max-Age=0" in set_cookie
