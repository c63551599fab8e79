"""Tests for the account and session endpoints.

- Register (success, duplicate username/email, invalid payload)
- Login (success, bad credentials)
- Current user via cookie and via Bearer header
- Logout and expired sessions
"""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient
from sqlalchemy import update

from brandkit.models import UserSession


class TestRegister:
    async def test_register_returns_user_without_password(
        self, async_client: AsyncClient
    ) -> None:
        response = await async_client.post(
            "/api/register",
            json={
                "username": "alice",
                "password": "s3cret",
                "email": "alice@example.com",
                "name": "Alice",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["name"] == "Alice"
        assert "createdAt" in data
        assert "password" not in data
        assert "brandkit_session" in response.cookies

    async def test_register_starts_cookie_session(self, async_client: AsyncClient) -> None:
        await async_client.post(
            "/api/register",
            json={
                "username": "bob",
                "password": "s3cret",
                "email": "bob@example.com",
                "name": "Bob",
            },
        )

        response = await async_client.get("/api/user")

        assert response.status_code == 200
        assert response.json()["username"] == "bob"

    async def test_duplicate_username(self, async_client: AsyncClient, register) -> None:
        await register("alice")

        response = await async_client.post(
            "/api/register",
            json={
                "username": "alice",
                "password": "x",
                "email": "other@example.com",
                "name": "Other",
            },
        )

        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    async def test_duplicate_email(self, async_client: AsyncClient, register) -> None:
        await register("alice")

        response = await async_client.post(
            "/api/register",
            json={
                "username": "alice2",
                "password": "x",
                "email": "alice@example.com",
                "name": "Other",
            },
        )

        assert response.status_code == 409

    async def test_invalid_email(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/register",
            json={"username": "a", "password": "x", "email": "nope", "name": "A"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert any(e["field"] == "email" for e in body["errors"])
        assert "request_id" in body


class TestLogin:
    async def test_login_sets_session(self, async_client: AsyncClient, register) -> None:
        await register("alice", password="s3cret")

        response = await async_client.post(
            "/api/login", json={"username": "alice", "password": "s3cret"}
        )

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert "brandkit_session" in response.cookies

    async def test_bad_password(self, async_client: AsyncClient, register) -> None:
        await register("alice", password="s3cret")

        response = await async_client.post(
            "/api/login", json={"username": "alice", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_REQUIRED"


class TestCurrentUser:
    async def test_requires_authentication(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/user")

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "Authentication required"
        assert body["code"] == "AUTHENTICATION_REQUIRED"

    async def test_bearer_header(self, async_client: AsyncClient, register) -> None:
        user, headers = await register("carol")

        response = await async_client.get("/api/user", headers=headers)

        assert response.status_code == 200
        assert response.json()["id"] == user["id"]

    async def test_unknown_token(self, async_client: AsyncClient) -> None:
        response = await async_client.get(
            "/api/user", headers={"Authorization": "Bearer bogus"}
        )

        assert response.status_code == 401

    async def test_expired_session(
        self, async_client: AsyncClient, register, async_session_factory
    ) -> None:
        _, headers = await register("dave")
        async with async_session_factory() as session:
            await session.execute(
                update(UserSession).values(expires_at=datetime.now(UTC) - timedelta(hours=1))
            )
            await session.commit()

        response = await async_client.get("/api/user", headers=headers)

        assert response.status_code == 401


class TestLogout:
    async def test_logout_ends_session(self, async_client: AsyncClient, register) -> None:
        _, headers = await register("erin")

        response = await async_client.post("/api/logout", headers=headers)
        assert response.status_code == 204

        response = await async_client.get("/api/user", headers=headers)
        assert response.status_code == 401

    async def test_logout_without_session(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/logout")

        assert response.status_code == 204
