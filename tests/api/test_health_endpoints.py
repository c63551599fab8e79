"""Integration tests for health checks, request ids and structured errors.

ERROR LOGGING REQUIREMENTS (verified by tests):
- All requests include X-Request-ID header in response
- Health endpoints return proper status codes
- Error bodies carry error, code and request_id
"""

from fastapi.testclient import TestClient
from httpx import AsyncClient


class TestHealthEndpoint:
    def test_health_returns_ok(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_includes_request_id_header(self, client: TestClient) -> None:
        response = client.get("/health")

        # UUID format: 8-4-4-4-12
        assert len(response.headers["X-Request-ID"]) == 36


class TestDatabaseHealth:
    async def test_database_ok(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health/db")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": True}


class TestStructuredErrors:
    async def test_unknown_route(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["request_id"] == response.headers["X-Request-ID"]

    async def test_malformed_json(self, async_client: AsyncClient, register) -> None:
        _, headers = await register("owner")

        response = await async_client.post(
            "/api/projects",
            content=b"{not json",
            headers={**headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestRequestIds:
    def test_well_formed_incoming_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "edge-abc12345"})

        assert response.headers["X-Request-ID"] == "edge-abc12345"

    def test_malformed_incoming_id_is_replaced(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "bad id; <x>"})

        assert response.headers["X-Request-ID"] != "bad id; <x>"
        assert len(response.headers["X-Request-ID"]) == 36


class TestSanitizeBody:
    def test_redacts_nested_credentials(self) -> None:
        from brandkit.main import sanitize_body

        body = {
            "username": "ada",
            "password": "hunter2",
            "nested": [{"sessionToken": "abc", "name": "x"}],
        }

        assert sanitize_body(body) == {
            "username": "ada",
            "password": "****",
            "nested": [{"sessionToken": "****", "name": "x"}],
        }
