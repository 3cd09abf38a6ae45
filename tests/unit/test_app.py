"""Unit tests for the HTTP entrypoint."""

import pytest
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from app import APIKeyMiddleware, create_app


async def ok(request):
    return JSONResponse({"status": "ok"})


@pytest.fixture
def client():
    protected = Starlette(
        routes=[Route("/health", ok), Route("/mcp", ok)],
        middleware=[Middleware(APIKeyMiddleware, api_key="secret")],
    )
    return TestClient(protected)


@pytest.mark.unit
class TestAPIKeyMiddleware:
    """Test X-API-KEY authentication."""

    def test_missing_key(self, client):
        response = client.get("/mcp")

        assert response.status_code == 401
        assert response.json() == {"error": "Missing X-API-KEY header"}

    def test_wrong_key(self, client):
        response = client.get("/mcp", headers={"X-API-KEY": "nope"})

        assert response.status_code == 403

    def test_correct_key_case_insensitive_header(self, client):
        response = client.get("/mcp", headers={"x-api-key": "secret"})

        assert response.status_code == 200

    def test_health_is_exempt(self, client):
        assert client.get("/health").status_code == 200


@pytest.mark.unit
class TestCreateApp:
    """Test the ASGI app factory."""

    @pytest.mark.parametrize("api_key", [None, "secret"])
    def test_health_route(self, api_key):
        response = TestClient(create_app(api_key)).get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "spotify-mcp"}
