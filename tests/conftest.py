"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests

try:
    from mcp_server.dispatcher import ToolDispatcher
    from spotify_api.handlers import SpotifyHandlers
    from spotify_api.models import Credential
    from spotify_api.spotify_client import SpotifyClient
    from spotify_api.token_manager import TokenManager
except ImportError:
    import sys

    sys.path.insert(0, str(Path(__file__).parent.parent))
    from mcp_server.dispatcher import ToolDispatcher
    from spotify_api.handlers import SpotifyHandlers
    from spotify_api.models import Credential
    from spotify_api.spotify_client import SpotifyClient
    from spotify_api.token_manager import TokenManager

API_BASE = "https://api.spotify.test/v1"
TOKEN_URL = "https://accounts.spotify.test/api/token"


def make_response(status_code: int = 200, body: Any = None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


def token_response(value: str = "token-1", expires_in: int = 3600) -> requests.Response:
    return make_response(
        200, {"access_token": value, "token_type": "Bearer", "expires_in": expires_in}
    )


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def http_session() -> Mock:
    """Mock HTTP session; the token endpoint hands out token-1, token-2, ..."""
    session = Mock(spec=requests.Session)
    session.post = Mock(side_effect=[token_response(f"token-{n}") for n in range(1, 10)])
    session.get = Mock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def credential() -> Credential:
    return Credential(client_id="client-id", client_secret="client-secret")


@pytest.fixture
def token_manager(credential: Credential, http_session: Mock, clock: FakeClock) -> TokenManager:
    return TokenManager(
        credential, session=http_session, token_url=TOKEN_URL, expiry_margin=60, clock=clock
    )


@pytest.fixture
def spotify_client(token_manager: TokenManager, http_session: Mock) -> SpotifyClient:
    return SpotifyClient(token_manager, session=http_session, base_url=API_BASE)


@pytest.fixture
def dispatcher(spotify_client: SpotifyClient) -> ToolDispatcher:
    return ToolDispatcher(SpotifyHandlers.from_client(spotify_client))


@pytest.fixture
def response_factory():
    """Factory for requests.Response objects, see make_response."""
    return make_response


@pytest.fixture
def token_response_factory():
    return token_response
