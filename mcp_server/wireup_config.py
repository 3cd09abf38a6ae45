"""Dependency injection configuration using IoC pattern."""

import requests

from mcp_server.dispatcher import ToolDispatcher
from spotify_api.config import SpotifyConfig, load_config
from spotify_api.handlers import SpotifyHandlers
from spotify_api.spotify_client import SpotifyClient
from spotify_api.token_manager import TokenManager


class Container:
    """Dependency injection container using IoC pattern."""

    def __init__(self, config: SpotifyConfig | None = None, session: requests.Session | None = None):
        self._config = config
        self._session = session
        self._token_manager: TokenManager | None = None
        self._spotify_client: SpotifyClient | None = None
        self._handlers: SpotifyHandlers | None = None
        self._dispatcher: ToolDispatcher | None = None

    @property
    def config(self) -> SpotifyConfig:
        """Get SpotifyConfig instance (singleton)."""
        if self._config is None:
            self._config = load_config()
        return self._config

    @property
    def session(self) -> requests.Session:
        """Get the HTTP session shared by the token manager and the client (singleton)."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    @property
    def token_manager(self) -> TokenManager:
        """Get TokenManager instance (singleton)."""
        if self._token_manager is None:
            config = self.config
            # Credentials are resolved on the first exchange so tools can be
            # listed without them
            self._token_manager = TokenManager(
                credential=lambda: config.credential,
                session=self.session,
                token_url=config.token_url,
                expiry_margin=config.token_expiry_margin,
                timeout=config.request_timeout,
            )
        return self._token_manager

    @property
    def spotify_client(self) -> SpotifyClient:
        """Get SpotifyClient instance (singleton)."""
        if self._spotify_client is None:
            self._spotify_client = SpotifyClient(
                self.token_manager,
                session=self.session,
                base_url=self.config.api_base_url,
                timeout=self.config.request_timeout,
            )
        return self._spotify_client

    @property
    def handlers(self) -> SpotifyHandlers:
        """Get the resource handlers (singleton)."""
        if self._handlers is None:
            self._handlers = SpotifyHandlers.from_client(self.spotify_client)
        return self._handlers

    @property
    def dispatcher(self) -> ToolDispatcher:
        """Get ToolDispatcher instance (singleton)."""
        if self._dispatcher is None:
            self._dispatcher = ToolDispatcher(self.handlers)
        return self._dispatcher


# Global container instance
container = Container()
