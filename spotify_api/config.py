"""
Configuration for the Spotify API layer.

Settings come from environment variables, optionally seeded from a ``.env``
file in the working directory.
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from spotify_api.errors import ConfigurationError
from spotify_api.models import Credential
from spotify_api.utils import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TOKEN_EXPIRY_MARGIN,
    SPOTIFY_API_BASE_URL,
    SPOTIFY_TOKEN_URL,
)


class SpotifyConfig(BaseModel):
    """Runtime settings for talking to Spotify."""

    client_id: str | None = Field(None, description="Spotify application client ID")
    client_secret: str | None = Field(None, repr=False, description="Spotify client secret")
    token_url: str = Field(SPOTIFY_TOKEN_URL, description="Client-credentials token endpoint")
    api_base_url: str = Field(SPOTIFY_API_BASE_URL, description="Spotify Web API base URL")
    request_timeout: float = Field(
        DEFAULT_REQUEST_TIMEOUT, gt=0, description="Timeout in seconds for each HTTP request"
    )
    token_expiry_margin: float = Field(
        DEFAULT_TOKEN_EXPIRY_MARGIN,
        ge=0,
        description="Seconds before the declared expiry at which a token is treated as expired",
    )

    @property
    def credential(self) -> Credential:
        """
        Build the client credential.

        Raises:
            ConfigurationError: If the client ID or secret is not configured
        """
        if not self.client_id or not self.client_secret:
            raise ConfigurationError(
                "Spotify credentials are not configured. "
                "Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET."
            )
        return Credential(client_id=self.client_id, client_secret=self.client_secret)


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def load_config(env_file: str | None = None) -> SpotifyConfig:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a dotenv file. Defaults to ``.env`` lookup
                  from the current working directory. Variables already set in
                  the environment take precedence.

    Returns:
        SpotifyConfig instance

    Raises:
        ConfigurationError: If a numeric setting cannot be parsed or is out of range
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    try:
        return SpotifyConfig(
            client_id=os.getenv("SPOTIFY_CLIENT_ID") or None,
            client_secret=os.getenv("SPOTIFY_CLIENT_SECRET") or None,
            token_url=os.getenv("SPOTIFY_TOKEN_URL") or SPOTIFY_TOKEN_URL,
            api_base_url=(os.getenv("SPOTIFY_API_BASE_URL") or SPOTIFY_API_BASE_URL).rstrip("/"),
            request_timeout=_float_from_env("SPOTIFY_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            token_expiry_margin=_float_from_env(
                "SPOTIFY_TOKEN_EXPIRY_MARGIN", DEFAULT_TOKEN_EXPIRY_MARGIN
            ),
        )
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise ConfigurationError(f"Invalid Spotify configuration: {e}") from e
