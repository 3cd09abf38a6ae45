"""Interfaces and protocols for dependency injection."""

from typing import Protocol

from spotify_api.models import AccessToken


class ITokenManager(Protocol):
    """Protocol for access token management."""

    def get_valid_token(self) -> AccessToken:
        """Return a token that is not expired under the safety margin."""
        ...

    def get_access_token(self) -> str:
        """Return the value of a valid token."""
        ...

    def invalidate(self, token: AccessToken | None = None) -> None:
        """Forget the held token, or only the given one if it is still held."""
        ...

