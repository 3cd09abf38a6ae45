"""
Spotify access token management.

Handles the OAuth client-credentials lifecycle: obtains a bearer token,
keeps it in memory and replaces it once it is about to expire.
"""

import threading
import time
from typing import Callable

import requests

from spotify_api.errors import AuthenticationError
from spotify_api.logger import logger
from spotify_api.models import AccessToken, Credential
from spotify_api.utils import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TOKEN_EXPIRY_MARGIN,
    SPOTIFY_TOKEN_URL,
    extract_error_message,
)


class TokenManager:
    """Owns the single process-wide access token."""

    def __init__(
        self,
        credential: Credential | Callable[[], Credential],
        session: requests.Session | None = None,
        token_url: str = SPOTIFY_TOKEN_URL,
        expiry_margin: float = DEFAULT_TOKEN_EXPIRY_MARGIN,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the token manager.

        Args:
            credential: Client credential, or a callable producing it on first
                        exchange (lets the server start without credentials)
            session: HTTP session used for the token exchange
            token_url: Client-credentials token endpoint
            expiry_margin: Seconds before the declared expiry at which the
                           token is treated as expired
            timeout: Timeout in seconds for the exchange request
            clock: Source of the current UNIX time
        """
        self._credential = credential
        self._session = session or requests.Session()
        self._token_url = token_url
        self._expiry_margin = expiry_margin
        self._timeout = timeout
        self._clock = clock
        self._token: AccessToken | None = None
        self._lock = threading.Lock()

    @property
    def credential(self) -> Credential:
        if callable(self._credential):
            self._credential = self._credential()
        return self._credential

    def get_valid_token(self) -> AccessToken:
        """
        Return a token that is not expired under the safety margin.

        Concurrent callers racing on a missing or expired token wait on the
        lock, so only one exchange is performed.

        Raises:
            AuthenticationError: If the exchange fails
            ConfigurationError: If no credential is configured
        """
        with self._lock:
            token = self._token
            if token is not None and not token.is_expired(self._clock(), self._expiry_margin):
                logger.debug("Reusing cached Spotify access token")
                return token

            if token is not None:
                logger.info("Spotify access token expired, requesting a new one")
            self._token = self._exchange()
            return self._token

    def get_access_token(self) -> str:
        """Return the value of a valid token."""
        return self.get_valid_token().value

    def invalidate(self, token: AccessToken | None = None) -> None:
        """
        Forget the held token so the next request performs a new exchange.

        When the rejected token is given, it is only dropped if it is still
        the held one, so a token another caller already refreshed survives.
        """
        with self._lock:
            if token is None or self._token is token:
                self._token = None

    def _exchange(self) -> AccessToken:
        credential = self.credential
        requested_at = self._clock()

        try:
            response = self._session.post(
                self._token_url,
                data={"grant_type": "client_credentials"},
                auth=(credential.client_id, credential.client_secret),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Spotify token exchange failed: {e}")
            raise AuthenticationError(f"Token exchange failed: {e}") from e

        if not 200 <= response.status_code < 300:
            message = extract_error_message(response)
            logger.warning(f"Spotify token exchange rejected with HTTP {response.status_code}")
            raise AuthenticationError(
                f"Token exchange failed: {message}", status=response.status_code
            )

        try:
            payload = response.json()
            value = payload["access_token"]
            expires_in = float(payload.get("expires_in", 3600))
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(
                "Token exchange returned an unexpected response body",
                status=response.status_code,
            ) from e

        token = AccessToken(
            value=value,
            token_type=payload.get("token_type") or "Bearer",
            expires_at=requested_at + expires_in,
        )
        logger.info(f"Obtained Spotify access token valid for {int(expires_in)}s")
        return token
