"""
Spotify Web API client with dependency injection.

A single HTTP gateway: every request carries the current bearer token and
every response body is returned exactly as Spotify sent it.
"""

from typing import Any

import requests

from spotify_api.errors import ApiError
from spotify_api.interfaces import ITokenManager
from spotify_api.logger import logger
from spotify_api.utils import (
    DEFAULT_REQUEST_TIMEOUT,
    SPOTIFY_API_BASE_URL,
    clean_params,
    extract_error_message,
    path_segment,
)


class SpotifyClient:
    """Gateway to the read-only Spotify catalog endpoints."""

    def __init__(
        self,
        token_manager: ITokenManager,
        session: requests.Session | None = None,
        base_url: str = SPOTIFY_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            token_manager: Source of valid access tokens
            session: HTTP session shared by all requests
            base_url: Spotify Web API base URL
            timeout: Timeout in seconds for each request
        """
        self.token_manager = token_manager
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Issue an authenticated GET and return the parsed JSON body.

        Raises:
            ApiError: On a non-2xx response or a transport failure
            AuthenticationError: If no valid token can be obtained
        """
        token = self.token_manager.get_valid_token()
        url = f"{self._base_url}/{path.lstrip('/')}"

        try:
            response = self._session.get(
                url,
                params=clean_params(params or {}),
                headers={"Authorization": f"Bearer {token.value}"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Spotify request to {path} failed: {e}")
            raise ApiError(f"Spotify API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            message = extract_error_message(response)
            logger.warning(f"Spotify API returned HTTP {response.status_code} for {path}: {message}")
            if response.status_code == 401:
                # Drop the rejected token; the next call exchanges a fresh one
                self.token_manager.invalidate(token)
            raise ApiError(f"Spotify API error: {message}", status=response.status_code)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                "Spotify API returned a body that is not valid JSON", status=response.status_code
            ) from e

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str, type: str, limit: int = 20) -> Any:
        return self.get("search", {"q": query, "type": type, "limit": limit})

    # ------------------------------------------------------------------
    # Artists
    # ------------------------------------------------------------------

    def get_artist(self, artist_id: str) -> Any:
        return self.get(f"artists/{path_segment(artist_id)}")

    def get_artists(self, artist_ids: list[str]) -> Any:
        return self.get("artists", {"ids": artist_ids})

    def get_artist_top_tracks(self, artist_id: str, market: str | None = None) -> Any:
        return self.get(f"artists/{path_segment(artist_id)}/top-tracks", {"market": market})

    def get_artist_related_artists(self, artist_id: str) -> Any:
        return self.get(f"artists/{path_segment(artist_id)}/related-artists")

    def get_artist_albums(
        self,
        artist_id: str,
        include_groups: list[str] | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Any:
        return self.get(
            f"artists/{path_segment(artist_id)}/albums",
            {"include_groups": include_groups, "limit": limit, "offset": offset},
        )

    # ------------------------------------------------------------------
    # Albums
    # ------------------------------------------------------------------

    def get_album(self, album_id: str) -> Any:
        return self.get(f"albums/{path_segment(album_id)}")

    def get_album_tracks(self, album_id: str, limit: int = 20, offset: int = 0) -> Any:
        return self.get(f"albums/{path_segment(album_id)}/tracks", {"limit": limit, "offset": offset})

    def get_albums(self, album_ids: list[str]) -> Any:
        return self.get("albums", {"ids": album_ids})

    def get_new_releases(self, country: str | None = None, limit: int = 20, offset: int = 0) -> Any:
        return self.get(
            "browse/new-releases", {"country": country, "limit": limit, "offset": offset}
        )

    # ------------------------------------------------------------------
    # Tracks and recommendations
    # ------------------------------------------------------------------

    def get_track(self, track_id: str) -> Any:
        return self.get(f"tracks/{path_segment(track_id)}")

    def get_available_genre_seeds(self) -> Any:
        return self.get("recommendations/available-genre-seeds")

    def get_recommendations(
        self,
        seed_tracks: list[str] | None = None,
        seed_artists: list[str] | None = None,
        seed_genres: list[str] | None = None,
        limit: int = 20,
    ) -> Any:
        return self.get(
            "recommendations",
            {
                "seed_tracks": seed_tracks,
                "seed_artists": seed_artists,
                "seed_genres": seed_genres,
                "limit": limit,
            },
        )

    # ------------------------------------------------------------------
    # Audiobooks
    # ------------------------------------------------------------------

    def get_audiobook(self, audiobook_id: str, market: str | None = None) -> Any:
        return self.get(f"audiobooks/{path_segment(audiobook_id)}", {"market": market})
