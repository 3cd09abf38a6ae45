from typing import Any
from urllib.parse import quote, urlparse

import requests

# Constants
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
SPOTIFY_OPEN_HOST = "open.spotify.com"

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_TOKEN_EXPIRY_MARGIN = 60


def parse_spotify_id(value: Any) -> Any:
    """
    Normalize a Spotify ID, URI or open.spotify.com URL to a bare ID.

    Accepts:
        - "4Z8W4fKeB5YxbusRsdQVPb"
        - "spotify:artist:4Z8W4fKeB5YxbusRsdQVPb"
        - "https://open.spotify.com/artist/4Z8W4fKeB5YxbusRsdQVPb?si=abc"

    Non-string values are returned untouched so that type validation can
    reject them with a proper message.
    """
    if not isinstance(value, str):
        return value

    value = value.strip()
    if value.startswith("spotify:"):
        return value.rsplit(":", 1)[-1]

    if SPOTIFY_OPEN_HOST in value:
        parsed = urlparse(value if "://" in value else f"https://{value}")
        segments = [segment for segment in parsed.path.split("/") if segment]
        if segments:
            return segments[-1]

    return value


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")


def clean_params(params: dict[str, Any]) -> dict[str, Any]:
    """Drop unset query parameters and join list values with commas."""
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = ",".join(str(item) for item in value)
        cleaned[key] = value
    return cleaned


def extract_error_message(response: requests.Response) -> str:
    """
    Pull a human readable message out of an upstream error response.

    Resource endpoints answer ``{"error": {"status": 401, "message": "..."}}``,
    the token endpoint answers ``{"error": "invalid_client", "error_description": "..."}``.
    Anything else falls back to the raw body or the HTTP reason phrase.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("error_description"):
            return str(body["error_description"])
        if isinstance(error, str) and error:
            return error

    text = (response.text or "").strip()
    return text or response.reason or "Unknown error"
