"""
Pydantic models for the Spotify MCP server.

This module defines the credential and token models used by the token
manager, and one argument model per MCP tool. The argument models are both
the validated input handed to the resource handlers and the source of the
JSON schema advertised to MCP clients.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from spotify_api.utils import parse_spotify_id

# ============================================================================
# Credentials and tokens
# ============================================================================


class Credential(BaseModel):
    """Client-credentials pair, immutable for the lifetime of the process."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., min_length=1, description="Spotify application client ID")
    client_secret: str = Field(
        ..., min_length=1, repr=False, description="Spotify application client secret"
    )


class AccessToken(BaseModel):
    """Bearer token obtained through the client-credentials exchange."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., repr=False, description="Opaque access token")
    token_type: str = Field("Bearer", description="Token type reported by Spotify")
    expires_at: float = Field(..., description="Expiry instant as a UNIX timestamp")

    def is_expired(self, now: float, margin: float = 0) -> bool:
        """True once ``now`` is within ``margin`` seconds of the declared expiry."""
        return now >= self.expires_at - margin


# ============================================================================
# Tool arguments
# ============================================================================

SpotifyId = Annotated[str, BeforeValidator(parse_spotify_id), Field(min_length=1)]

SearchType = Literal["track", "album", "artist", "playlist"]
AlbumGroup = Literal["album", "single", "appears_on", "compilation"]


class ToolArguments(BaseModel):
    """Base class for validated tool arguments. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class NoArguments(ToolArguments):
    """Arguments for tools that take no input."""


class SearchArguments(ToolArguments):
    query: str = Field(..., description="Search query")
    type: SearchType = Field(..., description="Type of item to search for")
    limit: int = Field(20, ge=1, le=50, description="Maximum number of results (1-50)")


class ArtistArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the artist")


class MultipleArtistsArguments(ToolArguments):
    ids: list[SpotifyId] = Field(
        ..., max_length=50, description="Array of Spotify artist IDs or URIs (max 50)"
    )


class ArtistTopTracksArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the artist")
    market: str = Field("US", description="An ISO 3166-1 alpha-2 country code")


class ArtistRelatedArtistsArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the artist")


class ArtistAlbumsArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the artist")
    include_groups: list[AlbumGroup] | None = Field(
        None, description="Optional. Filter by album types"
    )
    limit: int = Field(20, ge=1, le=50, description="Maximum number of albums to return (1-50)")
    offset: int = Field(0, ge=0, description="The index of the first album to return")


class AlbumArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the album")


class AlbumTracksArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the album")
    limit: int = Field(20, ge=1, le=50, description="Maximum number of tracks to return (1-50)")
    offset: int = Field(0, ge=0, description="The index of the first track to return")


class MultipleAlbumsArguments(ToolArguments):
    ids: list[SpotifyId] = Field(
        ..., max_length=20, description="Array of Spotify album IDs or URIs (max 20)"
    )


class NewReleasesArguments(ToolArguments):
    country: str | None = Field(None, description="Optional. A country code (ISO 3166-1 alpha-2)")
    limit: int = Field(20, ge=1, le=50, description="Maximum number of releases to return (1-50)")
    offset: int = Field(0, ge=0, description="The index of the first release to return")


class TrackArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the track")


class RecommendationsArguments(ToolArguments):
    seed_tracks: list[SpotifyId] | None = Field(
        None, description="Array of Spotify track IDs or URIs"
    )
    seed_artists: list[SpotifyId] | None = Field(
        None, description="Array of Spotify artist IDs or URIs"
    )
    seed_genres: list[str] | None = Field(None, description="Array of genre names")
    limit: int = Field(20, ge=1, le=100, description="Maximum number of recommendations (1-100)")


class AudiobookArguments(ToolArguments):
    id: SpotifyId = Field(..., description="The Spotify ID or URI for the audiobook")
    market: str | None = Field(None, description="Optional. An ISO 3166-1 alpha-2 country code")
