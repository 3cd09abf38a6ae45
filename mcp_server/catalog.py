"""
Static catalog of the tools exposed over MCP.

Each entry names the argument model the call is validated into and the
handler method it is routed to. The JSON schema advertised to clients is
generated from the argument model.
"""

from dataclasses import dataclass
from typing import Any, Callable

from spotify_api.handlers import SpotifyHandlers
from spotify_api.models import (
    AlbumArguments,
    AlbumTracksArguments,
    ArtistAlbumsArguments,
    ArtistArguments,
    ArtistRelatedArtistsArguments,
    ArtistTopTracksArguments,
    AudiobookArguments,
    MultipleAlbumsArguments,
    MultipleArtistsArguments,
    NewReleasesArguments,
    NoArguments,
    RecommendationsArguments,
    SearchArguments,
    ToolArguments,
    TrackArguments,
)


@dataclass(frozen=True)
class ToolDefinition:
    """Declaration of a single tool."""

    name: str
    description: str
    arguments: type[ToolArguments]
    route: Callable[[SpotifyHandlers, Any], Any]
    # Result is returned as-is instead of being JSON encoded
    plain_text: bool = False

    @property
    def required_fields(self) -> list[str]:
        return [name for name, field in self.arguments.model_fields.items() if field.is_required()]

    @property
    def input_schema(self) -> dict[str, Any]:
        schema = self.arguments.model_json_schema()
        schema.pop("title", None)
        schema.pop("description", None)
        schema.setdefault("properties", {})
        schema["required"] = self.required_fields
        return schema


TOOL_CATALOG: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="get_access_token",
        description="Get a valid Spotify access token for API requests",
        arguments=NoArguments,
        route=lambda handlers, args: handlers.tokens.get_access_token(args),
        plain_text=True,
    ),
    ToolDefinition(
        name="search",
        description="Search for tracks, albums, artists, or playlists",
        arguments=SearchArguments,
        route=lambda handlers, args: handlers.tracks.search(args),
    ),
    ToolDefinition(
        name="get_artist",
        description="Get Spotify catalog information for an artist",
        arguments=ArtistArguments,
        route=lambda handlers, args: handlers.artists.get_artist(args),
    ),
    ToolDefinition(
        name="get_multiple_artists",
        description="Get Spotify catalog information for multiple artists",
        arguments=MultipleArtistsArguments,
        route=lambda handlers, args: handlers.artists.get_multiple_artists(args),
    ),
    ToolDefinition(
        name="get_artist_top_tracks",
        description="Get Spotify catalog information about an artist's top tracks",
        arguments=ArtistTopTracksArguments,
        route=lambda handlers, args: handlers.artists.get_artist_top_tracks(args),
    ),
    ToolDefinition(
        name="get_artist_related_artists",
        description="Get Spotify catalog information about artists similar to a given artist",
        arguments=ArtistRelatedArtistsArguments,
        route=lambda handlers, args: handlers.artists.get_artist_related_artists(args),
    ),
    ToolDefinition(
        name="get_artist_albums",
        description="Get Spotify catalog information about an artist's albums",
        arguments=ArtistAlbumsArguments,
        route=lambda handlers, args: handlers.artists.get_artist_albums(args),
    ),
    ToolDefinition(
        name="get_album",
        description="Get Spotify catalog information for an album",
        arguments=AlbumArguments,
        route=lambda handlers, args: handlers.albums.get_album(args),
    ),
    ToolDefinition(
        name="get_album_tracks",
        description="Get Spotify catalog information for an album's tracks",
        arguments=AlbumTracksArguments,
        route=lambda handlers, args: handlers.albums.get_album_tracks(args),
    ),
    ToolDefinition(
        name="get_multiple_albums",
        description="Get Spotify catalog information for multiple albums",
        arguments=MultipleAlbumsArguments,
        route=lambda handlers, args: handlers.albums.get_multiple_albums(args),
    ),
    ToolDefinition(
        name="get_track",
        description="Get Spotify catalog information for a track",
        arguments=TrackArguments,
        route=lambda handlers, args: handlers.tracks.get_track(args),
    ),
    ToolDefinition(
        name="get_available_genres",
        description="Get a list of available genre seeds for recommendations",
        arguments=NoArguments,
        route=lambda handlers, args: handlers.tracks.get_available_genres(args),
    ),
    ToolDefinition(
        name="get_new_releases",
        description="Get a list of new album releases featured in Spotify",
        arguments=NewReleasesArguments,
        route=lambda handlers, args: handlers.albums.get_new_releases(args),
    ),
    ToolDefinition(
        name="get_recommendations",
        description="Get track recommendations based on seed tracks, artists, or genres",
        arguments=RecommendationsArguments,
        route=lambda handlers, args: handlers.tracks.get_recommendations(args),
    ),
    ToolDefinition(
        name="get_audiobook",
        description="Get Spotify catalog information for an audiobook",
        arguments=AudiobookArguments,
        route=lambda handlers, args: handlers.audiobooks.get_audiobook(args),
    ),
)
