"""
Resource handlers.

Each handler method maps one validated argument model onto one client call
and returns the upstream body unchanged. Defaults are applied by the
argument models, errors propagate untouched.
"""

from dataclasses import dataclass
from typing import Any

from spotify_api.interfaces import ITokenManager
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
    TrackArguments,
)
from spotify_api.spotify_client import SpotifyClient


class TokenHandler:
    """Exposes the current access token."""

    def __init__(self, token_manager: ITokenManager):
        self.token_manager = token_manager

    def get_access_token(self, args: NoArguments | None = None) -> str:
        return self.token_manager.get_access_token()


class ArtistsHandler:
    def __init__(self, client: SpotifyClient):
        self.client = client

    def get_artist(self, args: ArtistArguments) -> Any:
        return self.client.get_artist(args.id)

    def get_multiple_artists(self, args: MultipleArtistsArguments) -> Any:
        return self.client.get_artists(args.ids)

    def get_artist_top_tracks(self, args: ArtistTopTracksArguments) -> Any:
        return self.client.get_artist_top_tracks(args.id, market=args.market)

    def get_artist_related_artists(self, args: ArtistRelatedArtistsArguments) -> Any:
        return self.client.get_artist_related_artists(args.id)

    def get_artist_albums(self, args: ArtistAlbumsArguments) -> Any:
        return self.client.get_artist_albums(
            args.id, include_groups=args.include_groups, limit=args.limit, offset=args.offset
        )


class AlbumsHandler:
    def __init__(self, client: SpotifyClient):
        self.client = client

    def get_album(self, args: AlbumArguments) -> Any:
        return self.client.get_album(args.id)

    def get_album_tracks(self, args: AlbumTracksArguments) -> Any:
        return self.client.get_album_tracks(args.id, limit=args.limit, offset=args.offset)

    def get_multiple_albums(self, args: MultipleAlbumsArguments) -> Any:
        return self.client.get_albums(args.ids)

    def get_new_releases(self, args: NewReleasesArguments) -> Any:
        return self.client.get_new_releases(
            country=args.country, limit=args.limit, offset=args.offset
        )


class TracksHandler:
    def __init__(self, client: SpotifyClient):
        self.client = client

    def get_track(self, args: TrackArguments) -> Any:
        return self.client.get_track(args.id)

    def search(self, args: SearchArguments) -> Any:
        return self.client.search(args.query, args.type, limit=args.limit)

    def get_available_genres(self, args: NoArguments | None = None) -> Any:
        return self.client.get_available_genre_seeds()

    def get_recommendations(self, args: RecommendationsArguments) -> Any:
        return self.client.get_recommendations(
            seed_tracks=args.seed_tracks,
            seed_artists=args.seed_artists,
            seed_genres=args.seed_genres,
            limit=args.limit,
        )


class AudiobooksHandler:
    def __init__(self, client: SpotifyClient):
        self.client = client

    def get_audiobook(self, args: AudiobookArguments) -> Any:
        return self.client.get_audiobook(args.id, market=args.market)


@dataclass(frozen=True)
class SpotifyHandlers:
    """The full set of handlers the tool catalog routes to."""

    tokens: TokenHandler
    artists: ArtistsHandler
    albums: AlbumsHandler
    tracks: TracksHandler
    audiobooks: AudiobooksHandler

    @classmethod
    def from_client(cls, client: SpotifyClient) -> "SpotifyHandlers":
        return cls(
            tokens=TokenHandler(client.token_manager),
            artists=ArtistsHandler(client),
            albums=AlbumsHandler(client),
            tracks=TracksHandler(client),
            audiobooks=AudiobooksHandler(client),
        )
