"""Unit tests for the tool catalog and argument models."""

import pytest
from pydantic import ValidationError

from mcp_server.catalog import TOOL_CATALOG
from spotify_api.models import ArtistAlbumsArguments, MultipleArtistsArguments, TrackArguments
from spotify_api.utils import parse_spotify_id

CATALOG = {definition.name: definition for definition in TOOL_CATALOG}


@pytest.mark.unit
class TestCatalogSchemas:
    """The advertised JSON schemas match the declared contracts."""

    @pytest.mark.parametrize(
        "tool,required",
        [
            ("get_access_token", []),
            ("search", ["query", "type"]),
            ("get_artist", ["id"]),
            ("get_multiple_artists", ["ids"]),
            ("get_artist_top_tracks", ["id"]),
            ("get_artist_related_artists", ["id"]),
            ("get_artist_albums", ["id"]),
            ("get_album", ["id"]),
            ("get_album_tracks", ["id"]),
            ("get_multiple_albums", ["ids"]),
            ("get_track", ["id"]),
            ("get_available_genres", []),
            ("get_new_releases", []),
            ("get_recommendations", []),
            ("get_audiobook", ["id"]),
        ],
    )
    def test_required_fields(self, tool, required):
        schema = CATALOG[tool].input_schema

        assert schema["type"] == "object"
        assert schema["required"] == required
        assert set(required) <= set(schema["properties"])

    def test_catalog_names_unique(self):
        assert len(CATALOG) == len(TOOL_CATALOG) == 15

    def test_search_schema_constraints(self):
        properties = CATALOG["search"].input_schema["properties"]

        assert properties["type"]["enum"] == ["track", "album", "artist", "playlist"]
        assert properties["limit"]["minimum"] == 1
        assert properties["limit"]["maximum"] == 50
        assert properties["limit"]["default"] == 20

    def test_multiple_ids_schema_limits(self):
        assert CATALOG["get_multiple_artists"].input_schema["properties"]["ids"]["maxItems"] == 50
        assert CATALOG["get_multiple_albums"].input_schema["properties"]["ids"]["maxItems"] == 20

    def test_offset_schema(self):
        offset = CATALOG["get_album_tracks"].input_schema["properties"]["offset"]

        assert offset["minimum"] == 0
        assert offset["default"] == 0

    def test_recommendations_limit_up_to_hundred(self):
        limit = CATALOG["get_recommendations"].input_schema["properties"]["limit"]

        assert limit["maximum"] == 100

    def test_only_token_tool_is_plain_text(self):
        plain_text_tools = [definition.name for definition in TOOL_CATALOG if definition.plain_text]

        assert plain_text_tools == ["get_access_token"]


@pytest.mark.unit
class TestArgumentModels:
    """Test argument model validation."""

    @pytest.mark.parametrize(
        "value",
        [
            "0DiWol3AO6WpXZgp0goxAV",
            "spotify:track:0DiWol3AO6WpXZgp0goxAV",
            "https://open.spotify.com/track/0DiWol3AO6WpXZgp0goxAV?si=1a2b3c",
            "https://open.spotify.com/intl-de/track/0DiWol3AO6WpXZgp0goxAV",
            "  0DiWol3AO6WpXZgp0goxAV ",
        ],
    )
    def test_track_id_forms(self, value):
        assert TrackArguments(id=value).id == "0DiWol3AO6WpXZgp0goxAV"

    def test_ids_normalized_per_item(self):
        args = MultipleArtistsArguments(ids=["spotify:artist:a1", "a2"])

        assert args.ids == ["a1", "a2"]

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            TrackArguments(id="")

    def test_non_string_id_rejected(self):
        with pytest.raises(ValidationError):
            TrackArguments(id=123)

    def test_invalid_album_group_rejected(self):
        with pytest.raises(ValidationError):
            ArtistAlbumsArguments(id="a1", include_groups=["mixtape"])

    def test_parse_spotify_id_passes_through_non_strings(self):
        assert parse_spotify_id(None) is None
        assert parse_spotify_id(42) == 42
