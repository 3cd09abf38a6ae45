"""Unit tests for configuration loading."""

import os

import pytest

from spotify_api.config import SpotifyConfig, load_config
from spotify_api.errors import ConfigurationError

ENV_VARS = [
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_TOKEN_URL",
    "SPOTIFY_API_BASE_URL",
    "SPOTIFY_REQUEST_TIMEOUT",
    "SPOTIFY_TOKEN_EXPIRY_MARGIN",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.mark.unit
class TestLoadConfig:
    """Test load_config function."""

    def test_defaults(self, clean_env):
        config = load_config()

        assert config.client_id is None
        assert config.token_url == "https://accounts.spotify.com/api/token"
        assert config.api_base_url == "https://api.spotify.com/v1"
        assert config.request_timeout == 30.0
        assert config.token_expiry_margin == 60

    def test_reads_environment(self, clean_env):
        clean_env.setenv("SPOTIFY_CLIENT_ID", "id")
        clean_env.setenv("SPOTIFY_CLIENT_SECRET", "secret")
        clean_env.setenv("SPOTIFY_API_BASE_URL", "http://localhost:9000/v1/")
        clean_env.setenv("SPOTIFY_REQUEST_TIMEOUT", "5")
        clean_env.setenv("SPOTIFY_TOKEN_EXPIRY_MARGIN", "120")

        config = load_config()

        assert config.credential.client_id == "id"
        assert config.credential.client_secret == "secret"
        assert config.api_base_url == "http://localhost:9000/v1"
        assert config.request_timeout == 5.0
        assert config.token_expiry_margin == 120.0

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / "spotify.env"
        env_file.write_text("SPOTIFY_CLIENT_ID=from-file\nSPOTIFY_CLIENT_SECRET=file-secret\n")

        try:
            config = load_config(str(env_file))
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("SPOTIFY_CLIENT_ID", None)
            os.environ.pop("SPOTIFY_CLIENT_SECRET", None)

        assert config.client_id == "from-file"

    def test_malformed_timeout(self, clean_env):
        clean_env.setenv("SPOTIFY_REQUEST_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="SPOTIFY_REQUEST_TIMEOUT"):
            load_config()

    def test_negative_timeout(self, clean_env):
        clean_env.setenv("SPOTIFY_REQUEST_TIMEOUT", "-1")

        with pytest.raises(ConfigurationError):
            load_config()


@pytest.mark.unit
class TestSpotifyConfig:
    """Test SpotifyConfig credential handling."""

    def test_missing_credentials(self):
        with pytest.raises(ConfigurationError, match="SPOTIFY_CLIENT_ID"):
            SpotifyConfig().credential

    def test_secret_not_in_repr(self):
        config = SpotifyConfig(client_id="id", client_secret="hunter2")

        assert "hunter2" not in repr(config)
        assert "hunter2" not in repr(config.credential)
