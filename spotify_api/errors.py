"""
Error taxonomy for the Spotify API layer.

Every failure raised below the dispatcher is a SpotifyError carrying a
``kind``. The MCP dispatcher is the only place these kinds are mapped to
protocol error codes.
"""


class SpotifyError(Exception):
    """Base class for all Spotify layer failures."""

    kind = "unexpected"

    def __init__(self, message: str, status: int | None = None):
        self.message = message
        self.status = status
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.message} (HTTP {self.status})"
        return self.message


class ArgumentValidationError(SpotifyError):
    """Tool arguments are missing or malformed. Raised before any network access."""

    kind = "validation"


class AuthenticationError(SpotifyError):
    """The client-credentials exchange failed."""

    kind = "authentication"


class ApiError(SpotifyError):
    """A resource endpoint answered with a non-success status, or could not be reached."""

    kind = "api"


class ConfigurationError(SpotifyError):
    """Required settings are missing or malformed."""

    kind = "configuration"
