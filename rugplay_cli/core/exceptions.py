"""
Exception hierarchy for the Rugplay CLI.

Handlers and the API client raise these; the interactive shell catches
``RugplayError`` and reports it without ending the session.
"""


class RugplayError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigError(RugplayError):
    """Configuration file could not be written."""


class NotAuthenticatedError(RugplayError):
    """No session cookie is configured yet."""

    def __init__(self, message: str = "You must have a cookie set to use this.") -> None:
        super().__init__(message)


class APIError(RugplayError):
    """The Rugplay API answered with a non-OK status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"{status_code} {reason}: {body}")


class NetworkError(RugplayError):
    """The request never produced a response (connection error, timeout)."""


class MalformedResponseError(RugplayError):
    """A response body was not the JSON shape the endpoint promises."""


class ValidationError(RugplayError):
    """A command argument is missing or invalid."""


class LocalFileError(RugplayError):
    """A local file (coin icon, avatar) could not be read."""
