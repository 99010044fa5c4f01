"""
Rugplay CLI - An interactive command-line client for the Rugplay API.

This package provides:
- Gambling commands (coinflip, slots)
- Portfolio and market views
- Coin trading and bulk investing
- Profile, settings and notification management

All requests are authenticated with the session cookie stored in the
user's configuration file.
"""

__version__ = "1.0.0"
__author__ = "Rugplay CLI Developer"
__description__ = "Interactive command-line client for the Rugplay API"

from .config import Config, ConfigStore
from .core.api_client import RugplayAPIClient, create_api_client
from .core.exceptions import (
    APIError,
    ConfigError,
    LocalFileError,
    MalformedResponseError,
    NetworkError,
    NotAuthenticatedError,
    RugplayError,
    ValidationError,
)

__all__ = [
    "APIError",
    "Config",
    "ConfigError",
    "ConfigStore",
    "LocalFileError",
    "MalformedResponseError",
    "NetworkError",
    "NotAuthenticatedError",
    "RugplayAPIClient",
    "RugplayError",
    "ValidationError",
    "create_api_client",
]
