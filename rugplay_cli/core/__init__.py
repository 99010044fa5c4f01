"""
Core components: the Rugplay API client and the exception hierarchy.
"""

from .exceptions import (
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
    "ConfigError",
    "LocalFileError",
    "MalformedResponseError",
    "NetworkError",
    "NotAuthenticatedError",
    "RugplayError",
    "ValidationError",
]
