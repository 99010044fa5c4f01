"""
Test fixtures package for the Rugplay CLI.

Provides Rugplay response bodies and a fake HTTP response factory.
"""

from .api_responses import ResponseStatus, make_response

__all__ = ["ResponseStatus", "make_response"]
