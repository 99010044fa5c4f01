"""
Test package for the Rugplay CLI.

Unit tests exercise each layer against a mocked HTTP session or API
client; property tests use Hypothesis for formatting, binding and
configuration invariants.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # API response fixtures
    "property",  # Property-based test suite
    "unit",  # Unit test suite
]
