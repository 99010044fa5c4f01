"""
Pytest configuration and shared fixtures for Rugplay CLI tests.

Provides an isolated console capture, temporary configuration stores,
a mock HTTP session and command contexts wired to mock or real clients.
"""

import importlib
import io
from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests
from rich.console import Console

from rugplay_cli.cli.command_table import create_command_registry
from rugplay_cli.cli.registry import CommandContext
from rugplay_cli.config import Config, ConfigStore
from rugplay_cli.core.api_client import RugplayAPIClient


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based test")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Console fixtures
@pytest.fixture
def output(monkeypatch) -> Callable[[], str]:
    """Redirect the shared console to a buffer; call the fixture value to read it."""
    buffer = io.StringIO()
    test_console = Console(
        file=buffer,
        width=200,
        color_system=None,
        highlight=False,
        soft_wrap=True,
        emoji=False,
    )
    console_module = importlib.import_module("rugplay_cli.utilities.console")
    monkeypatch.setattr(console_module, "console", test_console)
    return buffer.getvalue


# Configuration fixtures
@pytest.fixture
def config_path(tmp_path) -> Path:
    """Path of a configuration file in a temporary directory."""
    return tmp_path / "rugplay_api_saves.json"


@pytest.fixture
def store(config_path) -> ConfigStore:
    """Configuration store writing to a temporary file."""
    return ConfigStore(config_path)


@pytest.fixture
def authed_config() -> Config:
    """Configuration with a session cookie set."""
    return Config(cookie="session=abc123")


# Client fixtures
@pytest.fixture
def mock_session() -> Mock:
    """Mock ``requests.Session``; configure ``request.return_value`` per test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def mock_client() -> Mock:
    """Mock Rugplay API client."""
    return Mock(spec=RugplayAPIClient)


@pytest.fixture
def context(authed_config, store, mock_client) -> CommandContext:
    """Command context with an authenticated config and a mock client."""
    return CommandContext(
        config=authed_config,
        store=store,
        client=mock_client,
        registry=create_command_registry(),
    )


@pytest.fixture
def unauthenticated_context(store, mock_session) -> CommandContext:
    """Command context with the sentinel cookie and a real client over a mock session."""
    config = Config()
    return CommandContext(
        config=config,
        store=store,
        client=RugplayAPIClient(config, session=mock_session),
        registry=create_command_registry(),
    )
