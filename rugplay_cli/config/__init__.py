"""
Configuration management for the Rugplay CLI.

This package owns the on-disk configuration file and the in-memory
``Config`` object passed to the API client and commands.
"""

from .store import Config, ConfigStore, get_config_path

__all__ = ["Config", "ConfigStore", "get_config_path"]
