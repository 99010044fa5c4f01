"""
Persistent configuration for the Rugplay CLI.

The configuration is a small JSON object in the user's home directory
holding the session cookie. It is loaded once at startup, handed to the API
client and the commands explicitly, and saved right after every change.
"""

import contextlib
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.exceptions import ConfigError
from ..utilities.console import print_raw, print_warning
from ..utilities.constants import CONFIG_FILENAME, UNKNOWN_COOKIE

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Mutable process-wide settings.

    ``extra`` keeps any keys found in the file that this version does not
    know about, so saving does not drop them.
    """

    cookie: str = UNKNOWN_COOKIE
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        """True once a cookie other than the sentinel is set."""
        return self.cookie != UNKNOWN_COOKIE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk JSON object."""
        return {**self.extra, "cookie": self.cookie}

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a config from decoded JSON, rejecting anything without a string cookie."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        cookie = data.get("cookie")
        if not isinstance(cookie, str):
            raise ValueError("missing string field 'cookie'")
        extra = {key: value for key, value in data.items() if key != "cookie"}
        return cls(cookie=cookie, extra=extra)


def get_config_path() -> Path:
    """Config file location: ``$HOME``, then ``$USERPROFILE``, then the working directory."""
    home = os.environ.get("HOME") or os.environ.get("USERPROFILE") or "."
    return Path(home) / CONFIG_FILENAME


class ConfigStore:
    """Loads and saves ``Config`` at a fixed path."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else get_config_path()

    def load(self) -> Config:
        """
        Read the configuration file.

        Any failure (missing file, bad JSON, wrong shape, permissions) is
        reported and replaced by the default config, which is written back.

        Returns:
            The loaded or default Config
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                config = Config.from_dict(json.load(f))
            logger.debug(f"Loaded configuration from {self.path}")
            return config
        except (OSError, ValueError) as e:
            print_warning("Couldn't read configuration file:")
            print_raw(str(e))
            config = Config()
            try:
                self.save(config)
                print_warning("Wrote default file.")
            except ConfigError as save_error:
                logger.warning(f"Could not write default configuration: {save_error}")
            return config

    def save(self, config: Config) -> None:
        """
        Write the configuration file, creating its directory if needed.

        Raises:
            ConfigError: If the file cannot be written
        """
        with contextlib.suppress(OSError):
            self.path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f)
        except OSError as e:
            raise ConfigError(f"Could not write configuration file {self.path}: {e}") from e
        logger.debug(f"Saved configuration to {self.path}")
