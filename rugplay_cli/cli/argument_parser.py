"""
Argument parsing for the Rugplay CLI.

The tool is interactive, so the command line only carries startup options.
"""

import argparse

from .. import __version__
from ..utilities.logging import LOG_LEVELS


class CLIArgumentParser:
    """Startup option parser."""

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="rugplay",
            description="Interactive command-line client for the Rugplay API",
        )
        self.parser.add_argument(
            "--version", action="version", version=f"%(prog)s {__version__}"
        )
        self.parser.add_argument(
            "--log-level",
            choices=LOG_LEVELS,
            default="WARNING",
            type=str.upper,
            help="Diagnostic log level on stderr (default: WARNING)",
        )
        self.parser.add_argument(
            "--config",
            metavar="PATH",
            default=None,
            help="Configuration file (default: ~/rugplay_api_saves.json)",
        )

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)


def create_cli_parser() -> CLIArgumentParser:
    """
    Factory function to create CLI argument parser.

    Returns:
        Configured CLIArgumentParser instance
    """
    return CLIArgumentParser()
