"""
Command-line entry point for the Rugplay CLI.

Wires the explicit dependencies together (config store, config, API client,
command registry) and hands them to the interactive shell.
"""

import logging

from ..config import ConfigStore
from ..core.api_client import create_api_client
from ..utilities.logging import configure_logging
from .argument_parser import create_cli_parser
from .command_table import create_command_registry
from .registry import CommandContext
from .shell import InteractiveShell

logger = logging.getLogger(__name__)


def build_context(config_path: str | None = None) -> CommandContext:
    """Load the configuration and build everything the commands need."""
    store = ConfigStore(config_path)
    config = store.load()
    return CommandContext(
        config=config,
        store=store,
        client=create_api_client(config),
        registry=create_command_registry(),
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = create_cli_parser().parse_args(argv)
    configure_logging(args.log_level)

    context = build_context(args.config)
    logger.debug(f"Using configuration file {context.store.path}")
    return InteractiveShell(context).run()


if __name__ == "__main__":
    raise SystemExit(main())
