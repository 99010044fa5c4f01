"""
Commands command - list every registered command.
"""

from rich.markup import escape

from ..cli.registry import CommandContext
from ..utilities.console import out


def commands_command(ctx: CommandContext) -> None:
    """Print each command with its parameters and description."""
    out("Available commands:")
    for command in ctx.registry:
        params = ", ".join(str(p) for p in command.parameters)
        out(f"[bold]{command.name}[/]({escape(params)}): {escape(command.description)}")
