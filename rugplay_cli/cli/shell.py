"""
Interactive read-eval-print loop.

Reads a line, splits it into whitespace-separated tokens, runs the named
command and prompts again until input ends. Every error a command raises
is reported in-line; no single command can end the session.
"""

import logging
from collections.abc import Callable

from rich.markup import escape

from ..core.exceptions import APIError, NotAuthenticatedError, RugplayError
from ..utilities.console import out, print_error, print_raw, print_warning
from .registry import CommandContext

logger = logging.getLogger(__name__)

BANNER = "[bold][yellow]Rugplay[/yellow] API[/bold]"
PROMPT = "> "


class InteractiveShell:
    """Sequential command loop over a ``CommandContext``."""

    def __init__(
        self,
        context: CommandContext,
        input_func: Callable[[str], str] = input,
        prompt: str = PROMPT,
    ) -> None:
        self.context = context
        self.input_func = input_func
        self.prompt = prompt

    def run(self) -> int:
        """
        Print the banner and command list, then loop until end of input.

        Returns:
            Process exit code
        """
        out(BANNER)
        self.execute("commands")

        while True:
            try:
                line = self.input_func(self.prompt)
            except EOFError:
                break
            except KeyboardInterrupt:
                out("\n👋 Goodbye!")
                break
            self.execute(line)

        return 0

    def execute(self, line: str) -> None:
        """Run a single input line."""
        tokens = line.split()
        if not tokens:
            return

        name, args = tokens[0], tokens[1:]
        command = self.context.registry.get(name)
        if command is None:
            out(
                f'[bright_red]Command[/] [green]"{escape(name)}"[/] [bright_red]does not exist[/].'
                " Type 'commands' to list commands."
            )
            return

        try:
            command.run(self.context, args)
        except NotAuthenticatedError:
            out(
                "[bright_red]You[/] [bold]must[/] [bright_red]have a cookie set to use this.[/]"
                " Use 'set-cookie' first."
            )
        except APIError as e:
            print_error("API ERROR:")
            print_raw(e.body or f"{e.status_code} {e.reason}")
        except RugplayError as e:
            print_error(escape(str(e)))
        except KeyboardInterrupt:
            print_warning(f"{escape(name)} interrupted")
        except Exception as e:
            logger.debug(f"Unhandled error in {name}", exc_info=True)
            print_error(f"Unexpected error in {escape(name)}: {escape(str(e))}")
