"""
Console output utilities.

This module provides the shared rich console and the formatted message
helpers used by every command. Markup follows rich's ``[style]text[/]``
syntax; anything that comes from the server must go through ``escape``.
"""

from rich.console import Console
from rich.markup import escape

from .constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS, EMOJI_WARNING

console = Console(highlight=False, soft_wrap=True, emoji=False)


def out(message: str = "") -> None:
    """Print a line of rich markup."""
    console.print(message)


def print_success(message: str) -> None:
    """Print success message with emoji."""
    console.print(f"{EMOJI_SUCCESS} [bright_green]{message}[/]")


def print_error(message: str) -> None:
    """Print error message with emoji."""
    console.print(f"{EMOJI_ERROR} [bright_red]{message}[/]")


def print_warning(message: str) -> None:
    """Print warning message with emoji."""
    console.print(f"{EMOJI_WARNING} [yellow]{message}[/]")


def print_info(message: str) -> None:
    """Print info message with emoji."""
    console.print(f"{EMOJI_INFO} {message}")


def print_section_header(title: str) -> None:
    """Print a bold section title."""
    console.print(f"[bold]{title}[/]")


def print_raw(text: str) -> None:
    """Print server-provided text verbatim, with no markup interpretation."""
    console.print(escape(text))
