"""
Command registry for the interactive shell.

A command pairs a name with a handler and a declared parameter list. The
registry binds the tokens of an input line to those parameters, enforcing
arity and joining the tail of the line into a trailing greedy parameter,
then calls the handler with keyword arguments.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..core.exceptions import ValidationError

if TYPE_CHECKING:
    from ..config import Config, ConfigStore
    from ..core.api_client import RugplayAPIClient


@dataclass(frozen=True)
class Parameter:
    """
    A positional command parameter.

    A parameter with a ``default`` is optional. A ``greedy`` parameter must
    come last and receives every remaining token joined by single spaces.
    """

    name: str
    default: str | None = None
    greedy: bool = False

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def key(self) -> str:
        """Keyword argument name passed to the handler."""
        return self.name.replace("-", "_")

    def __str__(self) -> str:
        label = f"{self.name}..." if self.greedy else self.name
        return label if self.required else f"[{label}]"


@dataclass
class CommandContext:
    """Everything a handler may touch, passed explicitly on each call."""

    config: "Config"
    store: "ConfigStore"
    client: "RugplayAPIClient"
    registry: "CommandRegistry"


Handler = Callable[..., None]


@dataclass(frozen=True)
class Command:
    """An immutable command descriptor."""

    name: str
    description: str
    handler: Handler
    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self):
        """Validate the parameter declaration."""
        seen_optional = False
        for index, param in enumerate(self.parameters):
            if param.greedy and index != len(self.parameters) - 1:
                raise ValueError(f"{self.name}: only the last parameter may be greedy")
            if param.required and seen_optional:
                raise ValueError(f"{self.name}: required parameter after optional one")
            seen_optional = seen_optional or not param.required

    @property
    def usage(self) -> str:
        return f"{self.name}({', '.join(str(p) for p in self.parameters)})"

    def bind(self, tokens: list[str]) -> dict[str, str]:
        """
        Map input tokens onto the declared parameters.

        Raises:
            ValidationError: On missing required tokens or unexpected extra ones
        """
        remaining = list(tokens)
        bound: dict[str, str] = {}
        for param in self.parameters:
            if param.greedy and remaining:
                bound[param.key] = " ".join(remaining)
                remaining = []
            elif remaining:
                bound[param.key] = remaining.pop(0)
            elif param.required:
                raise ValidationError(f"Missing parameter '{param.name}'. Usage: {self.usage}")
            else:
                bound[param.key] = param.default
        if remaining:
            raise ValidationError(
                f"Too many parameters ({len(tokens)} given). Usage: {self.usage}"
            )
        return bound

    def run(self, context: CommandContext, tokens: list[str]) -> None:
        """Bind ``tokens`` and invoke the handler."""
        self.handler(context, **self.bind(tokens))


class CommandRegistry:
    """Read-only, insertion-ordered mapping from command name to ``Command``."""

    def __init__(self, commands: Iterable[Command]) -> None:
        table: dict[str, Command] = {}
        for command in commands:
            if command.name in table:
                raise ValueError(f"Duplicate command: {command.name}")
            table[command.name] = command
        self._commands = MappingProxyType(table)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list[str]:
        return list(self._commands)
