"""
Result objects for the gambling endpoints (coinflip, slots).
"""

from dataclasses import dataclass
from typing import Any

from ..core.exceptions import MalformedResponseError
from .parsing import optional_number, require_bool, require_list, require_number, require_object


@dataclass(frozen=True)
class CoinflipResult:
    """Outcome of a single coinflip wager."""

    won: bool
    new_balance: float
    payout: float | None = None

    @classmethod
    def from_json(cls, payload: Any) -> "CoinflipResult":
        data = require_object(payload, "coinflip")
        return cls(
            won=require_bool(data, "won", "coinflip"),
            new_balance=require_number(data, "newBalance", "coinflip"),
            payout=optional_number(data, "payout", "coinflip"),
        )


@dataclass(frozen=True)
class SlotsResult:
    """Outcome of a slot-machine spin."""

    symbols: tuple[str, ...]
    won: bool
    new_balance: float
    payout: float | None = None

    @classmethod
    def from_json(cls, payload: Any) -> "SlotsResult":
        data = require_object(payload, "slots")
        symbols = require_list(data, "symbols", "slots")
        if len(symbols) != 3 or not all(isinstance(s, str) for s in symbols):
            raise MalformedResponseError("slots: field 'symbols' must hold three strings")
        return cls(
            symbols=tuple(symbols),
            won=require_bool(data, "won", "slots"),
            new_balance=require_number(data, "newBalance", "slots"),
            payout=optional_number(data, "payout", "slots"),
        )
