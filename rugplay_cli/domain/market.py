"""
Market listing, coin creation and trade result objects.
"""

from dataclasses import dataclass
from typing import Any

from ..utilities.constants import TradeType
from .parsing import (
    optional_number,
    optional_str,
    require_list,
    require_number,
    require_object,
    require_str,
)


@dataclass(frozen=True)
class MarketCoin:
    """One row of the market listing."""

    symbol: str
    name: str
    current_price: float
    change_24h: float
    market_cap: float
    creator_name: str = ""

    @classmethod
    def from_json(cls, payload: Any, context: str = "market coin") -> "MarketCoin":
        data = require_object(payload, context)
        return cls(
            symbol=require_str(data, "symbol", context),
            name=require_str(data, "name", context),
            current_price=require_number(data, "currentPrice", context),
            change_24h=require_number(data, "change24h", context),
            market_cap=require_number(data, "marketCap", context),
            creator_name=optional_str(data, "creatorName"),
        )


@dataclass(frozen=True)
class MarketPage:
    """A page of coins sorted by market cap."""

    coins: tuple[MarketCoin, ...]
    total_pages: int

    @classmethod
    def from_json(cls, payload: Any) -> "MarketPage":
        data = require_object(payload, "market")
        coins = tuple(MarketCoin.from_json(c) for c in require_list(data, "coins", "market"))
        total_pages = optional_number(data, "totalPages", "market")
        return cls(coins=coins, total_pages=int(total_pages) if total_pages is not None else 1)


@dataclass(frozen=True)
class TradeResult:
    """
    Result of a BUY or SELL order.

    The API reports the filled quantity as ``coinsBought`` for buys and
    ``coinsSold`` for sells; either is accepted.
    """

    trade_type: TradeType
    quantity: float
    new_balance: float

    @classmethod
    def from_json(cls, payload: Any, trade_type: TradeType) -> "TradeResult":
        data = require_object(payload, "trade")
        primary, secondary = (
            ("coinsBought", "coinsSold") if trade_type == TradeType.BUY else ("coinsSold", "coinsBought")
        )
        key = primary if data.get(primary) is not None else secondary
        return cls(
            trade_type=trade_type,
            quantity=require_number(data, key, "trade"),
            new_balance=require_number(data, "newBalance", "trade"),
        )


@dataclass(frozen=True)
class CoinCreated:
    """Confirmation returned when a new coin is launched."""

    symbol: str
    fee_paid: float
    message: str

    @classmethod
    def from_json(cls, payload: Any) -> "CoinCreated":
        data = require_object(payload, "coin/create")
        coin = require_object(data.get("coin"), "coin/create coin")
        return cls(
            symbol=require_str(coin, "symbol", "coin/create coin"),
            fee_paid=require_number(data, "feePaid", "coin/create"),
            message=optional_str(data, "message"),
        )
