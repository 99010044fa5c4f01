"""
Portfolio, holding and transaction objects.

Transactions arrive in two shapes: the authenticated history feed nests
coin and counterparty objects, while a user's public feed flattens them.
Both are normalized into ``Transaction``.
"""

from dataclasses import dataclass
from typing import Any

from ..utilities.constants import CASH_COIN_ID, CASH_COIN_NAME
from .parsing import (
    optional_number,
    optional_str,
    require_list,
    require_number,
    require_object,
    require_str,
)


@dataclass(frozen=True)
class PortfolioSummary:
    """Cash balance, value of coins held, and their sum."""

    balance: float
    total_coin_value: float
    total_value: float

    @classmethod
    def from_json(cls, payload: Any, context: str = "portfolio/summary") -> "PortfolioSummary":
        data = require_object(payload, context)
        return cls(
            balance=require_number(data, "baseCurrencyBalance", context),
            total_coin_value=require_number(data, "totalCoinValue", context),
            total_value=require_number(data, "totalValue", context),
        )


@dataclass(frozen=True)
class Holding:
    """A quantity of one coin owned by the authenticated user."""

    symbol: str
    quantity: float
    current_price: float
    percentage_change: float
    change_24h: float
    value: float

    @classmethod
    def from_json(cls, payload: Any) -> "Holding":
        context = "portfolio holding"
        data = require_object(payload, context)
        return cls(
            symbol=require_str(data, "symbol", context),
            quantity=require_number(data, "quantity", context),
            current_price=require_number(data, "currentPrice", context),
            percentage_change=require_number(data, "percentageChange", context),
            change_24h=require_number(data, "change24h", context),
            value=require_number(data, "value", context),
        )


@dataclass(frozen=True)
class PortfolioTotal:
    """Summary figures plus every holding."""

    summary: PortfolioSummary
    holdings: tuple[Holding, ...]

    @classmethod
    def from_json(cls, payload: Any) -> "PortfolioTotal":
        data = require_object(payload, "portfolio/total")
        return cls(
            summary=PortfolioSummary.from_json(data, "portfolio/total"),
            holdings=tuple(
                Holding.from_json(h) for h in require_list(data, "coinHoldings", "portfolio/total")
            ),
        )


@dataclass(frozen=True)
class Transaction:
    """
    A single entry of a transaction log.

    ``is_cash`` marks transfers of the base currency, which are displayed as
    a dollar amount rather than a coin quantity.
    """

    type: str
    quantity: float
    symbol: str
    total_amount: float
    is_cash: bool = False
    recipient: str = ""
    sender: str = ""

    @classmethod
    def from_history(cls, payload: Any) -> "Transaction":
        """Parse an entry of the authenticated ``transactions`` feed."""
        context = "transaction"
        data = require_object(payload, context)
        coin = require_object(data.get("coin"), "transaction coin")
        recipient = data.get("recipientUser") or {}
        sender = data.get("senderUser") or {}
        return cls(
            type=require_str(data, "type", context),
            quantity=optional_number(data, "quantity", context) or 0.0,
            symbol=optional_str(coin, "symbol"),
            total_amount=optional_number(data, "totalBaseCurrencyAmount", context) or 0.0,
            is_cash=coin.get("id") == CASH_COIN_ID,
            recipient=optional_str(recipient, "username") if isinstance(recipient, dict) else "",
            sender=optional_str(sender, "username") if isinstance(sender, dict) else "",
        )

    @classmethod
    def from_user_feed(cls, payload: Any) -> "Transaction":
        """Parse an entry of a user's public ``recentTransactions`` list."""
        context = "recent transaction"
        data = require_object(payload, context)
        return cls(
            type=require_str(data, "type", context),
            quantity=optional_number(data, "quantity", context) or 0.0,
            symbol=optional_str(data, "coinSymbol"),
            total_amount=optional_number(data, "totalBaseCurrencyAmount", context) or 0.0,
            is_cash=data.get("coinName") == CASH_COIN_NAME,
            recipient=optional_str(data, "recipientUsername"),
            sender=optional_str(data, "senderUsername"),
        )


def parse_transactions(payload: Any) -> tuple[Transaction, ...]:
    """Parse the body of the ``transactions`` endpoint."""
    data = require_object(payload, "transactions")
    return tuple(
        Transaction.from_history(t) for t in require_list(data, "transactions", "transactions")
    )
