"""
Market commands - browse the market, trade coins, bulk-invest and create coins.
"""

import logging
import math

from rich.markup import escape

from ..cli.registry import CommandContext
from ..core.exceptions import RugplayError, ValidationError
from ..domain import MarketCoin
from ..utilities.console import out, print_info, print_raw, print_warning
from ..utilities.constants import MARKET_PAGE_SIZE, TradeType
from ..utilities.files import load_image
from ..utilities.formatters import format_change, format_currency, format_number, format_symbol
from ..utilities.validators import (
    parse_positive_float,
    parse_positive_int,
    validate_non_empty_string,
)

logger = logging.getLogger(__name__)


def format_market_row(coin: MarketCoin) -> str:
    """Render one market table row."""
    return (
        f"  {format_symbol(coin.symbol)} ({escape(coin.name)})"
        f" | {format_currency(coin.current_price)}"
        f" | {format_change(coin.change_24h)}"
        f" | {format_number(coin.market_cap)}"
        f" | @[bold]{escape(coin.creator_name)}[/]"
    )


def market_command(ctx: CommandContext, page: str, search_item: str) -> None:
    """List the market sorted by market cap, optionally filtered by a search term."""
    page_number = parse_positive_int(page, "page")

    listing = ctx.client.market(page=page_number, search=search_item, limit=MARKET_PAGE_SIZE)

    out(f"[bold]Market[/] (page {page_number} of {listing.total_pages})")
    out("  Symbol (Name) | Current price | Change 24h | Market cap | Creator name")
    for coin in listing.coins:
        out(format_market_row(coin))


def _trade(ctx: CommandContext, symbol: str, amount: str, trade_type: TradeType) -> None:
    symbol = validate_non_empty_string(symbol, "symbol")
    value = parse_positive_float(amount, "amount")

    result = ctx.client.trade(symbol, trade_type, value)

    verb, sign, style = (
        ("Bought", "-", "bright_red") if trade_type == TradeType.BUY else ("Sold", "+", "bright_green")
    )
    out(
        f"{verb} {format_number(result.quantity)} {format_symbol(symbol)}"
        f" [bright_green]successfully[/]."
    )
    out(
        f"New balance: {format_currency(result.new_balance)}"
        f" ({sign}[{style}]{format_number(value)}[/])"
    )


def buy_coin_command(ctx: CommandContext, symbol: str, amount: str) -> None:
    """Buy ``amount`` worth of the coin ``symbol``."""
    _trade(ctx, symbol, amount, TradeType.BUY)


def sell_coin_command(ctx: CommandContext, symbol: str, amount: str) -> None:
    """Sell ``amount`` of the coin ``symbol``."""
    _trade(ctx, symbol, amount, TradeType.SELL)


def purchase_count(budget: float, amount_per_coin: float) -> int:
    """Number of coins a budget covers at a fixed amount per coin."""
    return math.floor(budget / amount_per_coin)


def invest_command(ctx: CommandContext, budget: str, amt: str, page: str) -> None:
    """
    Spread a budget over the top coins of a market page.

    Buys ``amt`` of each of the first ``floor(budget / amt)`` coins, one
    order at a time. The first failed order stops the run; orders already
    filled are kept, there is no rollback.
    """
    total_budget = parse_positive_float(budget, "budget")
    per_coin = parse_positive_float(amt, "amt")
    page_number = parse_positive_int(page, "page")

    count = purchase_count(total_budget, per_coin)
    if count < 1:
        raise ValidationError(
            f"Budget {format_number(total_budget)} does not cover one purchase of {format_number(per_coin)}"
        )

    listing = ctx.client.market(page=page_number, limit=count)
    coins = listing.coins[:count]
    if not coins:
        print_warning(f"No coins listed on page {page_number}")
        return
    if len(coins) < count:
        print_info(f"Only {len(coins)} coins listed on page {page_number}")

    out(f"Investing in [bright_green]{len(coins)}[/] coins at the top of the marketplace")
    completed = 0
    for coin in coins:
        try:
            ctx.client.trade(coin.symbol, TradeType.BUY, per_coin)
        except RugplayError:
            print_warning(
                f"Stopped after {completed} of {len(coins)} purchases; completed purchases are kept"
            )
            raise
        completed += 1
        logger.debug(f"invest: bought {coin.symbol} ({completed}/{len(coins)})")
        out(f" Invested in {format_symbol(coin.symbol)} (-[bright_red]{format_number(per_coin)}[/])")


def new_coin_command(ctx: CommandContext, name: str, symbol: str, icon_path: str) -> None:
    """Create a coin; the icon is read from disk before anything is sent."""
    icon = load_image(icon_path)

    created = ctx.client.create_coin(name, symbol, icon)

    out(
        f"[bright_green]Created[/] {format_symbol(created.symbol)}"
        f" (-[bright_red]{format_number(created.fee_paid)}[/])"
    )
    if created.message:
        print_raw(created.message)
