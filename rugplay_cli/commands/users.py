"""
User commands - view another player's public profile.
"""

from rich.markup import escape

from ..cli.registry import CommandContext
from ..utilities.console import out, print_raw
from ..utilities.display_helpers import print_transactions
from ..utilities.formatters import (
    floor_currency,
    format_change,
    format_currency,
    format_number,
    format_symbol,
)
from ..utilities.validators import validate_non_empty_string


def view_user_command(ctx: CommandContext, user: str) -> None:
    """Show a user's profile, stats, created coins and recent transactions by username."""
    username = validate_non_empty_string(user, "user")

    report = ctx.client.user_profile(username)
    profile, stats = report.profile, report.stats

    admin = " [on bright_red]ADMIN[/]" if profile.is_admin else ""
    out(f"[bold]{escape(profile.name)}[/] (@[italic]{escape(profile.username)}[/]){admin}")
    print_raw(profile.bio)
    out(f"Total portfolio: {format_currency(stats.total_portfolio_value)}")
    out(f"Illiquid value: {format_currency(stats.holdings_value)}")
    out(f"Liquid value: {format_currency(floor_currency(profile.balance), rounded=False)}")
    out(f"Buy volume: {format_currency(floor_currency(stats.total_buy_volume, 0), rounded=False)}")
    out(f"Sell volume: {format_currency(floor_currency(stats.total_sell_volume), rounded=False)}")
    out(f"{stats.coins_created} created coins")

    if report.created_coins:
        out("  Symbol (Name) | Price | 24h Change | Market cap")
    for coin in report.created_coins:
        out(
            f"  {format_symbol(coin.symbol)} ({escape(coin.name)})"
            f" | {format_currency(coin.current_price)}"
            f" | {format_change(coin.change_24h)}"
            f" | {format_number(floor_currency(coin.market_cap))}"
        )

    out("Recent transactions")
    print_transactions(report.recent_transactions)
