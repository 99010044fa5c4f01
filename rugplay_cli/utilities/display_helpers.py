"""
Display helpers shared by several commands.

Balance lines, wager outcomes and transaction log entries are rendered the
same way by different commands, so they live here.
"""

from rich.markup import escape

from ..domain import PortfolioSummary, Transaction
from .console import out
from .constants import TransactionType
from .formatters import format_currency, format_number, format_quantity, format_symbol


def print_wager_outcome(won: bool, new_balance: float, stake: float, payout: float | None) -> None:
    """Print the won/lost line and the resulting balance of a bet."""
    if won:
        out("You [bright_green]won[/]!")
        gain = format_number(payout) if payout is not None else "?"
        out(f"New balance: {format_currency(new_balance)} (+[bright_yellow]{gain}[/])")
    else:
        out("You [bright_red]lost[/].")
        out(f"New balance: {format_currency(new_balance)} (-[bright_red]{format_number(stake)}[/])")


def print_portfolio_figures(summary: PortfolioSummary) -> None:
    """Print balance, coin value and total value."""
    out(f"Balance: {format_currency(summary.balance)}")
    out(f"Total coin value: {format_currency(summary.total_coin_value)}")
    out(f"Total value: {format_currency(summary.total_value)}")


def format_transaction(transaction: Transaction) -> str | None:
    """
    Render one transaction log line.

    Returns:
        The markup line, or None for transaction types that are not displayed
    """
    t = transaction
    coin = f"{format_quantity(t.quantity)} {format_symbol(t.symbol)}"
    total = format_currency(t.total_amount, rounded=False)
    moved = format_currency(t.total_amount) if t.is_cash else coin

    if t.type == TransactionType.BUY.value:
        return f"  [on green]Buy[/] {coin} for {total}"
    if t.type == TransactionType.SELL.value:
        return f"  [on bright_red]Sell[/] {coin} for {total}"
    if t.type == TransactionType.TRANSFER_OUT.value:
        return f"  [on blue]Transferred[/] {moved} to [bold]{escape(t.recipient)}[/]"
    if t.type == TransactionType.TRANSFER_IN.value:
        return f"  [on blue]Received[/] {moved} from [bold]{escape(t.sender)}[/]"
    return None


def print_transactions(transactions: tuple[Transaction, ...] | list[Transaction]) -> None:
    """Print every displayable transaction, one per line."""
    for transaction in transactions:
        line = format_transaction(transaction)
        if line is not None:
            out(line)
