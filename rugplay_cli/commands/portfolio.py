"""
Portfolio commands - summary and full portfolio with transaction log.
"""

from ..cli.registry import CommandContext
from ..utilities.console import out, print_section_header
from ..utilities.display_helpers import print_portfolio_figures, print_transactions
from ..utilities.formatters import format_change, format_currency, format_quantity, format_symbol


def summary_command(ctx: CommandContext) -> None:
    """Show balance, coin value and total value."""
    summary = ctx.client.portfolio_summary()

    out("[bold]Portfolio[/] Summary")
    print_portfolio_figures(summary)


def portfolio_command(ctx: CommandContext) -> None:
    """
    Show holdings and transaction history.

    Both requests must succeed before anything is printed; the second one
    is not sent if the first fails.
    """
    total = ctx.client.portfolio_total()
    transactions = ctx.client.transactions()

    print_section_header("Portfolio")
    print_portfolio_figures(total.summary)
    out("Coin holdings")
    out("  Symbol | Quantity Owned | Price | P&L% | 24h Change | Value")
    for holding in total.holdings:
        out(
            f"  {format_symbol(holding.symbol)}"
            f" | {format_quantity(holding.quantity)}"
            f" | {format_currency(holding.current_price, rounded=False)}"
            f" | {format_change(holding.percentage_change)}"
            f" | {format_change(holding.change_24h)}"
            f" | {format_currency(holding.value)}"
        )

    out("Transactions")
    print_transactions(transactions)
