"""
Formatting utilities for displaying balances, prices, changes and slot symbols.

All functions are pure and return rich markup strings (or plain numbers for
the rounding helpers) so commands can compose them into output lines.
"""

import logging
import math
from decimal import Decimal
from enum import Enum

from rich.markup import escape

from .constants import CURRENCY_GLYPH, CURRENCY_PRECISION, SLOT_GLYPHS, SLOT_PLACEHOLDER

logger = logging.getLogger(__name__)


class ChangeDirection(Enum):
    """Sign classification for directional values such as 24h change or P&L%."""

    POSITIVE = "positive"
    ZERO = "zero"
    NEGATIVE = "negative"


_CHANGE_STYLES = {
    ChangeDirection.POSITIVE: ("^", "on green"),
    ChangeDirection.ZERO: ("-", "on grey50"),
    ChangeDirection.NEGATIVE: ("v", "on bright_red"),
}


def round_currency(value: float, places: int = CURRENCY_PRECISION) -> float:
    """Round half-up to ``places`` decimals (``round(12.3456) -> 12.346``)."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def floor_currency(value: float, places: int = CURRENCY_PRECISION) -> float:
    """Truncate towards negative infinity at ``places`` decimals."""
    factor = 10**places
    return math.floor(value * factor) / factor


def format_number(value: float | int) -> str:
    """
    Format a number in plain decimal notation without trailing zeros.

    No precision is imposed (``5.0 -> '5'``, ``2.4e-10 -> '0.00000000024'``);
    callers round first where a value should be shown to three decimals.
    """
    if isinstance(value, int):
        return str(value)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_currency(value: float, rounded: bool = True) -> str:
    """Format a dollar amount, rounded to three decimals by default."""
    amount = round_currency(value) if rounded else value
    return f"[bright_yellow]{CURRENCY_GLYPH}[/][yellow]{format_number(amount)}[/]"


def format_quantity(value: float) -> str:
    """Format a coin quantity rounded to three decimals."""
    return format_number(round_currency(value))


def format_symbol(symbol: str) -> str:
    """Highlight a coin symbol."""
    return f"[black on white]{escape(symbol)}[/]"


def classify_change(value: float) -> ChangeDirection:
    """Classify a directional value by its sign."""
    if value > 0:
        return ChangeDirection.POSITIVE
    if value == 0:
        return ChangeDirection.ZERO
    return ChangeDirection.NEGATIVE


def format_change(value: float) -> str:
    """Render a directional value as ``^ 1.5`` / ``- 0`` / ``v -2`` on a colored background."""
    prefix, style = _CHANGE_STYLES[classify_change(value)]
    return f"[{style}]{prefix} {format_number(value)}[/]"


def slot_glyph(symbol: str) -> str:
    """Map a slot-machine symbol identifier to its glyph.

    Unknown identifiers render as a placeholder instead of an empty cell.
    """
    glyph = SLOT_GLYPHS.get(symbol)
    if glyph is None:
        logger.warning(f"Unknown slot symbol: {symbol!r}")
        return SLOT_PLACEHOLDER
    return glyph
