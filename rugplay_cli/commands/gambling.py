"""
Gambling commands - coinflip and slots.
"""

from ..cli.registry import CommandContext
from ..utilities.constants import CoinSide
from ..utilities.console import out
from ..utilities.display_helpers import print_wager_outcome
from ..utilities.formatters import slot_glyph
from ..utilities.validators import parse_positive_float


def coinflip_command(ctx: CommandContext, attempted_side: str, amount: str) -> None:
    """Flip a coin for ``amount``; side ``1`` is tails, anything else heads."""
    side = CoinSide.TAILS if attempted_side == "1" else CoinSide.HEADS
    stake = parse_positive_float(amount, "amount")

    result = ctx.client.coinflip(side, stake)
    print_wager_outcome(result.won, result.new_balance, stake, result.payout)


def slots_command(ctx: CommandContext, amount: str) -> None:
    """Spin the slot machine for ``amount``."""
    stake = parse_positive_float(amount, "amount")

    result = ctx.client.slots(stake)
    out(" ".join(slot_glyph(symbol) for symbol in result.symbols))
    print_wager_outcome(result.won, result.new_balance, stake, result.payout)
