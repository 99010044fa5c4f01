"""
Commands package for the Rugplay CLI.

This package contains the command handlers invoked by the interactive
shell. Each handler receives a ``CommandContext`` followed by its bound
string arguments.
"""

from .account import (
    daily_reward_command,
    me_command,
    notifications_command,
    redeem_command,
    set_cookie_command,
    settings_command,
)
from .gambling import coinflip_command, slots_command
from .help import commands_command
from .market import (
    buy_coin_command,
    invest_command,
    market_command,
    new_coin_command,
    sell_coin_command,
)
from .portfolio import portfolio_command, summary_command
from .users import view_user_command

__all__ = [
    "buy_coin_command",
    "coinflip_command",
    "commands_command",
    "daily_reward_command",
    "invest_command",
    "market_command",
    "me_command",
    "new_coin_command",
    "notifications_command",
    "portfolio_command",
    "redeem_command",
    "sell_coin_command",
    "set_cookie_command",
    "settings_command",
    "slots_command",
    "summary_command",
    "view_user_command",
]
