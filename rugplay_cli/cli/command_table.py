"""
The table of commands available in the interactive shell.

Order here is the order ``commands`` lists them in.
"""

from .. import commands as cmd
from ..utilities.constants import DEFAULT_BET_AMOUNT, DEFAULT_PAGE
from .registry import Command, CommandRegistry, Parameter


def create_command_registry() -> CommandRegistry:
    """
    Factory function to build the command registry.

    Returns:
        CommandRegistry holding every shell command
    """
    return CommandRegistry(
        [
            Command("commands", "lists commands", cmd.commands_command),
            Command(
                "set-cookie",
                "sets your cookie for API requests, you can find this in the request "
                "headers on rugplay.com in network",
                cmd.set_cookie_command,
                (Parameter("new-cookie", greedy=True),),
            ),
            Command(
                "coinflip",
                "attempts a coinflip on your account with the given side (0=heads, 1=tails) and amount",
                cmd.coinflip_command,
                (
                    Parameter("attempted-side", default="0"),
                    Parameter("amount", default=DEFAULT_BET_AMOUNT),
                ),
            ),
            Command(
                "slots",
                "attempts a slot machine roll on your account with the given amount",
                cmd.slots_command,
                (Parameter("amount", default=DEFAULT_BET_AMOUNT),),
            ),
            Command("summary", "returns a summary of your portfolio", cmd.summary_command),
            Command("redeem", "redeems promotion code", cmd.redeem_command, (Parameter("code"),)),
            Command(
                "new-coin",
                "attempts to create a new coin",
                cmd.new_coin_command,
                (Parameter("name"), Parameter("symbol"), Parameter("icon-path")),
            ),
            Command(
                "settings",
                "updates your user settings (set fields to 'none' if you don't want to update "
                "them) note: updating the profile picture is slow and takes 10-20 minutes for "
                "Rugplay to update it, also it takes a path on your computer",
                cmd.settings_command,
                (
                    Parameter("name"),
                    Parameter("username"),
                    Parameter("avatar"),
                    Parameter("bio", greedy=True),
                ),
            ),
            Command("me", "returns things like your username, id, etc.", cmd.me_command),
            Command("daily-reward", "attempts to claim daily reward", cmd.daily_reward_command),
            Command("notifications", "lists notifications", cmd.notifications_command),
            Command(
                "invest",
                "invests in the most possible coins with a given budget and amount to spend "
                "on each coin",
                cmd.invest_command,
                (Parameter("budget"), Parameter("amt"), Parameter("page", default=DEFAULT_PAGE)),
            ),
            Command(
                "view-user",
                "views a user's stats by username (not display name)",
                cmd.view_user_command,
                (Parameter("user"),),
            ),
            Command(
                "market",
                "searches the market for the given search term or lists the top coins",
                cmd.market_command,
                (
                    Parameter("page", default=DEFAULT_PAGE),
                    Parameter("search-item", default="", greedy=True),
                ),
            ),
            Command(
                "buy-coin",
                "buys the given coin (by symbol) with the given amount",
                cmd.buy_coin_command,
                (Parameter("symbol"), Parameter("amount")),
            ),
            Command(
                "sell-coin",
                "sells the given coin (by symbol) with the given amount",
                cmd.sell_coin_command,
                (Parameter("symbol"), Parameter("amount")),
            ),
            Command("portfolio", "returns all your portfolio information", cmd.portfolio_command),
        ]
    )
