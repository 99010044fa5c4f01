"""
Account commands - cookie, profile, settings, rewards, promo codes and notifications.
"""

from dataclasses import replace

from rich.markup import escape

from ..cli.registry import CommandContext
from ..utilities.console import out, print_raw, print_success
from ..utilities.constants import NONE_SENTINEL
from ..utilities.files import load_image
from ..utilities.formatters import format_currency, format_number


def set_cookie_command(ctx: CommandContext, new_cookie: str) -> None:
    """
    Store the session cookie and persist it immediately.

    The file is written first; the in-memory cookie only changes once the
    save succeeded.
    """
    ctx.store.save(replace(ctx.config, cookie=new_cookie))
    ctx.config.cookie = new_cookie
    out("Set cookie [bright_green]successfully[/].")


def redeem_command(ctx: CommandContext, code: str) -> None:
    """Redeem a promotion code."""
    result = ctx.client.redeem_promo(code)
    print_raw(result.message)


def settings_command(ctx: CommandContext, name: str, username: str, avatar: str, bio: str) -> None:
    """
    Update profile settings.

    Fields given as ``none`` are left unchanged; a bio whose first word is
    ``none`` is skipped whatever follows. The display name is always
    sent, so ``none`` re-sends the current one read from the profile. The
    avatar file is read before any request; the site can take 10-20
    minutes to show a new avatar.
    """
    avatar_file = load_image(avatar) if avatar != NONE_SENTINEL else None

    if name == NONE_SENTINEL:
        name = ctx.client.self_profile().name

    ctx.client.update_settings(
        name=name,
        username=username if username != NONE_SENTINEL else None,
        avatar=avatar_file,
        bio=bio if bio.split(" ", 1)[0] != NONE_SENTINEL else None,
    )
    print_success("Updated settings")


def me_command(ctx: CommandContext) -> None:
    """Show the current user's display name, handle and bio."""
    profile = ctx.client.self_profile()

    out(f"[bold]{escape(profile.name)}[/] [italic](@{escape(profile.username)})[/]")
    print_raw(profile.bio)


def daily_reward_command(ctx: CommandContext) -> None:
    """Claim the daily reward."""
    reward = ctx.client.claim_daily_reward()

    out(f"[bright_green]Redeemed[/] {reward.total_rewards_claimed} rewards")
    out(
        f"New balance: {format_currency(reward.new_balance, rounded=False)}"
        f" (+[bright_yellow]{format_number(reward.reward_amount)}[/])"
    )


def notifications_command(ctx: CommandContext) -> None:
    """List unread notifications, then read ones."""
    feed = ctx.client.notifications()

    out(f"[bold]Notifications[/] [on bright_red]{feed.unread_count}[/]")
    out("[italic]Unread[/]")
    for notification in feed.unread:
        out(f"[bold]{escape(notification.title)}[/]")
        print_raw(notification.message)
    out("[italic]Read[/]")
    for notification in feed.read:
        out(f"[bold]{escape(notification.title)}[/]")
        print_raw(notification.message)
