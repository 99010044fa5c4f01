"""
Account-level objects: profiles, notifications, rewards and promo codes.
"""

from dataclasses import dataclass
from typing import Any

from ..core.exceptions import MalformedResponseError
from ..utilities.constants import PROFILE_BIO_INDEX, PROFILE_NAME_INDEX, PROFILE_USERNAME_INDEX
from .market import MarketCoin
from .parsing import (
    optional_number,
    optional_str,
    require_bool,
    require_list,
    require_number,
    require_object,
    require_str,
)
from .portfolio import Transaction


@dataclass(frozen=True)
class SelfProfile:
    """The authenticated user's own display name, handle and bio."""

    name: str
    username: str
    bio: str

    @classmethod
    def from_page_data(cls, payload: Any) -> "SelfProfile":
        """
        Extract the profile from the site's page-data payload.

        The payload is a flattened node list; the root layout node's ``data``
        array holds the user fields at fixed positions.
        """
        data = require_object(payload, "page data")
        nodes = require_list(data, "nodes", "page data")
        if not nodes:
            raise MalformedResponseError("page data: no nodes")
        node = require_object(nodes[0], "page data node")
        values = require_list(node, "data", "page data node")
        needed = max(PROFILE_NAME_INDEX, PROFILE_USERNAME_INDEX, PROFILE_BIO_INDEX)
        if len(values) <= needed:
            raise MalformedResponseError("page data: user fields missing (is the cookie valid?)")

        def text(index: int) -> str:
            value = values[index]
            return "" if value is None else str(value)

        return cls(
            name=text(PROFILE_NAME_INDEX),
            username=text(PROFILE_USERNAME_INDEX),
            bio=text(PROFILE_BIO_INDEX),
        )


@dataclass(frozen=True)
class PublicProfile:
    name: str
    username: str
    bio: str
    is_admin: bool
    balance: float


@dataclass(frozen=True)
class UserStats:
    total_portfolio_value: float
    holdings_value: float
    total_buy_volume: float
    total_sell_volume: float
    coins_created: int


@dataclass(frozen=True)
class UserReport:
    """Everything ``user/{username}`` returns about another player."""

    profile: PublicProfile
    stats: UserStats
    created_coins: tuple[MarketCoin, ...]
    recent_transactions: tuple[Transaction, ...]

    @classmethod
    def from_json(cls, payload: Any) -> "UserReport":
        data = require_object(payload, "user")
        profile = require_object(data.get("profile"), "user profile")
        stats = require_object(data.get("stats"), "user stats")
        return cls(
            profile=PublicProfile(
                name=require_str(profile, "name", "user profile"),
                username=require_str(profile, "username", "user profile"),
                bio=optional_str(profile, "bio"),
                is_admin=profile.get("isAdmin") is True,
                balance=require_number(profile, "baseCurrencyBalance", "user profile"),
            ),
            stats=UserStats(
                total_portfolio_value=require_number(stats, "totalPortfolioValue", "user stats"),
                holdings_value=require_number(stats, "holdingsValue", "user stats"),
                total_buy_volume=require_number(stats, "totalBuyVolume", "user stats"),
                total_sell_volume=require_number(stats, "totalSellVolume", "user stats"),
                coins_created=int(require_number(stats, "coinsCreated", "user stats")),
            ),
            created_coins=tuple(
                MarketCoin.from_json(c, "created coin")
                for c in require_list(data, "createdCoins", "user")
            ),
            recent_transactions=tuple(
                Transaction.from_user_feed(t)
                for t in require_list(data, "recentTransactions", "user")
            ),
        )


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    is_read: bool


@dataclass(frozen=True)
class NotificationFeed:
    """Notifications plus the server's unread counter."""

    unread_count: int
    notifications: tuple[Notification, ...]

    @classmethod
    def from_json(cls, payload: Any) -> "NotificationFeed":
        data = require_object(payload, "notifications")
        items = []
        for raw in require_list(data, "notifications", "notifications"):
            item = require_object(raw, "notification")
            items.append(
                Notification(
                    title=optional_str(item, "title"),
                    message=optional_str(item, "message"),
                    is_read=require_bool(item, "isRead", "notification"),
                )
            )
        return cls(
            unread_count=int(require_number(data, "unreadCount", "notifications")),
            notifications=tuple(items),
        )

    @property
    def unread(self) -> list[Notification]:
        return [n for n in self.notifications if not n.is_read]

    @property
    def read(self) -> list[Notification]:
        return [n for n in self.notifications if n.is_read]


@dataclass(frozen=True)
class DailyReward:
    """Result of claiming the daily reward."""

    reward_amount: float
    new_balance: float
    total_rewards_claimed: int

    @classmethod
    def from_json(cls, payload: Any) -> "DailyReward":
        data = require_object(payload, "rewards/claim")
        claimed = optional_number(data, "totalRewardsClaimed", "rewards/claim")
        return cls(
            reward_amount=require_number(data, "rewardAmount", "rewards/claim"),
            new_balance=require_number(data, "newBalance", "rewards/claim"),
            total_rewards_claimed=int(claimed) if claimed is not None else 0,
        )


@dataclass(frozen=True)
class PromoResult:
    message: str

    @classmethod
    def from_json(cls, payload: Any) -> "PromoResult":
        data = require_object(payload, "promo/verify")
        return cls(message=optional_str(data, "message"))
