"""
Domain objects for Rugplay API responses.

Every endpoint's JSON body is decoded into one of these frozen dataclasses
at the API client boundary.
"""

from .account import (
    DailyReward,
    Notification,
    NotificationFeed,
    PromoResult,
    PublicProfile,
    SelfProfile,
    UserReport,
    UserStats,
)
from .gambling import CoinflipResult, SlotsResult
from .market import CoinCreated, MarketCoin, MarketPage, TradeResult
from .portfolio import Holding, PortfolioSummary, PortfolioTotal, Transaction, parse_transactions

__all__ = [
    "CoinCreated",
    "CoinflipResult",
    "DailyReward",
    "Holding",
    "MarketCoin",
    "MarketPage",
    "Notification",
    "NotificationFeed",
    "PortfolioSummary",
    "PortfolioTotal",
    "PromoResult",
    "PublicProfile",
    "SelfProfile",
    "SlotsResult",
    "TradeResult",
    "Transaction",
    "UserReport",
    "UserStats",
    "parse_transactions",
]
