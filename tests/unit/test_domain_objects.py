"""
Unit tests for domain objects.

Tests for decoding API payloads into the frozen dataclasses used by the
commands, including rejection of malformed bodies.
"""

import pytest

from rugplay_cli.core.exceptions import MalformedResponseError
from rugplay_cli.domain import (
    CoinflipResult,
    DailyReward,
    MarketPage,
    NotificationFeed,
    PortfolioTotal,
    SelfProfile,
    SlotsResult,
    TradeResult,
    UserReport,
    parse_transactions,
)
from rugplay_cli.domain.parsing import optional_str, require_number
from rugplay_cli.utilities.constants import TradeType
from tests.fixtures.api_responses import (
    coinflip_payload,
    market_payload,
    notifications_payload,
    page_data_payload,
    portfolio_total_payload,
    reward_payload,
    slots_payload,
    transactions_payload,
    user_payload,
)


class TestParsing:
    """Test cases for payload field helpers."""

    def test_require_number_accepts_numeric_strings(self):
        assert require_number({"price": "1.25"}, "price", "coin") == 1.25

    @pytest.mark.parametrize("value", [True, None, "abc", [1]])
    def test_require_number_rejects(self, value):
        with pytest.raises(MalformedResponseError, match="price"):
            require_number({"price": value}, "price", "coin")

    def test_optional_str_default(self):
        assert optional_str({"bio": None}, "bio") == ""
        assert optional_str({}, "bio", "n/a") == "n/a"


class TestGamblingResults:
    """Test cases for coinflip and slots results."""

    def test_coinflip(self):
        result = CoinflipResult.from_json(coinflip_payload(won=True, payout=4.0))
        assert result.won is True
        assert result.new_balance == 1234.5678
        assert result.payout == 4.0

    def test_coinflip_requires_boolean_outcome(self):
        with pytest.raises(MalformedResponseError):
            CoinflipResult.from_json({"won": 1, "newBalance": 1})

    def test_slots(self):
        result = SlotsResult.from_json(slots_payload())
        assert result.symbols == ("webx", "webx", "lyntr")
        assert result.won is False

    @pytest.mark.parametrize("symbols", [["webx"], ["a", "b", "c", "d"], ["a", 2, "c"]])
    def test_slots_requires_three_symbols(self, symbols):
        with pytest.raises(MalformedResponseError, match="symbols"):
            SlotsResult.from_json({"symbols": symbols, "won": False, "newBalance": 0})

    def test_results_are_immutable(self):
        result = CoinflipResult.from_json(coinflip_payload())
        with pytest.raises(AttributeError):
            result.won = False


class TestMarketObjects:
    """Test cases for market pages and trade results."""

    def test_market_page(self):
        page = MarketPage.from_json(market_payload())
        assert len(page.coins) == 3
        assert page.coins[0].name == "AAA Coin"
        assert page.coins[0].creator_name == "creator"
        assert page.total_pages == 4

    def test_market_page_defaults_total_pages(self):
        assert MarketPage.from_json({"coins": []}).total_pages == 1

    def test_trade_result_accepts_either_quantity_key(self):
        sold = TradeResult.from_json({"coinsBought": 3, "newBalance": 1}, TradeType.SELL)
        assert sold.quantity == 3

    def test_trade_result_without_quantity(self):
        with pytest.raises(MalformedResponseError):
            TradeResult.from_json({"newBalance": 1}, TradeType.BUY)


class TestPortfolioObjects:
    """Test cases for portfolio figures and transactions."""

    def test_portfolio_total(self):
        total = PortfolioTotal.from_json(portfolio_total_payload())
        assert total.summary.total_value == 15.0
        assert total.holdings[0].symbol == "AAA"
        assert total.holdings[0].change_24h == 0

    def test_history_transactions(self):
        transactions = parse_transactions(transactions_payload())
        assert [t.type for t in transactions] == ["BUY", "TRANSFER_OUT", "TRANSFER_IN", "SELL"]
        assert transactions[1].is_cash
        assert transactions[1].recipient == "alice"
        assert transactions[2].sender == "bob"
        assert not transactions[2].is_cash


class TestAccountObjects:
    """Test cases for profiles, notifications and rewards."""

    def test_self_profile_from_page_data(self):
        profile = SelfProfile.from_page_data(page_data_payload("Bob", "bobby", "hi"))
        assert profile == SelfProfile("Bob", "bobby", "hi")

    def test_self_profile_null_bio(self):
        payload = page_data_payload()
        payload["nodes"][0]["data"][10] = None
        assert SelfProfile.from_page_data(payload).bio == ""

    @pytest.mark.parametrize(
        "payload",
        [{}, {"nodes": []}, {"nodes": [{"data": ["a", "b"]}]}, {"nodes": [None]}],
    )
    def test_self_profile_malformed(self, payload):
        with pytest.raises(MalformedResponseError):
            SelfProfile.from_page_data(payload)

    def test_user_report(self):
        report = UserReport.from_json(user_payload())
        assert report.profile.is_admin
        assert report.profile.bio == "hello [world]"
        assert report.stats.coins_created == 1
        assert report.created_coins[0].name == "Alice Coin"
        assert report.recent_transactions[0].is_cash
        assert report.recent_transactions[1].symbol == "ALC"

    def test_notification_partition(self):
        feed = NotificationFeed.from_json(notifications_payload())
        assert feed.unread_count == 1
        assert [n.title for n in feed.unread] == ["Fresh"]
        assert [n.title for n in feed.read] == ["Old news"]

    def test_daily_reward(self):
        reward = DailyReward.from_json(reward_payload())
        assert reward.reward_amount == 1750
        assert reward.total_rewards_claimed == 3

    def test_daily_reward_without_counter(self):
        reward = DailyReward.from_json({"rewardAmount": 1, "newBalance": 2})
        assert reward.total_rewards_claimed == 0
