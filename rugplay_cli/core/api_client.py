"""
API client for Rugplay.

Every request carries the same browser-like headers plus the session cookie
from the shared ``Config``. Requests are refused locally while no cookie is
configured, and every failure mode (transport error, non-OK status,
undecodable body) is raised as a ``RugplayError`` subclass so callers can
report it and carry on.
"""

import logging
from typing import Any
from urllib.parse import quote

import requests

from ..config import Config
from ..domain import (
    CoinCreated,
    CoinflipResult,
    DailyReward,
    MarketPage,
    NotificationFeed,
    PortfolioSummary,
    PortfolioTotal,
    PromoResult,
    SelfProfile,
    SlotsResult,
    TradeResult,
    Transaction,
    UserReport,
    parse_transactions,
)
from ..utilities.constants import (
    ACCEPT_LANGUAGE,
    API_BASE_URL,
    PAGE_DATA_PARAMS,
    PAGE_DATA_URL,
    REQUEST_TIMEOUT,
    SITE_URL,
    USER_AGENT,
    CoinSide,
    TradeType,
)
from ..utilities.files import UploadFile
from .exceptions import APIError, MalformedResponseError, NetworkError, NotAuthenticatedError

logger = logging.getLogger(__name__)

# Multipart parts: (field, (filename or None, content[, content_type]))
FormParts = list[tuple[str, tuple[Any, ...]]]


class RugplayAPIClient:
    """
    API client that handles Rugplay communication.

    The cookie is read from ``config`` on every call, so a ``set-cookie``
    takes effect without rebuilding the client.
    """

    def __init__(
        self,
        config: Config,
        session: requests.Session | None = None,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize API client with the shared configuration."""
        self.config = config
        self.session = session or requests.Session()
        self.base_url = base_url
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            "Cookie": self.config.cookie,
            "Accept-Language": ACCEPT_LANGUAGE,
            "Origin": SITE_URL,
        }

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: FormParts | None = None,
        url: str | None = None,
    ) -> requests.Response:
        """
        Send one request and return the OK response.

        Args:
            endpoint: Path below the API base URL (e.g. ``"portfolio/summary"``)
            method: HTTP method
            params: Query string parameters
            json: JSON body
            files: Multipart form parts
            url: Absolute URL overriding ``base_url + endpoint``

        Returns:
            The response, guaranteed to have an OK status

        Raises:
            NotAuthenticatedError: If no cookie is configured (nothing is sent)
            NetworkError: If the request produced no response
            APIError: If the response status is not OK
        """
        if not self.config.is_authenticated:
            raise NotAuthenticatedError()

        target = url or f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {target}")
        try:
            response = self.session.request(
                method,
                target,
                headers=self._headers(),
                params=params,
                json=json,
                files=files,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Request to {endpoint or target} failed: {e}") from e

        logger.debug(f"{method} {target} -> {response.status_code}")
        return require_ok(response)

    def json_request(self, endpoint: str, method: str = "GET", **kwargs: Any) -> Any:
        """Send a request and decode its JSON body."""
        response = self.request(endpoint, method, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{endpoint}: response is not valid JSON") from e

    # Gambling

    def coinflip(self, side: CoinSide, amount: float) -> CoinflipResult:
        """Wager ``amount`` on ``side``."""
        payload = self.json_request(
            "gambling/coinflip", "POST", json={"side": side.value, "amount": amount}
        )
        return CoinflipResult.from_json(payload)

    def slots(self, amount: float) -> SlotsResult:
        """Spin the slot machine for ``amount``."""
        payload = self.json_request("gambling/slots", "POST", json={"amount": amount})
        return SlotsResult.from_json(payload)

    # Portfolio

    def portfolio_summary(self) -> PortfolioSummary:
        return PortfolioSummary.from_json(self.json_request("portfolio/summary"))

    def portfolio_total(self) -> PortfolioTotal:
        return PortfolioTotal.from_json(self.json_request("portfolio/total"))

    def transactions(self) -> tuple[Transaction, ...]:
        return parse_transactions(self.json_request("transactions"))

    # Market and trading

    def market(self, page: int = 1, search: str = "", limit: int = 6) -> MarketPage:
        """Fetch a page of coins sorted by market cap, descending."""
        params = {
            "search": search,
            "sortBy": "marketCap",
            "sortOrder": "desc",
            "priceFilter": "all",
            "changeFilter": "all",
            "page": page,
            "limit": limit,
        }
        return MarketPage.from_json(self.json_request("market", params=params))

    def trade(self, symbol: str, trade_type: TradeType, amount: float) -> TradeResult:
        """Place a BUY or SELL order for ``amount`` of ``symbol``."""
        payload = self.json_request(
            f"coin/{quote(symbol, safe='')}/trade",
            "POST",
            json={"type": trade_type.value, "amount": amount},
        )
        return TradeResult.from_json(payload, trade_type)

    def create_coin(self, name: str, symbol: str, icon: UploadFile) -> CoinCreated:
        """Launch a new coin with the given icon."""
        parts: FormParts = [
            ("name", (None, name)),
            ("symbol", (None, symbol)),
            ("icon", icon),
        ]
        return CoinCreated.from_json(self.json_request("coin/create", "POST", files=parts))

    # Account

    def redeem_promo(self, code: str) -> PromoResult:
        return PromoResult.from_json(self.json_request("promo/verify", "POST", json={"code": code}))

    def claim_daily_reward(self) -> DailyReward:
        return DailyReward.from_json(self.json_request("rewards/claim", "POST"))

    def notifications(self) -> NotificationFeed:
        return NotificationFeed.from_json(self.json_request("notifications"))

    def user_profile(self, username: str) -> UserReport:
        return UserReport.from_json(self.json_request(f"user/{quote(username, safe='')}"))

    def self_profile(self) -> SelfProfile:
        """Read the current user's profile from the site's page-data endpoint."""
        payload = self.json_request("__data.json", url=PAGE_DATA_URL, params=PAGE_DATA_PARAMS)
        return SelfProfile.from_page_data(payload)

    def update_settings(
        self,
        name: str | None = None,
        username: str | None = None,
        avatar: UploadFile | None = None,
        bio: str | None = None,
    ) -> None:
        """Update profile settings; ``None`` fields are left out of the form."""
        parts: FormParts = []
        if name is not None:
            parts.append(("name", (None, name)))
        if username is not None:
            parts.append(("username", (None, username)))
        if avatar is not None:
            parts.append(("avatar", avatar))
        if bio is not None:
            parts.append(("bio", (None, bio)))
        self.request("settings", "POST", files=parts)


def require_ok(response: requests.Response) -> requests.Response:
    """Raise ``APIError`` with the status and body unless the response is OK."""
    if not response.ok:
        raise APIError(response.status_code, response.reason or "", response.text)
    return response


def create_api_client(config: Config, session: requests.Session | None = None) -> RugplayAPIClient:
    """
    Factory function to create a Rugplay API client.

    Args:
        config: Shared configuration holding the session cookie
        session: Optional pre-built HTTP session

    Returns:
        RugplayAPIClient instance
    """
    return RugplayAPIClient(config, session=session)
