"""
Constants and configuration values for the Rugplay CLI.

Service endpoints, request headers, command defaults and display glyphs
live here so the rest of the code has no magic strings.
"""

from enum import Enum

# Service
SITE_URL = "https://rugplay.com"
API_BASE_URL = f"{SITE_URL}/api/"
PAGE_DATA_URL = f"{SITE_URL}/__data.json"
PAGE_DATA_PARAMS = {
    "x-sveltekit-trailing-slash": "1",
    "x-sveltekit-invalidated": "10",
}
REQUEST_TIMEOUT = 30  # seconds

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36"
)
ACCEPT_LANGUAGE = "en-US,en;q=0.9"

# Configuration
CONFIG_FILENAME = "rugplay_api_saves.json"
UNKNOWN_COOKIE = "unknown"
NONE_SENTINEL = "none"

# Command defaults
DEFAULT_BET_AMOUNT = "0.01"
DEFAULT_PAGE = "1"
MARKET_PAGE_SIZE = 6

# Display
CURRENCY_GLYPH = "$"
CURRENCY_PRECISION = 3
SLOT_PLACEHOLDER = "❔"
SLOT_GLYPHS = {
    "wattesigma": "◻️",
    "webx": "⬛",
    "twoblade": "🟥",
    "lyntr": "🟪",
    "bussin": "🟧",
    "subterfuge": "🟩",
}

# Coin id / name the API uses for the base currency in transfers
CASH_COIN_ID = 1
CASH_COIN_NAME = "LINKCOIN"

# Indexes into the flattened page-data payload of the side-channel endpoint
PROFILE_NAME_INDEX = 3
PROFILE_USERNAME_INDEX = 4
PROFILE_BIO_INDEX = 10

EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️ "
EMOJI_INFO = "ℹ️ "


class TradeType(Enum):
    """Direction of a coin trade."""

    BUY = "BUY"
    SELL = "SELL"


class CoinSide(Enum):
    """Coinflip side."""

    HEADS = "heads"
    TAILS = "tails"


class TransactionType(Enum):
    """Transaction kinds reported by the API."""

    BUY = "BUY"
    SELL = "SELL"
    TRANSFER_IN = "TRANSFER_IN"
    TRANSFER_OUT = "TRANSFER_OUT"
