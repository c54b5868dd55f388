"""Explicit connection settings for the Stockfighter API.

The API key, venue, account and stock symbol are fixed for the lifetime of
a level, so they are loaded once at start-up into an immutable settings
object and passed to the client rather than read from globals.
"""

from dataclasses import dataclass

from stockfighter_tools.core.config import get_config

DEFAULT_BASE_URL = "https://api.stockfighter.io/ob/api"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class StockFighterSettings:
    """Static values every Stockfighter call is parameterised by.

    Args:
        api_key: Key sent in the authorization header of every request.
        venue: Venue (exchange) identifier, e.g. ``"TESTEX"``.
        account: Trading account used when placing orders.
        symbol: Default stock symbol for order queries and cancels.
        base_url: Base URL of the REST API.
        timeout: Transport timeout in seconds.

    """

    api_key: str
    venue: str
    account: str
    symbol: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_config(cls) -> "StockFighterSettings":
        """Create settings from the ``stockfighter`` configuration section.

        Returns:
            Settings populated from ``settings.yaml`` and the environment.

        Raises:
            ValueError: If the API key, venue or account is not configured.
            ConfigError: If the stockfighter section is not a mapping.

        """
        section = get_config().get_stockfighter_config()
        api_key = section.get("api_key")
        if not api_key:
            raise ValueError("stockfighter.api_key not configured")

        venue = section.get("venue")
        if not venue:
            raise ValueError("stockfighter.venue not configured")

        account = section.get("account")
        if not account:
            raise ValueError("stockfighter.account not configured")

        return cls(
            api_key=str(api_key),
            venue=str(venue),
            account=str(account),
            symbol=str(section.get("symbol") or ""),
            base_url=str(section.get("base_url") or DEFAULT_BASE_URL),
            timeout=float(section.get("timeout") or DEFAULT_TIMEOUT),
        )
