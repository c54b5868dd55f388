"""Typed request descriptors for each Stockfighter API operation.

Every descriptor answers two questions: which HTTP method to use and which
path (relative to the API base URL) to call. Descriptors that send a body
also produce the JSON payload. Venue, account and symbol default to the
values in ``StockFighterSettings`` unless the descriptor overrides them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from stockfighter_tools.clients.stockfighter import _keys
from stockfighter_tools.clients.stockfighter.settings import StockFighterSettings
from stockfighter_tools.clients.stockfighter.transaction import HttpMethod

# Prices are sent in cents
_MINOR_UNITS = 100


class OrderDirection(Enum):
    """Whether an order buys or sells shares."""

    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    """Order types accepted by the venue.

    ``LIMIT`` rests until cancelled, ``MARKET`` matches anything,
    ``FOK`` fills completely or not at all, ``IOC`` fills what it can
    immediately and cancels the rest.
    """

    LIMIT = "Limit"
    MARKET = "Market"
    FOK = "FOK"
    IOC = "IOC"


@runtime_checkable
class RequestDescriptor(Protocol):
    """Describe the target of a single API call."""

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        ...

    def path(self, settings: StockFighterSettings) -> str:
        """Return the path relative to the API base URL."""
        ...


@runtime_checkable
class PayloadRequestDescriptor(RequestDescriptor, Protocol):
    """Request descriptor that also sends a JSON body."""

    def payload(self, settings: StockFighterSettings) -> dict[str, Any]:
        """Return the JSON-serialisable request body."""
        ...


@dataclass(frozen=True)
class APIStatus:
    """Check that the API itself is up."""

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.GET

    def path(self, settings: StockFighterSettings) -> str:  # noqa: ARG002
        """Return the API heartbeat path."""
        return "/heartbeat"


@dataclass(frozen=True)
class VenueStatus:
    """Check that a venue is up."""

    venue: str | None = None

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.GET

    def path(self, settings: StockFighterSettings) -> str:
        """Return the venue heartbeat path."""
        return f"/venues/{self.venue or settings.venue}/heartbeat"


@dataclass(frozen=True)
class StocksOnVenue:
    """List the stocks traded on a venue."""

    venue: str | None = None

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.GET

    def path(self, settings: StockFighterSettings) -> str:
        """Return the stock listing path."""
        return f"/venues/{self.venue or settings.venue}/stocks"


@dataclass(frozen=True)
class PlaceOrder:
    """Place a new order for a stock.

    Args:
        symbol: Symbol of the stock to trade.
        price: Limit price in dollars; sent to the API in cents.
        qty: Number of shares.
        direction: Buy or sell.
        order_type: How the venue should match the order.
        venue: Venue override; defaults to the configured venue.

    """

    symbol: str
    price: float
    qty: int
    direction: OrderDirection
    order_type: OrderType = OrderType.LIMIT
    venue: str | None = None

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.POST

    def path(self, settings: StockFighterSettings) -> str:
        """Return the order placement path."""
        return f"/venues/{self.venue or settings.venue}/stocks/{self.symbol}/orders"

    def payload(self, settings: StockFighterSettings) -> dict[str, Any]:
        """Return the order body with the price converted to cents."""
        return {
            _keys.ACCOUNT: settings.account,
            _keys.VENUE: self.venue or settings.venue,
            _keys.STOCK: self.symbol,
            _keys.PRICE: round(self.price * _MINOR_UNITS),
            _keys.QTY: self.qty,
            _keys.DIRECTION: self.direction.value,
            _keys.ORDER_TYPE: self.order_type.value,
        }


@dataclass(frozen=True)
class OrderBook:
    """Fetch the order book for a stock."""

    symbol: str
    venue: str | None = None

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.GET

    def path(self, settings: StockFighterSettings) -> str:
        """Return the order book path."""
        return f"/venues/{self.venue or settings.venue}/stocks/{self.symbol}"


@dataclass(frozen=True)
class QueryOrder:
    """Fetch the current status of an order."""

    id: int
    symbol: str | None = None
    venue: str | None = None

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.GET

    def path(self, settings: StockFighterSettings) -> str:
        """Return the order status path."""
        return _order_path(settings, self.id, symbol=self.symbol, venue=self.venue)


@dataclass(frozen=True)
class CancelOrder:
    """Cancel an open order."""

    id: int
    symbol: str | None = None
    venue: str | None = None

    @property
    def method(self) -> HttpMethod:
        """Return the HTTP method for this call."""
        return HttpMethod.DELETE

    def path(self, settings: StockFighterSettings) -> str:
        """Return the order cancellation path."""
        return _order_path(settings, self.id, symbol=self.symbol, venue=self.venue)


def _order_path(
    settings: StockFighterSettings,
    order_id: int,
    *,
    symbol: str | None,
    venue: str | None,
) -> str:
    return f"/venues/{venue or settings.venue}/stocks/{symbol or settings.symbol}/orders/{order_id}"
