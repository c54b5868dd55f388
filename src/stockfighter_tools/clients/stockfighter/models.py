"""Typed response records for Stockfighter API calls.

Provide frozen dataclasses that insulate callers from the untyped
dictionaries returned by the API. Every field is optional: the server
omits fields freely, especially on error responses, so each record is
built field by field and a missing or mistyped value simply becomes
``None``. Nested lists are ``None`` when the key is absent and a (possibly
empty) tuple when the key holds a JSON array.

The caller picks the record type matching the operation it invoked; the
mapping is not inferred from the payload.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self, TypeVar, cast

from stockfighter_tools.clients.stockfighter import _keys

_T = TypeVar("_T")


def _opt_bool(raw: dict[str, Any], key: str) -> bool | None:
    value = raw.get(key)
    return value if isinstance(value, bool) else None


def _opt_int(raw: dict[str, Any], key: str) -> int | None:
    value = raw.get(key)
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _opt_float(raw: dict[str, Any], key: str) -> float | None:
    value = raw.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return None


def _opt_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    return value if isinstance(value, str) else None


def _opt_records(
    raw: dict[str, Any],
    key: str,
    parse: Callable[[dict[str, Any]], _T],
) -> tuple[_T, ...] | None:
    """Build a tuple of nested records from a JSON array.

    Args:
        raw: Keyed structure holding the array.
        key: Key of the array.
        parse: Record constructor applied to each element.

    Returns:
        One record per element, or ``None`` when the key is absent or
        does not hold an array. Non-object elements yield all-``None``
        records.

    """
    items = raw.get(key)
    if not isinstance(items, list):
        return None
    return tuple(
        parse(cast("dict[str, Any]", item) if isinstance(item, dict) else {})
        for item in cast("list[Any]", items)
    )


@dataclass(frozen=True)
class Stock:
    """A stock listed on a venue.

    Args:
        name: Company name.
        symbol: Ticker symbol.

    """

    name: str | None = None
    symbol: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build a stock from one entry of the ``symbols`` array."""
        return cls(name=_opt_str(raw, _keys.NAME), symbol=_opt_str(raw, _keys.SYMBOL))


@dataclass(frozen=True)
class Fill:
    """A partial or complete execution of an order.

    Args:
        price: Execution price.
        qty: Number of shares filled.
        ts: ISO-8601 timestamp of the fill.

    """

    price: float | None = None
    qty: int | None = None
    ts: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build a fill from one entry of the ``fills`` array."""
        return cls(
            price=_opt_float(raw, _keys.PRICE),
            qty=_opt_int(raw, _keys.QTY),
            ts=_opt_str(raw, _keys.TIMESTAMP),
        )


@dataclass(frozen=True)
class OrderBookLevel:
    """Single price level in an order book.

    Args:
        price: Price of the level.
        qty: Quantity resting at this price.
        is_buy: ``True`` for bids, ``False`` for asks.

    """

    price: float | None = None
    qty: int | None = None
    is_buy: bool | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build a level from one entry of the ``bids`` or ``asks`` array."""
        return cls(
            price=_opt_float(raw, _keys.PRICE),
            qty=_opt_int(raw, _keys.QTY),
            is_buy=_opt_bool(raw, _keys.IS_BUY),
        )


@dataclass(frozen=True)
class APIStatusResponse:
    """Result of the API heartbeat."""

    ok: bool | None = None
    error: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build the record from the decoded response."""
        return cls(ok=_opt_bool(raw, _keys.OK), error=_opt_str(raw, _keys.ERROR))


@dataclass(frozen=True)
class VenueStatusResponse:
    """Result of a venue heartbeat."""

    ok: bool | None = None
    venue: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build the record from the decoded response."""
        return cls(ok=_opt_bool(raw, _keys.OK), venue=_opt_str(raw, _keys.VENUE))


@dataclass(frozen=True)
class StocksOnVenueResponse:
    """Stocks traded on a venue."""

    ok: bool | None = None
    stocks: tuple[Stock, ...] | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build the record from the decoded response."""
        return cls(
            ok=_opt_bool(raw, _keys.OK),
            stocks=_opt_records(raw, _keys.SYMBOLS, Stock.from_dict),
        )


@dataclass(frozen=True)
class OrderResponse:
    """State of an order as reported by the venue.

    Returned when placing, querying and cancelling an order.

    Args:
        ok: Whether the request succeeded.
        symbol: Stock symbol.
        venue: Venue the order lives on.
        direction: ``"buy"`` or ``"sell"``.
        original_qty: Quantity originally requested.
        qty: Quantity still outstanding.
        price: Limit price.
        order_type: Order type (``"limit"``, ``"market"``, ...).
        id: Venue-assigned order id.
        account: Account that placed the order.
        ts: ISO-8601 timestamp the order was received.
        fills: Executions against this order.
        total_filled: Total shares filled so far.
        open: Whether the order is still working.

    """

    ok: bool | None = None
    symbol: str | None = None
    venue: str | None = None
    direction: str | None = None
    original_qty: int | None = None
    qty: int | None = None
    price: float | None = None
    order_type: str | None = None
    id: int | None = None
    account: str | None = None
    ts: str | None = None
    fills: tuple[Fill, ...] | None = None
    total_filled: int | None = None
    open: bool | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build the record from the decoded response."""
        return cls(
            ok=_opt_bool(raw, _keys.OK),
            symbol=_opt_str(raw, _keys.SYMBOL),
            venue=_opt_str(raw, _keys.VENUE),
            direction=_opt_str(raw, _keys.DIRECTION),
            original_qty=_opt_int(raw, _keys.ORIGINAL_QTY),
            qty=_opt_int(raw, _keys.QTY),
            price=_opt_float(raw, _keys.PRICE),
            order_type=_opt_str(raw, _keys.TYPE),
            id=_opt_int(raw, _keys.ID),
            account=_opt_str(raw, _keys.ACCOUNT),
            ts=_opt_str(raw, _keys.TIMESTAMP),
            fills=_opt_records(raw, _keys.FILLS, Fill.from_dict),
            total_filled=_opt_int(raw, _keys.TOTAL_FILLED),
            open=_opt_bool(raw, _keys.OPEN),
        )


class QueryOrderResponse(OrderResponse):
    """Order state returned by an order status query."""


class CancelOrderResponse(OrderResponse):
    """Order state returned after a cancel."""


@dataclass(frozen=True)
class OrderBookResponse:
    """Order book snapshot for a stock."""

    ok: bool | None = None
    symbol: str | None = None
    venue: str | None = None
    bids: tuple[OrderBookLevel, ...] | None = None
    asks: tuple[OrderBookLevel, ...] | None = None
    ts: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Build the record from the decoded response."""
        return cls(
            ok=_opt_bool(raw, _keys.OK),
            symbol=_opt_str(raw, _keys.SYMBOL),
            venue=_opt_str(raw, _keys.VENUE),
            bids=_opt_records(raw, _keys.BIDS, OrderBookLevel.from_dict),
            asks=_opt_records(raw, _keys.ASKS, OrderBookLevel.from_dict),
            ts=_opt_str(raw, _keys.TIMESTAMP),
        )
