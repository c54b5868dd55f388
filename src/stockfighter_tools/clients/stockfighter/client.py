"""Async client facade for the Stockfighter trading-simulation API.

Wire a request descriptor through the whole pipeline: build the
``Transaction``, send it with the ``TransactionExecutor``, map the raw
result into the uniform keyed structure, and check the ``"ok"`` flag.

Two calling styles are offered:

* ``send`` / ``dispatch`` take a success and a failure callback. Exactly
  one of them fires per call and no client error escapes.
* ``request`` and the typed helpers (``venue_heartbeat``,
  ``place_order``, ...) are awaited and raise ``StockFighterError``.
"""

import asyncio
import json
import logging
from collections.abc import Callable
from typing import Any

from stockfighter_tools.clients.stockfighter._keys import OK
from stockfighter_tools.clients.stockfighter.descriptors import (
    APIStatus,
    CancelOrder,
    OrderBook,
    OrderDirection,
    OrderType,
    PlaceOrder,
    QueryOrder,
    RequestDescriptor,
    StocksOnVenue,
    VenueStatus,
)
from stockfighter_tools.clients.stockfighter.exceptions import (
    StockFighterAPIError,
    StockFighterError,
)
from stockfighter_tools.clients.stockfighter.executor import TransactionExecutor
from stockfighter_tools.clients.stockfighter.mapper import map_result
from stockfighter_tools.clients.stockfighter.models import (
    APIStatusResponse,
    CancelOrderResponse,
    OrderBookResponse,
    OrderResponse,
    QueryOrderResponse,
    StocksOnVenueResponse,
    VenueStatusResponse,
)
from stockfighter_tools.clients.stockfighter.settings import StockFighterSettings
from stockfighter_tools.clients.stockfighter.transaction import Transaction

logger = logging.getLogger(__name__)

SuccessHandler = Callable[[dict[str, Any]], None]
FailureHandler = Callable[[str], None]


class StockFighterClient:
    """Typed async client for the Stockfighter API.

    Args:
        settings: API key, venue, account and symbol for this session.

    """

    def __init__(self, settings: StockFighterSettings) -> None:
        """Initialize the Stockfighter client.

        Args:
            settings: API key, venue, account and symbol for this session.

        """
        self.settings = settings
        self._executor = TransactionExecutor(settings)

    @classmethod
    def from_config(cls) -> "StockFighterClient":
        """Create a client from configuration.

        Returns:
            Configured StockFighterClient instance.

        Raises:
            ValueError: If configuration is missing required values.

        """
        return cls(StockFighterSettings.from_config())

    def build_transaction(self, descriptor: RequestDescriptor) -> Transaction:
        """Resolve a descriptor into a ready-to-send transaction.

        Args:
            descriptor: Operation to perform.

        Returns:
            Transaction against the configured base URL.

        """
        return Transaction(
            method=descriptor.method,
            base_url=self.settings.base_url,
            path=descriptor.path(self.settings),
            descriptor=descriptor,
        )

    async def request(self, descriptor: RequestDescriptor) -> dict[str, Any]:
        """Perform one API call and return the decoded response.

        Args:
            descriptor: Operation to perform.

        Returns:
            The decoded keyed structure, whose ``"ok"`` flag is ``True``.

        Raises:
            StockFighterTransportError: If the HTTP call itself failed.
            StockFighterAPIError: If the response does not report ``"ok": true``.

        """
        transaction = self.build_transaction(descriptor)
        result = await self._executor.execute(transaction)
        data = map_result(result)
        if data.get(OK) is not True:
            msg = f"Failure response {json.dumps(data, default=str)}"
            logger.warning("%s %s: %s", transaction.method.value, transaction.full_url, msg)
            raise StockFighterAPIError(msg, data)
        return data

    async def send(
        self,
        descriptor: RequestDescriptor,
        on_success: SuccessHandler,
        on_failure: FailureHandler,
    ) -> None:
        """Perform one API call and report the outcome through callbacks.

        Exactly one callback fires. ``on_success`` receives the decoded
        structure to pass to the matching response record's ``from_dict``;
        ``on_failure`` receives a diagnostic message.

        Args:
            descriptor: Operation to perform.
            on_success: Called with the decoded response when ``"ok"`` is true.
            on_failure: Called with an error message otherwise.

        """
        try:
            data = await self.request(descriptor)
        except StockFighterError as exc:
            on_failure(str(exc))
            return
        on_success(data)

    def dispatch(
        self,
        descriptor: RequestDescriptor,
        on_success: SuccessHandler,
        on_failure: FailureHandler,
    ) -> "asyncio.Task[None]":
        """Schedule a call on the running event loop without waiting for it.

        Concurrent calls are independent; callers correlate callbacks with
        their requests themselves.

        Args:
            descriptor: Operation to perform.
            on_success: Called with the decoded response when ``"ok"`` is true.
            on_failure: Called with an error message otherwise.

        Returns:
            The task running the call.

        """
        return asyncio.create_task(self.send(descriptor, on_success, on_failure))

    async def heartbeat(self) -> APIStatusResponse:
        """Check that the API is up."""
        return APIStatusResponse.from_dict(await self.request(APIStatus()))

    async def venue_heartbeat(self, venue: str | None = None) -> VenueStatusResponse:
        """Check that a venue is up.

        Args:
            venue: Venue to check; defaults to the configured venue.

        Returns:
            Venue status record.

        """
        return VenueStatusResponse.from_dict(await self.request(VenueStatus(venue=venue)))

    async def list_stocks(self, venue: str | None = None) -> StocksOnVenueResponse:
        """List the stocks traded on a venue.

        Args:
            venue: Venue to query; defaults to the configured venue.

        Returns:
            Stock listing record.

        """
        return StocksOnVenueResponse.from_dict(await self.request(StocksOnVenue(venue=venue)))

    async def place_order(  # noqa: PLR0913
        self,
        symbol: str,
        price: float,
        qty: int,
        direction: OrderDirection,
        order_type: OrderType = OrderType.LIMIT,
        venue: str | None = None,
    ) -> OrderResponse:
        """Place a new order.

        Args:
            symbol: Stock to trade.
            price: Limit price in dollars.
            qty: Number of shares.
            direction: Buy or sell.
            order_type: Matching behaviour.
            venue: Venue to trade on; defaults to the configured venue.

        Returns:
            The order as accepted by the venue.

        """
        descriptor = PlaceOrder(
            symbol=symbol,
            price=price,
            qty=qty,
            direction=direction,
            order_type=order_type,
            venue=venue,
        )
        return OrderResponse.from_dict(await self.request(descriptor))

    async def get_order_book(self, symbol: str, venue: str | None = None) -> OrderBookResponse:
        """Fetch the order book for a stock.

        Args:
            symbol: Stock symbol.
            venue: Venue to query; defaults to the configured venue.

        Returns:
            Order book record.

        """
        descriptor = OrderBook(symbol=symbol, venue=venue)
        return OrderBookResponse.from_dict(await self.request(descriptor))

    async def get_order_status(
        self,
        order_id: int,
        symbol: str | None = None,
        venue: str | None = None,
    ) -> QueryOrderResponse:
        """Fetch the current state of an order.

        Args:
            order_id: Venue-assigned order id.
            symbol: Stock symbol; defaults to the configured symbol.
            venue: Venue; defaults to the configured venue.

        Returns:
            Order state record.

        """
        descriptor = QueryOrder(id=order_id, symbol=symbol, venue=venue)
        return QueryOrderResponse.from_dict(await self.request(descriptor))

    async def cancel_order(
        self,
        order_id: int,
        symbol: str | None = None,
        venue: str | None = None,
    ) -> CancelOrderResponse:
        """Cancel an open order.

        Args:
            order_id: Venue-assigned order id.
            symbol: Stock symbol; defaults to the configured symbol.
            venue: Venue; defaults to the configured venue.

        Returns:
            Final order state record.

        """
        descriptor = CancelOrder(id=order_id, symbol=symbol, venue=venue)
        return CancelOrderResponse.from_dict(await self.request(descriptor))

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._executor.close()

    async def __aenter__(self) -> "StockFighterClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()
