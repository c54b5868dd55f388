"""Tests for the Stockfighter client facade."""

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from stockfighter_tools.clients.stockfighter.client import StockFighterClient
from stockfighter_tools.clients.stockfighter.descriptors import (
    OrderBook,
    OrderDirection,
    OrderType,
    VenueStatus,
)
from stockfighter_tools.clients.stockfighter.exceptions import (
    StockFighterAPIError,
    StockFighterTransportError,
)
from stockfighter_tools.clients.stockfighter.models import (
    CancelOrderResponse,
    OrderBookLevel,
    OrderBookResponse,
    QueryOrderResponse,
    VenueStatusResponse,
)
from stockfighter_tools.clients.stockfighter.settings import StockFighterSettings

_STATUS_OK = 200
_STATUS_NOT_FOUND = 404
_ORDER_ID = 42
_BID_QTY = 100
_BID_PRICE = 50.0
_BASE_URL = "https://api.stockfighter.io/ob/api"


def _mock_response(payload: Any, status_code: int = _STATUS_OK) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = json.dumps(payload).encode()
    return response


class _Recorder:
    """Collect callback invocations."""

    def __init__(self) -> None:
        self.successes: list[dict[str, Any]] = []
        self.failures: list[str] = []

    def on_success(self, data: dict[str, Any]) -> None:
        self.successes.append(data)

    def on_failure(self, message: str) -> None:
        self.failures.append(message)


class TestStockFighterClient:
    """Test suite for StockFighterClient."""

    @pytest.fixture
    def client(self, settings: StockFighterSettings) -> StockFighterClient:
        """Create a StockFighterClient instance."""
        return StockFighterClient(settings)

    def _patch_request(self, client: StockFighterClient, **kwargs: Any) -> Any:
        return patch.object(client._executor._http_client, "request", new=AsyncMock(**kwargs))

    def test_build_transaction(self, client: StockFighterClient) -> None:
        """Resolve a descriptor against the configured base URL."""
        transaction = client.build_transaction(OrderBook(symbol="LTL"))
        assert transaction.full_url == f"{_BASE_URL}/venues/TESTEX/stocks/LTL"
        assert transaction.descriptor == OrderBook(symbol="LTL")

    def test_from_config(self) -> None:
        """Build a client from the configured settings."""
        settings = StockFighterSettings(api_key="a", venue="V", account="A", symbol="S")
        with patch(
            "stockfighter_tools.clients.stockfighter.client.StockFighterSettings.from_config",
            return_value=settings,
        ):
            client = StockFighterClient.from_config()
        assert client.settings is settings

    @pytest.mark.asyncio
    async def test_send_success(self, client: StockFighterClient) -> None:
        """Fire only the success callback when ok is true."""
        recorder = _Recorder()
        payload = {"ok": True, "venue": "TESTEX"}
        with self._patch_request(client, return_value=_mock_response(payload)):
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)

        assert recorder.successes == [payload]
        assert recorder.failures == []

    @pytest.mark.asyncio
    async def test_send_business_failure(self, client: StockFighterClient) -> None:
        """Fire only the failure callback, embedding the response, when ok is false."""
        recorder = _Recorder()
        with self._patch_request(client, return_value=_mock_response({"ok": False})):
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)

        assert recorder.successes == []
        assert len(recorder.failures) == 1
        assert "false" in recorder.failures[0]

    @pytest.mark.asyncio
    async def test_send_missing_ok_is_failure(self, client: StockFighterClient) -> None:
        """Treat a response without ok as a failure."""
        recorder = _Recorder()
        with self._patch_request(client, return_value=_mock_response([1, 2])):
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)

        assert recorder.successes == []
        assert recorder.failures == ['Failure response {"results": [1, 2]}']

    @pytest.mark.asyncio
    async def test_send_truthy_non_bool_ok_is_failure(self, client: StockFighterClient) -> None:
        """Require ok to be the boolean true."""
        recorder = _Recorder()
        with self._patch_request(client, return_value=_mock_response({"ok": 1})):
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)

        assert recorder.successes == []
        assert len(recorder.failures) == 1

    @pytest.mark.asyncio
    async def test_send_error_status_with_ok_false(self, client: StockFighterClient) -> None:
        """Route an HTTP error status through the ok check."""
        recorder = _Recorder()
        payload = {"ok": False, "error": "Unknown venue"}
        response = _mock_response(payload, status_code=_STATUS_NOT_FOUND)
        with self._patch_request(client, return_value=response):
            await client.send(VenueStatus(venue="NOPE"), recorder.on_success, recorder.on_failure)

        assert recorder.successes == []
        assert "Unknown venue" in recorder.failures[0]

    @pytest.mark.asyncio
    async def test_send_transport_error_skips_decoding(self, client: StockFighterClient) -> None:
        """Fire the failure callback without decoding on a transport error."""
        recorder = _Recorder()
        with (
            self._patch_request(client, side_effect=httpx.ConnectError("connection refused")),
            patch("stockfighter_tools.clients.stockfighter.mapper.decode_payload") as mock_decode,
        ):
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)

        mock_decode.assert_not_called()
        assert recorder.successes == []
        assert len(recorder.failures) == 1
        assert recorder.failures[0].startswith("Error: ")
        assert "connection refused" in recorder.failures[0]

    @pytest.mark.asyncio
    async def test_send_unencodable_api_key_fires_failure(
        self, settings: StockFighterSettings
    ) -> None:
        """Route a header the transport cannot encode to the failure callback."""
        recorder = _Recorder()
        bad_settings = StockFighterSettings(
            api_key="kéy",
            venue=settings.venue,
            account=settings.account,
            symbol=settings.symbol,
        )
        async with StockFighterClient(bad_settings) as client:
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)

        assert recorder.successes == []
        assert len(recorder.failures) == 1
        assert recorder.failures[0].startswith("Error: UnicodeEncodeError")

    @pytest.mark.asyncio
    async def test_dispatch_invalid_url_fires_failure(self, client: StockFighterClient) -> None:
        """Route a URL the transport rejects to the failure callback."""
        recorder = _Recorder()
        task = client.dispatch(
            VenueStatus(venue="TEST\x00EX"), recorder.on_success, recorder.on_failure
        )
        await task

        assert task.exception() is None
        assert recorder.successes == []
        assert len(recorder.failures) == 1
        assert recorder.failures[0].startswith("Error: InvalidURL")

    @pytest.mark.asyncio
    async def test_dispatch_runs_in_background(self, client: StockFighterClient) -> None:
        """Return a task that fires the callback when it completes."""
        recorder = _Recorder()
        with self._patch_request(client, return_value=_mock_response({"ok": True})):
            task = client.dispatch(VenueStatus(), recorder.on_success, recorder.on_failure)
            assert isinstance(task, asyncio.Task)
            await task

        assert recorder.successes == [{"ok": True}]

    @pytest.mark.asyncio
    async def test_request_raises_api_error(self, client: StockFighterClient) -> None:
        """Raise StockFighterAPIError carrying the decoded response."""
        payload = {"ok": False, "error": "bad"}
        with (
            self._patch_request(client, return_value=_mock_response(payload)),
            pytest.raises(StockFighterAPIError, match="Failure response") as exc_info,
        ):
            await client.request(VenueStatus())

        assert exc_info.value.data == payload

    @pytest.mark.asyncio
    async def test_request_raises_transport_error(self, client: StockFighterClient) -> None:
        """Raise StockFighterTransportError on transport failure."""
        with (
            self._patch_request(client, side_effect=httpx.ReadTimeout("slow")),
            pytest.raises(StockFighterTransportError),
        ):
            await client.request(VenueStatus())

    @pytest.mark.asyncio
    async def test_venue_heartbeat_end_to_end(self, client: StockFighterClient) -> None:
        """Decode a venue heartbeat into its record."""
        recorder = _Recorder()
        payload = {"ok": True, "venue": "TESTEX"}
        with self._patch_request(client, return_value=_mock_response(payload)) as mock_request:
            await client.send(VenueStatus(), recorder.on_success, recorder.on_failure)
            typed = await client.venue_heartbeat()

        assert VenueStatusResponse.from_dict(recorder.successes[0]) == VenueStatusResponse(
            ok=True, venue="TESTEX"
        )
        assert typed == VenueStatusResponse(ok=True, venue="TESTEX")
        assert mock_request.call_args.kwargs["url"] == f"{_BASE_URL}/venues/TESTEX/heartbeat"

    @pytest.mark.asyncio
    async def test_order_book_end_to_end(self, client: StockFighterClient) -> None:
        """Decode an order book into bid and ask levels."""
        payload = {
            "ok": True,
            "symbol": "LTL",
            "venue": "TESTEX",
            "bids": [{"price": _BID_PRICE, "qty": _BID_QTY, "isBuy": True}],
            "asks": [],
            "ts": "2016-01-01T00:00:00Z",
        }
        with self._patch_request(client, return_value=_mock_response(payload)):
            book = await client.get_order_book("LTL")

        assert isinstance(book, OrderBookResponse)
        assert book.bids == (OrderBookLevel(price=_BID_PRICE, qty=_BID_QTY, is_buy=True),)
        assert book.asks == ()

    @pytest.mark.asyncio
    async def test_place_order(self, client: StockFighterClient) -> None:
        """POST the order body and decode the placed order."""
        payload = {"ok": True, "id": _ORDER_ID, "symbol": "LTL", "open": True}
        with self._patch_request(client, return_value=_mock_response(payload)) as mock_request:
            placed = await client.place_order(
                "LTL", 50.0, 10, OrderDirection.SELL, order_type=OrderType.FOK
            )

        call_kwargs = mock_request.call_args.kwargs
        assert call_kwargs["method"] == "POST"
        assert call_kwargs["url"] == f"{_BASE_URL}/venues/TESTEX/stocks/LTL/orders"
        body = json.loads(call_kwargs["content"])
        assert body["price"] == 5000
        assert body["orderType"] == "FOK"
        assert placed.id == _ORDER_ID
        assert placed.open is True

    @pytest.mark.asyncio
    async def test_get_order_status(self, client: StockFighterClient) -> None:
        """GET the order and decode its state."""
        payload = {"ok": True, "id": _ORDER_ID, "open": True}
        with self._patch_request(client, return_value=_mock_response(payload)) as mock_request:
            state = await client.get_order_status(_ORDER_ID)

        assert isinstance(state, QueryOrderResponse)
        assert mock_request.call_args.kwargs["method"] == "GET"
        assert mock_request.call_args.kwargs["url"].endswith("/stocks/FOOBAR/orders/42")

    @pytest.mark.asyncio
    async def test_cancel_order(self, client: StockFighterClient) -> None:
        """DELETE the order without a body and decode its final state."""
        payload = {"ok": True, "id": _ORDER_ID, "open": False}
        with self._patch_request(client, return_value=_mock_response(payload)) as mock_request:
            state = await client.cancel_order(_ORDER_ID, symbol="LTL")

        call_kwargs = mock_request.call_args.kwargs
        assert isinstance(state, CancelOrderResponse)
        assert state.open is False
        assert call_kwargs["method"] == "DELETE"
        assert call_kwargs["content"] is None
        assert call_kwargs["url"].endswith("/stocks/LTL/orders/42")

    @pytest.mark.asyncio
    async def test_heartbeat_and_listing(self, client: StockFighterClient) -> None:
        """Decode the API heartbeat and the stock listing."""
        responses = [
            _mock_response({"ok": True, "error": ""}),
            _mock_response({"ok": True, "symbols": [{"name": "Foo", "symbol": "FOO"}]}),
        ]
        with self._patch_request(client, side_effect=responses):
            status = await client.heartbeat()
            listing = await client.list_stocks()

        assert status.ok is True
        assert status.error == ""
        assert listing.stocks is not None
        assert listing.stocks[0].symbol == "FOO"

    @pytest.mark.asyncio
    async def test_context_manager(self, settings: StockFighterSettings) -> None:
        """Test client can be used as async context manager."""
        async with StockFighterClient(settings) as client:
            assert client is not None

    @pytest.mark.asyncio
    async def test_close_client(self, client: StockFighterClient) -> None:
        """Test closing the client."""
        with patch.object(client._executor._http_client, "aclose", new=AsyncMock()) as mock_close:
            await client.close()
            mock_close.assert_called_once()
