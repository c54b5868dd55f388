"""Stockfighter trading-simulation API client."""

from stockfighter_tools.clients.stockfighter.client import StockFighterClient
from stockfighter_tools.clients.stockfighter.descriptors import (
    APIStatus,
    CancelOrder,
    OrderBook,
    OrderDirection,
    OrderType,
    PayloadRequestDescriptor,
    PlaceOrder,
    QueryOrder,
    RequestDescriptor,
    StocksOnVenue,
    VenueStatus,
)
from stockfighter_tools.clients.stockfighter.exceptions import (
    StockFighterAPIError,
    StockFighterError,
    StockFighterTransportError,
)
from stockfighter_tools.clients.stockfighter.models import (
    APIStatusResponse,
    CancelOrderResponse,
    Fill,
    OrderBookLevel,
    OrderBookResponse,
    OrderResponse,
    QueryOrderResponse,
    Stock,
    StocksOnVenueResponse,
    VenueStatusResponse,
)
from stockfighter_tools.clients.stockfighter.settings import StockFighterSettings

__all__ = [
    "APIStatus",
    "APIStatusResponse",
    "CancelOrder",
    "CancelOrderResponse",
    "Fill",
    "OrderBook",
    "OrderBookLevel",
    "OrderBookResponse",
    "OrderDirection",
    "OrderResponse",
    "OrderType",
    "PayloadRequestDescriptor",
    "PlaceOrder",
    "QueryOrder",
    "QueryOrderResponse",
    "RequestDescriptor",
    "Stock",
    "StockFighterAPIError",
    "StockFighterClient",
    "StockFighterError",
    "StockFighterSettings",
    "StockFighterTransportError",
    "StocksOnVenue",
    "VenueStatus",
    "VenueStatusResponse",
]
