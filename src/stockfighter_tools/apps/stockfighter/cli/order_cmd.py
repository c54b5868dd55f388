"""CLI commands for placing, querying and cancelling orders.

Provide ``order``, ``status`` and ``cancel`` subcommands. Orders go to the
configured account on the configured venue unless ``--venue`` is given.
"""

import asyncio
from typing import Annotated

import typer

from stockfighter_tools.apps.stockfighter.cli._helpers import (
    build_client,
    configure_verbose_logging,
    echo_order,
)
from stockfighter_tools.clients.stockfighter.descriptors import OrderDirection, OrderType
from stockfighter_tools.clients.stockfighter.exceptions import StockFighterError

_DIRECTIONS = {d.value: d for d in OrderDirection}
_ORDER_TYPES = {t.value.lower(): t for t in OrderType}

_VenueOption = Annotated[
    str | None, typer.Option(help="Venue (defaults to the configured venue)")
]
_SymbolOption = Annotated[
    str | None, typer.Option(help="Stock symbol (defaults to the configured symbol)")
]
_VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log each request")]


def order(  # noqa: PLR0913
    symbol: str,
    price: float,
    qty: int,
    direction: Annotated[str, typer.Option(help="Order direction: buy or sell")] = "buy",
    order_type: Annotated[
        str, typer.Option("--type", help="Order type: limit, market, fok or ioc")
    ] = "limit",
    venue: _VenueOption = None,
    verbose: _VerboseOption = False,  # noqa: FBT002
) -> None:
    """Place an order for a stock.

    Args:
        symbol: Stock symbol.
        price: Limit price in dollars.
        qty: Number of shares.
        direction: ``buy`` or ``sell``.
        order_type: ``limit``, ``market``, ``fok`` or ``ioc``.
        venue: Venue to trade on.
        verbose: Log each request.

    """
    side = _DIRECTIONS.get(direction.lower())
    if side is None:
        typer.echo(f"Error: Direction must be 'buy' or 'sell', got '{direction}'.", err=True)
        raise typer.Exit(code=1)

    kind = _ORDER_TYPES.get(order_type.lower())
    if kind is None:
        typer.echo(
            f"Error: Order type must be one of {', '.join(_ORDER_TYPES)}, got '{order_type}'.",
            err=True,
        )
        raise typer.Exit(code=1)

    if qty <= 0:
        typer.echo("Error: Quantity must be positive.", err=True)
        raise typer.Exit(code=1)

    if verbose:
        configure_verbose_logging()
    asyncio.run(
        _order(symbol=symbol, price=price, qty=qty, direction=side, order_type=kind, venue=venue)
    )


async def _order(  # noqa: PLR0913
    *,
    symbol: str,
    price: float,
    qty: int,
    direction: OrderDirection,
    order_type: OrderType,
    venue: str | None,
) -> None:
    try:
        async with build_client() as client:
            placed = await client.place_order(
                symbol, price, qty, direction, order_type=order_type, venue=venue
            )
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    echo_order(placed)


def status(
    order_id: int,
    symbol: _SymbolOption = None,
    venue: _VenueOption = None,
    verbose: _VerboseOption = False,  # noqa: FBT002
) -> None:
    """Show the current state of an order.

    Args:
        order_id: Venue-assigned order id.
        symbol: Stock symbol.
        venue: Venue the order lives on.
        verbose: Log each request.

    """
    if verbose:
        configure_verbose_logging()
    asyncio.run(_status(order_id=order_id, symbol=symbol, venue=venue))


async def _status(*, order_id: int, symbol: str | None, venue: str | None) -> None:
    try:
        async with build_client() as client:
            state = await client.get_order_status(order_id, symbol, venue)
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    echo_order(state)


def cancel(
    order_id: int,
    symbol: _SymbolOption = None,
    venue: _VenueOption = None,
    verbose: _VerboseOption = False,  # noqa: FBT002
) -> None:
    """Cancel an open order.

    Args:
        order_id: Venue-assigned order id.
        symbol: Stock symbol.
        venue: Venue the order lives on.
        verbose: Log each request.

    """
    if verbose:
        configure_verbose_logging()
    asyncio.run(_cancel(order_id=order_id, symbol=symbol, venue=venue))


async def _cancel(*, order_id: int, symbol: str | None, venue: str | None) -> None:
    try:
        async with build_client() as client:
            state = await client.cancel_order(order_id, symbol, venue)
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo("Cancelled.")
    echo_order(state)
