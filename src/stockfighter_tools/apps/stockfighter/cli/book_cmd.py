"""CLI command for displaying a Stockfighter order book.

Show the top bids and asks with quantities for a stock on a venue.
"""

import asyncio
from typing import Annotated

import typer

from stockfighter_tools.apps.stockfighter.cli._helpers import (
    build_client,
    configure_verbose_logging,
)
from stockfighter_tools.clients.stockfighter.exceptions import StockFighterError

_DEFAULT_DEPTH = 10


def book(
    symbol: str,
    venue: Annotated[
        str | None, typer.Option(help="Venue (defaults to the configured venue)")
    ] = None,
    depth: Annotated[int, typer.Option(help="Number of price levels to display")] = _DEFAULT_DEPTH,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Log each request")
    ] = False,
) -> None:
    """Display the order book for a stock.

    Args:
        symbol: Stock symbol.
        venue: Venue to query.
        depth: Number of price levels to show on each side.
        verbose: Log each request.

    """
    if verbose:
        configure_verbose_logging()
    asyncio.run(_book(symbol=symbol, venue=venue, depth=depth))


async def _book(*, symbol: str, venue: str | None, depth: int) -> None:
    """Fetch and display the order book for a stock.

    Args:
        symbol: Stock symbol.
        venue: Venue to query.
        depth: Number of price levels to show on each side.

    """
    try:
        async with build_client() as client:
            order_book = await client.get_order_book(symbol, venue)
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"\nOrder Book: {order_book.venue}:{order_book.symbol}  ({order_book.ts})")
    typer.echo("")

    typer.echo(f"{'BIDS':<20} {'ASKS':>20}")
    typer.echo(f"{'Price':>8} {'Qty':>8}{'':>6}{'Price':>8} {'Qty':>8}")
    typer.echo("-" * 40)

    bids = (order_book.bids or ())[:depth]
    asks = (order_book.asks or ())[:depth]
    max_rows = max(len(bids), len(asks))

    for i in range(max_rows):
        bid_str = f"{bids[i].price or 0:>8} {bids[i].qty or 0:>8}" if i < len(bids) else " " * 17
        ask_str = f"{asks[i].price or 0:>8} {asks[i].qty or 0:>8}" if i < len(asks) else ""
        typer.echo(f"{bid_str}{'':>6}{ask_str}")
