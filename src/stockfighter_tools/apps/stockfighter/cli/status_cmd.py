"""CLI commands for API and venue health checks and stock listings."""

import asyncio
from typing import Annotated

import typer

from stockfighter_tools.apps.stockfighter.cli._helpers import (
    build_client,
    configure_verbose_logging,
)
from stockfighter_tools.clients.stockfighter.exceptions import StockFighterError

_VenueOption = Annotated[
    str | None, typer.Option(help="Venue to query (defaults to the configured venue)")
]
_VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log each request")]


def heartbeat(verbose: _VerboseOption = False) -> None:  # noqa: FBT002
    """Check that the Stockfighter API is up."""
    if verbose:
        configure_verbose_logging()
    asyncio.run(_heartbeat())


async def _heartbeat() -> None:
    try:
        async with build_client() as client:
            status = await client.heartbeat()
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo("API is up" if status.ok else f"API is down: {status.error}")


def venue(venue: _VenueOption = None, verbose: _VerboseOption = False) -> None:  # noqa: FBT002
    """Check that a venue is up.

    Args:
        venue: Venue to check.
        verbose: Log each request.

    """
    if verbose:
        configure_verbose_logging()
    asyncio.run(_venue(venue=venue))


async def _venue(*, venue: str | None) -> None:
    try:
        async with build_client() as client:
            status = await client.venue_heartbeat(venue)
            requested = venue or client.settings.venue
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Venue {status.venue or requested} is up")


def stocks(venue: _VenueOption = None, verbose: _VerboseOption = False) -> None:  # noqa: FBT002
    """List the stocks traded on a venue.

    Args:
        venue: Venue to query.
        verbose: Log each request.

    """
    if verbose:
        configure_verbose_logging()
    asyncio.run(_stocks(venue=venue))


async def _stocks(*, venue: str | None) -> None:
    try:
        async with build_client() as client:
            listing = await client.list_stocks(venue)
    except StockFighterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not listing.stocks:
        typer.echo("No stocks listed.")
        return

    typer.echo(f"{'Symbol':<10} Name")
    typer.echo("-" * 40)
    for stock in listing.stocks:
        typer.echo(f"{stock.symbol or '-':<10} {stock.name or '-'}")
