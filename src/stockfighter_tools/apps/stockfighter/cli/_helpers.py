"""Shared helpers for Stockfighter CLI commands.

Centralise verbose logging setup, client construction from configuration
and the order formatting reused by the order commands.
"""

import logging

import typer

from stockfighter_tools.clients.stockfighter.client import StockFighterClient
from stockfighter_tools.clients.stockfighter.models import OrderResponse


def configure_verbose_logging() -> None:
    """Enable INFO-level logging for request tracing."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(message)s",
        datefmt="%H:%M:%S",
    )


def build_client() -> StockFighterClient:
    """Build a StockFighterClient from configuration.

    Abort with an error if the API key, venue or account is not configured.

    Returns:
        Client ready to talk to the configured venue.

    """
    try:
        return StockFighterClient.from_config()
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _fmt(value: object) -> str:
    return "-" if value is None else str(value)


def echo_order(order: OrderResponse) -> None:
    """Print an order record.

    Args:
        order: Order returned by a place, query or cancel call.

    """
    typer.echo(f"Order {_fmt(order.id)} on {_fmt(order.venue)}:{_fmt(order.symbol)}")
    typer.echo(
        f"  {_fmt(order.direction)} {_fmt(order.original_qty)} @ {_fmt(order.price)}"
        f"  type={_fmt(order.order_type)}  account={_fmt(order.account)}"
    )
    typer.echo(
        f"  open={_fmt(order.open)}  outstanding={_fmt(order.qty)}"
        f"  filled={_fmt(order.total_filled)}  ts={_fmt(order.ts)}"
    )
    for fill in order.fills or ():
        typer.echo(f"    fill {_fmt(fill.qty)} @ {_fmt(fill.price)}  {_fmt(fill.ts)}")
