"""CLI subpackage for the Stockfighter app.

Create the Typer application and register all command modules.
"""

import typer

from stockfighter_tools.apps.stockfighter.cli.book_cmd import book
from stockfighter_tools.apps.stockfighter.cli.order_cmd import cancel, order, status
from stockfighter_tools.apps.stockfighter.cli.status_cmd import heartbeat, stocks, venue

app = typer.Typer(help="Stockfighter trading-simulation tools")

app.command()(heartbeat)
app.command()(venue)
app.command()(stocks)
app.command()(book)
app.command()(order)
app.command()(status)
app.command()(cancel)

__all__ = ["app"]
