"""CLI entry point for the Stockfighter app.

All command logic lives in the cli subpackage.
"""

from stockfighter_tools.apps.stockfighter.cli import app

__all__ = ["app", "main"]


def main() -> None:
    """Run the Stockfighter CLI application."""
    app()


if __name__ == "__main__":
    main()
