"""Shared test configuration and fixtures."""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from stockfighter_tools.clients.stockfighter.settings import StockFighterSettings

_REQUIRED_ENV_VARS = {
    "STOCKFIGHTER_API_KEY": "test-api-key",
}


@pytest.fixture(autouse=True)
def _set_required_env_vars() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Provide a dummy API key for tests that load the real settings.yaml.

    The default configuration resolves ``${STOCKFIGHTER_API_KEY:}`` to an
    empty string, which ``StockFighterSettings.from_config`` rejects. This
    fixture injects a harmless placeholder so the config loads cleanly
    everywhere.
    """
    missing = {k: v for k, v in _REQUIRED_ENV_VARS.items() if k not in os.environ}
    if not missing:
        yield
        return
    with patch.dict(os.environ, missing):
        yield


@pytest.fixture
def settings() -> StockFighterSettings:
    """Return settings pointing at the Stockfighter test exchange."""
    return StockFighterSettings(
        api_key="k" * 40,
        venue="TESTEX",
        account="EXB123456",
        symbol="FOOBAR",
        base_url="https://api.stockfighter.io/ob/api",
    )
