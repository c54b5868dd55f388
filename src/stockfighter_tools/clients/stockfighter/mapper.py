"""Map raw transport results into the uniform keyed structure.

Decoding never fails: whatever the body holds, callers get a
``dict`` they can query by key. JSON objects pass through unchanged, JSON
arrays are wrapped under ``"results"``, and anything else (scalars,
``null``, empty or malformed bodies) becomes ``{"results": ""}``. Malformed
payloads are therefore indistinguishable from empty ones except by the
absence of the keys a caller expects.
"""

import json
import logging
from typing import Any, cast

from stockfighter_tools.clients.stockfighter._keys import RESULTS
from stockfighter_tools.clients.stockfighter.exceptions import StockFighterTransportError
from stockfighter_tools.clients.stockfighter.executor import TransportResult

logger = logging.getLogger(__name__)


def decode_payload(content: bytes | None) -> dict[str, Any]:
    """Decode a response body into the uniform keyed structure.

    Args:
        content: Raw response body.

    Returns:
        The decoded object, or a ``"results"`` wrapper for anything else.

    """
    decoded: Any = None
    if content:
        try:
            decoded = json.loads(content)
        except (ValueError, UnicodeDecodeError) as exc:
            logger.debug("Ignoring undecodable response body: %s", exc)
            decoded = None

    if isinstance(decoded, dict):
        return cast("dict[str, Any]", decoded)
    if isinstance(decoded, list):
        return {RESULTS: decoded}
    return {RESULTS: ""}


def map_result(result: TransportResult) -> dict[str, Any]:
    """Turn a transport result into the uniform keyed structure.

    The body is never decoded when the transport reported an error.

    Args:
        result: Raw outcome of an HTTP call.

    Returns:
        The decoded keyed structure.

    Raises:
        StockFighterTransportError: If the transport failed, or returned
            neither a body nor an error.

    """
    if result.error is not None:
        raise StockFighterTransportError(f"Error: {result.error!r}", cause=result.error)
    if result.content is None:
        raise StockFighterTransportError("Error: transport returned neither a body nor an error")
    return decode_payload(result.content)
