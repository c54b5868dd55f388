"""Single-attempt async dispatch of transactions over ``httpx``.

The executor sends one HTTP call per transaction and reports the raw
outcome. It never retries, never inspects the status code and never
decodes the body; transport errors are captured rather than raised so
that every call ends in exactly one ``TransportResult``.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from stockfighter_tools.clients.stockfighter._keys import AUTH_HEADER
from stockfighter_tools.clients.stockfighter.descriptors import PayloadRequestDescriptor
from stockfighter_tools.clients.stockfighter.settings import StockFighterSettings
from stockfighter_tools.clients.stockfighter.transaction import Transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResult:
    """Raw outcome of one HTTP call.

    On a terminal outcome exactly one of ``content`` and ``error`` is set.

    Args:
        response: The ``httpx`` response, when the server answered.
        content: Raw response body.
        error: Transport exception raised by ``httpx``.

    """

    response: httpx.Response | None = None
    content: bytes | None = None
    error: Exception | None = None


class TransactionExecutor:
    """Send transactions to the Stockfighter API.

    Every request carries the API key header. GET and DELETE are sent
    without a body; POST and PUT carry the descriptor's payload as
    minified JSON when the descriptor produces one.
    """

    def __init__(self, settings: StockFighterSettings) -> None:
        """Initialize the executor.

        Args:
            settings: Connection settings supplying the API key, the
                timeout and the values descriptors build payloads from.

        """
        self.settings = settings
        self._http_client = httpx.AsyncClient(timeout=settings.timeout)

    def _build_body(self, transaction: Transaction) -> str:
        """Serialise the descriptor payload for methods that carry a body.

        Args:
            transaction: Transaction being sent.

        Returns:
            Minified JSON body, or an empty string when there is none.

        """
        if not transaction.method.has_body:
            return ""
        descriptor = transaction.descriptor
        if not isinstance(descriptor, PayloadRequestDescriptor):
            return ""
        return json.dumps(descriptor.payload(self.settings), separators=(",", ":"))

    async def execute(self, transaction: Transaction) -> TransportResult:
        """Send a transaction and capture the raw outcome.

        Args:
            transaction: Transaction to send.

        Returns:
            The response and body, or the transport error.

        """
        url = transaction.full_url
        body_str = self._build_body(transaction)

        headers = {AUTH_HEADER: self.settings.api_key}
        if body_str:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s", transaction.method.value, url)
        try:
            response = await self._http_client.request(
                method=transaction.method.value,
                url=url,
                headers=headers,
                content=body_str.encode() if body_str else None,
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # InvalidURL and UnicodeEncodeError come from building the request
            logger.warning("Transport error on %s %s: %s", transaction.method.value, url, exc)
            return TransportResult(error=exc)

        logger.debug("%s %s -> HTTP %d", transaction.method.value, url, response.status_code)
        return TransportResult(response=response, content=response.content)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http_client.aclose()

    async def __aenter__(self) -> "TransactionExecutor":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()
