"""Exception hierarchy for Stockfighter client errors.

Follow the same pattern as the other API clients: a base exception class
with specialised errors for the two ways a call can fail once the request
has been built.
"""

from typing import Any


class StockFighterError(Exception):
    """Base exception for all Stockfighter client errors."""


class StockFighterTransportError(StockFighterError):
    """Transport-level failure (connectivity, TLS, DNS, timeout).

    The underlying ``httpx`` error is kept verbatim on ``cause``; no
    attempt is made to classify it.

    Args:
        msg: Human-readable description of the error.
        cause: The transport exception, if one was raised.

    """

    def __init__(self, msg: str, cause: BaseException | None = None) -> None:
        """Initialize transport error.

        Args:
            msg: Human-readable description of the error.
            cause: The transport exception, if one was raised.

        """
        super().__init__(msg)
        self.msg = msg
        self.cause = cause


class StockFighterAPIError(StockFighterError):
    """The API answered but did not report ``"ok": true``.

    Args:
        msg: Diagnostic message embedding the decoded response.
        data: The decoded response structure.

    """

    def __init__(self, msg: str, data: dict[str, Any]) -> None:
        """Initialize API error.

        Args:
            msg: Diagnostic message embedding the decoded response.
            data: The decoded response structure.

        """
        super().__init__(msg)
        self.msg = msg
        self.data = data
