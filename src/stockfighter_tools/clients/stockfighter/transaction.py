"""Ready-to-send HTTP calls built from request descriptors.

A ``Transaction`` pairs an HTTP method with a base URL and a path suffix
and keeps a reference to the descriptor it came from, so the executor can
ask that descriptor for a request body when the method carries one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockfighter_tools.clients.stockfighter.descriptors import RequestDescriptor

_SEPARATOR = "/"


class HttpMethod(Enum):
    """HTTP verbs used against the Stockfighter API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        """Return whether requests with this method carry a JSON body."""
        return self in (HttpMethod.POST, HttpMethod.PUT)


def join_url(base_url: str, path: str) -> str:
    """Join a base URL and a path suffix with exactly one separator.

    Strip trailing ``/`` characters from the base and leading ones from the
    suffix. An empty suffix yields the base without a trailing slash.

    Args:
        base_url: Base URL, with or without a trailing slash.
        path: Path suffix, with or without a leading slash.

    Returns:
        The joined URL.

    """
    base = base_url.rstrip(_SEPARATOR)
    suffix = path.lstrip(_SEPARATOR)
    if not suffix:
        return base
    return f"{base}{_SEPARATOR}{suffix}"


@dataclass(frozen=True)
class Transaction:
    """A single HTTP call against the API.

    Args:
        method: HTTP verb to send.
        base_url: Base URL of the API.
        path: Path suffix appended to ``base_url``.
        descriptor: Request descriptor that produced this call, if any.

    """

    method: HttpMethod
    base_url: str
    path: str = ""
    descriptor: RequestDescriptor | None = None

    @property
    def full_url(self) -> str:
        """Return the fully qualified request URL."""
        return join_url(self.base_url, self.path)
