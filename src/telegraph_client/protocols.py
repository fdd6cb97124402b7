"""Protocols for dependency injection of the HTTP transport."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TransportProtocol(Protocol):
    """Protocol for Telegraph transports.

    Implementations raise TransportError when the exchange fails and return
    the decoded response envelope otherwise.
    """

    def perform(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        """Send ``params`` to ``url`` and return the JSON envelope."""
        ...
