"""Transport protocol and service-layer errors.

The engine never calls a transport; services do, then hand the decoded
tree to the engine.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from hydrator.core.errors import HydratorError


class TransportError(HydratorError):
    """A transporter could not complete a request."""


class InvalidPayloadError(HydratorError, ValueError):
    """Response text from a transporter is not valid JSON."""


@runtime_checkable
class Transporter(Protocol):
    """Fetches raw response text for an endpoint.

    Usage:
        transporter: Transporter = MockTransporter()
        text = transporter.execute("orders.query", {"status": "open"})
    """

    def execute(self, endpoint: str, payload: Any = None) -> str | None:
        """Send a request and return the raw response text.

        Args:
            endpoint: Endpoint identifier understood by the transporter.
            payload: Criteria or payload tree to send.

        Returns:
            Raw response text, or None when the endpoint has nothing to return.

        Raises:
            TransportError: If the request cannot be completed.
        """
        ...
