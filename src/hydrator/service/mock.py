"""In-memory transporter for tests and demos.

Usage:
    transporter = MockTransporter()
    transporter.route("orders.query", '[{"id": "a1"}]')
    transporter.route("orders.update", lambda payload: '{"status": "ok"}')
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hydrator.service.protocol import TransportError

type Response = str | None | Callable[[Any], str | None]


class MockTransporter:
    """Transporter answering from canned responses instead of a network.

    Attributes:
        calls: Every (endpoint, payload) pair executed, in order.
    """

    def __init__(self, routes: dict[str, Response] | None = None) -> None:
        self._routes: dict[str, Response] = dict(routes or {})
        self.calls: list[tuple[str, Any]] = []

    def route(self, endpoint: str, response: Response) -> None:
        """Answer an endpoint with fixed text or a function of the payload."""
        self._routes[endpoint] = response

    def execute(self, endpoint: str, payload: Any = None) -> str | None:
        """Simulate a request to an endpoint.

        Raises:
            TransportError: If no response is routed for the endpoint.
        """
        self.calls.append((endpoint, payload))
        if endpoint not in self._routes:
            raise TransportError(f"invalid mock service endpoint: {endpoint}")

        response = self._routes[endpoint]
        if callable(response):
            return response(payload)
        return response
