"""Transport port: contract for sending one HTTP request.

The application depends on this port; infrastructure (httpx, in-memory stub)
implements it.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from todo_client.domain.messages import RequestDescriptor, ResponseEnvelope


@runtime_checkable
class Transport(Protocol):
    """Port: exchange one request for one response. No retries."""

    async def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        """Send the request; raise TransportTimeoutError or TransportError on failure."""
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
