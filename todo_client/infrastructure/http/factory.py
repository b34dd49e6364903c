"""Transport factory: selects implementation from settings."""
from __future__ import annotations

import httpx

from todo_client.config.settings import Settings
from todo_client.infrastructure.http.httpx_transport import HttpxTransport
from todo_client.infrastructure.http.stub_transport import StubTransport
from todo_client.ports.transport import Transport


def create_transport(settings: Settings) -> Transport:
    """Build a transport from settings. Timeouts are applied per request from the descriptor."""
    backend = settings.transport_backend.strip().lower()

    if backend == "httpx":
        return HttpxTransport(httpx.AsyncClient())

    if backend == "stub":
        return StubTransport()

    raise ValueError(f"Unsupported transport backend: {backend}")
