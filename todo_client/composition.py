"""Client composition root: build and lifecycle-manage concrete dependencies.

Production code builds one ClientDependencies at startup and passes its
``client`` explicitly; tests construct TodoApiClient around a stub transport.
"""
from __future__ import annotations

from todo_client.application.todo_api import TodoApiClient
from todo_client.config.settings import Settings
from todo_client.core.log import log_event
from todo_client.infrastructure.http.factory import create_transport
from todo_client.ports.transport import Transport


class ClientDependencies:
    """Holds wired client dependencies and their lifecycle."""

    def __init__(self, *, settings: Settings, transport: Transport | None = None) -> None:
        self._settings = settings
        self._injected_transport = transport
        self._transport: Transport | None = None
        self._client: TodoApiClient | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            raise RuntimeError("transport is not initialized")
        return self._transport

    @property
    def client(self) -> TodoApiClient:
        if self._client is None:
            raise RuntimeError("client is not initialized")
        return self._client

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        if self._client is not None:
            return
        self._transport = self._injected_transport or create_transport(self._settings)
        self._client = TodoApiClient.from_settings(self._settings, self._transport)
        log_event(
            "client_ready",
            base_url=self._settings.base_url,
            transport=type(self._transport).__name__,
        )

    async def close(self) -> None:
        if self._transport is not None:
            try:
                await self._transport.close()
            except Exception as exc:
                log_event("transport_close_failed", level="WARNING", error=str(exc))
            self._transport = None
        self._client = None

    async def __aenter__(self) -> "ClientDependencies":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def create_client_dependencies(
    settings: Settings | None = None,
    *,
    transport: Transport | None = None,
) -> ClientDependencies:
    return ClientDependencies(settings=settings or Settings(), transport=transport)
