"""Concrete transport using httpx (injected where Transport is needed)."""
from __future__ import annotations

import httpx

from todo_client.domain.errors import TransportError, TransportTimeoutError
from todo_client.domain.messages import RequestDescriptor, ResponseEnvelope
from todo_client.ports.transport import Transport


class HttpxTransport(Transport):
    """Transport implementation using httpx.AsyncClient.

    Redirects are left to httpx's default (not followed), so a 3xx reaches the
    validator as-is.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        try:
            request = self._client.build_request(
                descriptor.method,
                descriptor.url,
                headers=dict(descriptor.headers),
                content=descriptor.body,
                timeout=httpx.Timeout(descriptor.timeout_seconds),
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise TransportError(
                f"cannot encode {descriptor.method} {descriptor.url}: {exc}"
            ) from exc
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(
                f"timeout while calling {descriptor.method} {descriptor.url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{descriptor.method} {descriptor.url} failed: {exc}"
            ) from exc
        return ResponseEnvelope(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
            url=str(response.url),
        )

    async def close(self) -> None:
        await self._client.aclose()
