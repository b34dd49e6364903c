"""In-memory transport returning canned responses.

Used by tests and by the demo when no server is running. Responses are keyed
by (method, url); a default response answers everything else. A configured
error takes precedence over any configured response.
"""
from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Mapping

from todo_client.domain.errors import TransportError
from todo_client.domain.messages import RequestDescriptor, ResponseEnvelope

JSON_HEADERS = {"Content-Type": "application/json"}


def _as_bytes(body: bytes | str | Any) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


class StubTransport:
    def __init__(
        self,
        *,
        default: ResponseEnvelope | None = None,
        error: Exception | None = None,
    ) -> None:
        self._responses: dict[tuple[str, str], ResponseEnvelope] = {}
        self._default = default
        self._error = error
        self.sent: list[RequestDescriptor] = []
        self.closed = False

    def respond(
        self,
        method: str,
        url: str,
        body: bytes | str | Any = b"",
        *,
        status_code: int | None = 200,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Register the response for ``method url``. ``body`` may be bytes, text or a JSON-able value."""
        self._responses[(method.upper(), url)] = ResponseEnvelope(
            status_code=status_code,
            content=_as_bytes(body),
            headers=dict(JSON_HEADERS if headers is None else headers),
            url=url,
        )

    def respond_default(
        self,
        body: bytes | str | Any = b"",
        *,
        status_code: int | None = 200,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._default = ResponseEnvelope(
            status_code=status_code,
            content=_as_bytes(body),
            headers=dict(JSON_HEADERS if headers is None else headers),
        )

    def fail_with(self, error: Exception | None) -> None:
        self._error = error

    async def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        self.sent.append(descriptor)
        if self._error is not None:
            raise self._error
        envelope = self._responses.get((descriptor.method, descriptor.url), self._default)
        if envelope is None:
            raise TransportError(f"no stub response for {descriptor.method} {descriptor.url}")
        if not envelope.url:
            return replace(envelope, url=descriptor.url)
        return envelope

    async def close(self) -> None:
        self.closed = True
