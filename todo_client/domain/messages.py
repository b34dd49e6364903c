"""Request and response value objects exchanged with the transport."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _freeze(headers: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(headers))


@dataclass(frozen=True)
class RequestDescriptor:
    """One outbound HTTP call. Built once per endpoint invocation and never mutated."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))

    def __hash__(self) -> int:
        return hash((self.method, self.url, tuple(self.headers.items()), self.body, self.timeout_seconds))


@dataclass(frozen=True)
class ResponseEnvelope:
    """One inbound response: metadata plus raw payload.

    ``status_code`` is None when the transport produced a response without
    HTTP metadata.
    """

    status_code: int | None
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))
