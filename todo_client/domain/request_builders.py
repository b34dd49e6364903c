"""Request builders: pure functions from endpoint inputs to RequestDescriptor.

Builders never perform I/O. A base URL that cannot be combined with an
endpoint path into an absolute http(s) URL raises ConfigurationError.
"""
from __future__ import annotations

import base64
from typing import Mapping
from urllib.parse import urlparse

from todo_client.constants import (
    AUTHORIZATION_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT_SECONDS,
    EndpointPath,
    HttpMethod,
)
from todo_client.domain.errors import ConfigurationError
from todo_client.domain.messages import RequestDescriptor
from todo_client.domain.models import Todo, User


def build_headers(
    key: str,
    value: str,
    defaults: Mapping[str, str] = DEFAULT_HEADERS,
) -> dict[str, str]:
    """Return a copy of ``defaults`` with ``key`` set to ``value``."""
    headers = dict(defaults)
    headers[key] = value
    return headers


def basic_authorization(email: str, password: str) -> str:
    """Base64 of ``email:password`` (UTF-8, standard alphabet, padded)."""
    return base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")


def join_url(base_url: str, path: str) -> str:
    url = base_url + path
    try:
        parsed = urlparse(url)
        # raises ValueError for a non-numeric or out-of-range port
        parsed.port
    except ValueError as exc:
        raise ConfigurationError(f"invalid endpoint url: {url!r}") from exc
    if (
        parsed.scheme not in ("http", "https")
        or not parsed.hostname
        or any(ch.isspace() for ch in url)
    ):
        raise ConfigurationError(f"invalid endpoint url: {url!r}")
    return url


class RequestBuilder:
    """Builds one RequestDescriptor per endpoint call from fixed client configuration."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        default_headers: Mapping[str, str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url
        self._default_headers = dict(DEFAULT_HEADERS if default_headers is None else default_headers)
        self._timeout_seconds = float(timeout_seconds)

    def _bearer_headers(self, token: str) -> dict[str, str]:
        return build_headers(AUTHORIZATION_HEADER, f"Bearer {token}", self._default_headers)

    def _descriptor(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            url=join_url(self._base_url, path),
            headers=headers,
            body=body,
            timeout_seconds=self._timeout_seconds,
        )

    def build_create_user(self, user: User) -> RequestDescriptor:
        return self._descriptor(
            HttpMethod.POST,
            EndpointPath.USERS,
            self._default_headers,
            user.to_json(),
        )

    def build_login(self, email: str, password: str) -> RequestDescriptor:
        headers = build_headers(
            AUTHORIZATION_HEADER,
            f"Basic {basic_authorization(email, password)}",
            self._default_headers,
        )
        return self._descriptor(HttpMethod.POST, EndpointPath.LOGIN, headers)

    def build_post_todo(self, token: str, todo: Todo) -> RequestDescriptor:
        return self._descriptor(
            HttpMethod.POST,
            EndpointPath.TODOS,
            self._bearer_headers(token),
            todo.to_json(),
        )

    def build_get_todos(self, token: str) -> RequestDescriptor:
        return self._descriptor(HttpMethod.GET, EndpointPath.TODOS, self._bearer_headers(token))

    def build_delete_todo(self, token: str, todo_id: int) -> RequestDescriptor:
        return self._descriptor(
            HttpMethod.DELETE,
            f"{EndpointPath.TODOS}/{todo_id}",
            self._bearer_headers(token),
        )
