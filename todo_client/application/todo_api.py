"""Todo API client: one build -> send -> validate -> decode pipeline per endpoint.

Uses the transport port; the concrete transport is built in the composition
root or injected by tests. Each call yields exactly one outcome: the decoded
record, or the error of the first stage that failed. Cancellation of the
calling task propagates out of ``transport.send`` untouched, so validation and
decoding never run for a cancelled call.
"""
from __future__ import annotations

from typing import Any

from todo_client.config.settings import Settings
from todo_client.core.log import log_event
from todo_client.domain.decoder import decode
from todo_client.domain.errors import TodoClientError
from todo_client.domain.messages import RequestDescriptor
from todo_client.domain.models import CreateUserResponse, Todo, Token, User
from todo_client.domain.request_builders import RequestBuilder
from todo_client.domain.response_validator import validate
from todo_client.ports.transport import Transport


class TodoApiClient:
    """Client context: holds the transport and request configuration for every call."""

    def __init__(self, transport: Transport, builder: RequestBuilder | None = None) -> None:
        self._transport = transport
        self._builder = builder or RequestBuilder()

    @classmethod
    def from_settings(cls, settings: Settings, transport: Transport) -> "TodoApiClient":
        builder = RequestBuilder(
            settings.base_url,
            default_headers=settings.default_headers,
            timeout_seconds=settings.request_timeout_seconds,
        )
        return cls(transport, builder)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    async def _execute(self, descriptor: RequestDescriptor, shape: Any) -> Any:
        log_event("request_sent", level="DEBUG", method=descriptor.method, url=descriptor.url)
        stage = "send"
        try:
            envelope = await self._transport.send(descriptor)
            stage = "validate"
            content = validate(envelope)
            stage = "decode"
            result = decode(content, shape)
        except TodoClientError as exc:
            log_event(
                "request_failed",
                level="WARNING",
                method=descriptor.method,
                url=descriptor.url,
                stage=stage,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise
        log_event(
            "request_completed",
            level="DEBUG",
            method=descriptor.method,
            url=descriptor.url,
            status_code=envelope.status_code,
        )
        return result

    async def create_user(self, user: User) -> CreateUserResponse:
        return await self._execute(self._builder.build_create_user(user), CreateUserResponse)

    async def login(self, email: str, password: str) -> Token:
        return await self._execute(self._builder.build_login(email, password), Token)

    async def post_todo(self, token: str, todo: Todo) -> Todo:
        return await self._execute(self._builder.build_post_todo(token, todo), Todo)

    async def get_todos(self, token: str) -> list[Todo]:
        return await self._execute(self._builder.build_get_todos(token), list[Todo])

    async def delete_todo(self, token: str, todo_id: int) -> Todo:
        return await self._execute(self._builder.build_delete_todo(token, todo_id), Todo)
