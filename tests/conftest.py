from __future__ import annotations

import asyncio

import pytest

from todo_client.application.todo_api import TodoApiClient
from todo_client.domain.messages import RequestDescriptor, ResponseEnvelope
from todo_client.domain.models import Todo, User
from todo_client.domain.request_builders import RequestBuilder
from todo_client.infrastructure.http.stub_transport import StubTransport

BASE_URL = "http://localhost:8080"
AUTHORIZATION = "ZW1haWw6cGFzc3dvcmQ="

CREATE_USER_RESPONSE = b"""
    { "id": 1,
      "email": "email",
      "name": "name"}
"""

TOKEN_RESPONSE = b"""
{
    "string": "mytoken"
}
"""

TODO_RESPONSE = b"""
{
    "id": 1,
    "title": "test"
}
"""

TODOS_RESPONSE = b"""
[{
    "id": 1,
    "title": "test"
},
{
    "id": 2,
    "title": "test 2"
}]
"""


class BlockingTransport:
    """Transport whose send() waits until cancelled; records that it was entered."""

    def __init__(self) -> None:
        self.entered = asyncio.Event()
        self.cancelled = False
        self.closed = False

    async def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        self.entered.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        raise AssertionError("unreachable")

    async def close(self) -> None:
        self.closed = True


class FailingCloseTransport(StubTransport):
    async def close(self) -> None:
        raise RuntimeError("close exploded")


@pytest.fixture()
def user() -> User:
    return User(name="name", email="email", password="password", verify_password="password")


@pytest.fixture()
def todo() -> Todo:
    return Todo(id=1, title="test1")


@pytest.fixture()
def builder() -> RequestBuilder:
    return RequestBuilder(BASE_URL)


@pytest.fixture()
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture()
def api_client(stub_transport: StubTransport, builder: RequestBuilder) -> TodoApiClient:
    return TodoApiClient(stub_transport, builder)
