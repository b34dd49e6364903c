"""
Integration tests for TodoApiClient against a running todo API.

Uses TODO_API_BASE_URL (default http://localhost:8080). Requires the server. Run with:
  pytest tests/integration -m integration -v
"""
from __future__ import annotations

import uuid

import pytest

from todo_client.composition import create_client_dependencies
from todo_client.config.settings import Settings
from todo_client.domain.errors import StatusCodeError
from todo_client.domain.models import Todo, User


@pytest.fixture
async def client():
    """Real TodoApiClient over httpx; transport closed after test."""
    deps = create_client_dependencies(Settings(TODO_API_TRANSPORT_BACKEND="httpx"))
    await deps.connect()
    yield deps.client
    await deps.close()


@pytest.fixture
def credentials() -> tuple[str, str]:
    return f"it-{uuid.uuid4().hex[:12]}@example.com", "integration-password"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_user_login_and_todo_round_trip(client, credentials):
    email, password = credentials
    created = await client.create_user(
        User(name="integration", email=email, password=password, verify_password=password)
    )
    assert created.email == email

    token = await client.login(email, password)
    assert token.string

    todo = await client.post_todo(token.string, Todo(title="integration todo"))
    assert todo.id is not None

    todos = await client.get_todos(token.string)
    assert any(t.id == todo.id for t in todos)

    deleted = await client.delete_todo(token.string, todo.id)
    assert deleted.id == todo.id


@pytest.mark.integration
@pytest.mark.asyncio
async def test_wrong_password_is_rejected(client, credentials):
    email, password = credentials
    await client.create_user(
        User(name="integration", email=email, password=password, verify_password=password)
    )

    with pytest.raises(StatusCodeError) as excinfo:
        await client.login(email, "wrong-" + password)

    assert 400 <= excinfo.value.status_code < 500
