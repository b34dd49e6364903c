"""Unit tests for typed JSON decoding."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.conftest import CREATE_USER_RESPONSE, TODOS_RESPONSE, TOKEN_RESPONSE
from todo_client.domain.decoder import decode
from todo_client.domain.errors import DecodeError, EmptyResponseError
from todo_client.domain.models import CreateUserResponse, Todo, Token


def test_decode_create_user_response():
    assert decode(CREATE_USER_RESPONSE, CreateUserResponse) == CreateUserResponse(
        id=1, email="email", name="name"
    )


def test_decode_token():
    assert decode(TOKEN_RESPONSE, Token).string == "mytoken"


def test_decode_list_of_todos():
    todos = decode(TODOS_RESPONSE, list[Todo])

    assert todos == [Todo(id=1, title="test"), Todo(id=2, title="test 2")]


def test_decode_todo_without_id():
    assert decode(b'{"title": "new"}', Todo) == Todo(id=None, title="new")


def test_decode_ignores_unknown_fields():
    todo = decode(b'{"id": 3, "title": "t", "completed": false, "owner": {"id": 9}}', Todo)

    assert todo == Todo(id=3, title="t")


def test_decode_malformed_json_raises_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        decode(b"{{}", CreateUserResponse)

    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_decode_missing_required_field_raises_decode_error():
    with pytest.raises(DecodeError):
        decode(b'{"id": 1, "email": "email"}', CreateUserResponse)


def test_decode_type_mismatch_is_not_coerced():
    with pytest.raises(DecodeError):
        decode(b'{"id": "1", "title": "t"}', Todo)


def test_decode_object_where_list_expected():
    with pytest.raises(DecodeError):
        decode(b'{"id": 1, "title": "t"}', list[Todo])


def test_decode_empty_body_raises_empty_response_error():
    with pytest.raises(EmptyResponseError):
        decode(b"", Todo)
    with pytest.raises(DecodeError):
        decode(b"  \n", Todo)


def test_decoded_records_are_frozen():
    token = decode(TOKEN_RESPONSE, Token)

    with pytest.raises(ValidationError):
        token.string = "other"  # type: ignore[misc]
