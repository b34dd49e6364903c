"""Domain models: request payloads and decoded response records.

Unknown fields in server responses are ignored; missing required fields fail
validation.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class User(_Record):
    """Outbound payload for user creation. The server is the authority on its validity."""

    name: str
    email: str
    password: str
    verify_password: str = Field(alias="verifyPassword")

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


class CreateUserResponse(_Record):
    id: int
    email: str
    name: str


class Todo(_Record):
    """A todo item. ``id`` is unset on creation requests and set by the server."""

    id: int | None = None
    title: str

    def to_json(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class Token(_Record):
    """Opaque bearer credential returned by login."""

    string: str
