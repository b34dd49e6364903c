"""Client-level constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "todo_client"

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_SECONDS = 10.0

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "cache-control": "no-cache",
}

AUTHORIZATION_HEADER = "Authorization"


class HttpMethod:
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class EndpointPath:
    USERS = "/users"
    LOGIN = "/login"
    TODOS = "/todos"
