"""Demo entry point: walks the todo API once (create user, login, todo CRUD).

Configuration comes from the environment (see Settings). With
TODO_API_TRANSPORT_BACKEND=stub the flow runs against canned responses.
"""
from __future__ import annotations

import asyncio

from loguru import logger

from todo_client.composition import create_client_dependencies
from todo_client.config.settings import Settings
from todo_client.constants import EndpointPath, HttpMethod
from todo_client.core.log import configure_logging, log_event
from todo_client.domain.models import Todo, User
from todo_client.infrastructure.http.stub_transport import StubTransport


def seed_stub_responses(transport: StubTransport, settings: Settings) -> None:
    base = settings.base_url
    transport.respond(
        HttpMethod.POST,
        base + EndpointPath.USERS,
        {"id": 1, "email": settings.demo_email, "name": settings.demo_name},
    )
    transport.respond(HttpMethod.POST, base + EndpointPath.LOGIN, {"string": "stub-token"})
    transport.respond(HttpMethod.POST, base + EndpointPath.TODOS, {"id": 1, "title": "demo todo"})
    transport.respond(HttpMethod.GET, base + EndpointPath.TODOS, [{"id": 1, "title": "demo todo"}])
    transport.respond(
        HttpMethod.DELETE,
        f"{base}{EndpointPath.TODOS}/1",
        {"id": 1, "title": "demo todo"},
    )


async def run_demo(settings: Settings | None = None) -> list[Todo]:
    settings = settings or Settings()
    async with create_client_dependencies(settings) as deps:
        if isinstance(deps.transport, StubTransport):
            seed_stub_responses(deps.transport, settings)
        client = deps.client

        user = User(
            name=settings.demo_name,
            email=settings.demo_email,
            password=settings.demo_password,
            verify_password=settings.demo_password,
        )
        created = await client.create_user(user)
        log_event("user_created", user_id=created.id)

        token = await client.login(settings.demo_email, settings.demo_password)
        log_event("logged_in")

        todo = await client.post_todo(token.string, Todo(title="demo todo"))
        log_event("todo_created", todo_id=todo.id)

        todos = await client.get_todos(token.string)
        log_event("todos_listed", count=len(todos))

        if todo.id is not None:
            deleted = await client.delete_todo(token.string, todo.id)
            log_event("todo_deleted", todo_id=deleted.id)
        return todos


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    try:
        asyncio.run(run_demo(settings))
    except KeyboardInterrupt:
        log_event("demo_interrupted")
    except Exception as e:
        logger.exception("demo failed: {}", e)
        raise


if __name__ == "__main__":
    main()
