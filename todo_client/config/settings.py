"""Settings for the todo API client."""
from __future__ import annotations

from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo_client.constants import DEFAULT_BASE_URL, DEFAULT_HEADERS, DEFAULT_TIMEOUT_SECONDS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    base_url: str = Field(DEFAULT_BASE_URL, validation_alias="TODO_API_BASE_URL")
    request_timeout_seconds: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        validation_alias="TODO_API_TIMEOUT_SECONDS",
    )
    # JSON object in the environment, e.g. {"Content-Type": "application/json"}
    default_headers: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_HEADERS),
        validation_alias="TODO_API_DEFAULT_HEADERS",
    )

    transport_backend: str = Field("httpx", validation_alias="TODO_API_TRANSPORT_BACKEND")
    log_level: str = Field("INFO", validation_alias="TODO_API_LOG_LEVEL")

    demo_name: str = Field("name", validation_alias="TODO_API_DEMO_NAME")
    demo_email: str = Field("email", validation_alias="TODO_API_DEMO_EMAIL")
    demo_password: str = Field("password", validation_alias="TODO_API_DEMO_PASSWORD")

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        message = f"base_url must be an absolute http(s) URL, got {value!r}"
        try:
            parsed = urlparse(value)
            parsed.port
        except ValueError as exc:
            raise ValueError(message) from exc
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(message)
        return value.rstrip("/")
