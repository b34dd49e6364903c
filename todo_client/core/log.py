"""Structured logging helpers on top of loguru.

Events are emitted as ``logger.bind(service_name=..., event=..., **fields)``
with an empty message; the sink format renders the bound fields.
"""
from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from todo_client.constants import SERVICE_NAME

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "{extra[service_name]} | {extra[event]} | {extra} {message}"
)

# Silent until the host application opts in via configure_logging().
logger.disable(SERVICE_NAME)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a single stderr sink for client events."""
    logger.enable(SERVICE_NAME)
    logger.remove()
    logger.configure(extra={"service_name": SERVICE_NAME, "event": "-"})
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def log_event(event: str, *, level: str = "INFO", **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).log(level, "")
