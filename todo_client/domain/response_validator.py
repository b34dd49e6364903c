"""Response validator: accepts only HTTP responses with a 2xx status."""
from __future__ import annotations

from todo_client.domain.errors import NotHttpResponseError, StatusCodeError
from todo_client.domain.messages import ResponseEnvelope

SUCCESS_STATUS = range(200, 300)


def validate(envelope: ResponseEnvelope) -> bytes:
    """Return the payload unchanged, or raise NotHttpResponseError / StatusCodeError."""
    if not isinstance(envelope, ResponseEnvelope):
        raise NotHttpResponseError(f"expected ResponseEnvelope, got {type(envelope).__name__}")
    status_code = envelope.status_code
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        raise NotHttpResponseError()
    if status_code not in SUCCESS_STATUS:
        raise StatusCodeError(status_code)
    return envelope.content
