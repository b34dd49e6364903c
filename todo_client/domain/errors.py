"""Client error taxonomy.

ConfigurationError signals a defect in base URL / path configuration and is
raised before any request is sent. Everything else raised by an endpoint call
derives from TodoClientError and carries the underlying cause via ``__cause__``.
"""
from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when the configured base URL and endpoint path do not form a valid URL."""


class TodoClientError(Exception):
    """Base for per-call failures (transport, validation, decoding)."""


class TransportError(TodoClientError):
    """Raised when the transport could not complete the exchange (connect, TLS, protocol)."""


class TransportTimeoutError(TransportError):
    """Raised when the request times out."""


class ResponseValidationError(TodoClientError):
    """Base for responses rejected before decoding."""


class NotHttpResponseError(ResponseValidationError):
    """Raised when the transport produced something that is not an HTTP response."""

    def __init__(self, message: str = "response is not an HTTP response") -> None:
        super().__init__(message)


class StatusCodeError(ResponseValidationError):
    """Raised when the HTTP status code is outside [200, 300)."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected http status {status_code}")
        self.status_code = status_code


class DecodeError(TodoClientError):
    """Raised when the payload is not valid JSON for the expected shape."""


class EmptyResponseError(DecodeError):
    """Raised when a response that should carry JSON has an empty body."""
