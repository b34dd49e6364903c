"""Decoder: JSON payload to typed records via pydantic TypeAdapter."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from todo_client.domain.errors import DecodeError, EmptyResponseError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def decode(content: bytes, shape: type[T] | Any) -> T:
    """Decode ``content`` into ``shape`` (a model class or e.g. ``list[Todo]``).

    Decoding is strict (no "1" -> 1 coercion) and extra fields are ignored.
    Malformed JSON, missing fields and type mismatches raise DecodeError with
    the pydantic error chained.
    """
    if not content or not content.strip():
        raise EmptyResponseError(f"empty response body, expected {_shape_name(shape)}")
    try:
        return _adapter(shape).validate_json(content, strict=True)
    except ValidationError as exc:
        raise DecodeError(
            f"cannot decode {_shape_name(shape)}: {exc.error_count()} error(s)"
        ) from exc


def _shape_name(shape: Any) -> str:
    if getattr(shape, "__args__", None):
        return repr(shape)
    return getattr(shape, "__name__", repr(shape))
