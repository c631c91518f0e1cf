"""
Response decoding.

A decoder turns the raw JSON value returned by the executor into a typed
value, or raises NotionDecodeError. Decoding happens after a successful
HTTP exchange and is never retried.
"""
from typing import Any, Callable, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import NotionDecodeError

T = TypeVar("T")

Decoder = Callable[[Any], T]


def model_decoder(model_type: Type[T]) -> Decoder[T]:
    """Build a decoder validating against a pydantic model or type."""
    adapter = TypeAdapter(model_type)

    def decode(raw: Any) -> T:
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            raise NotionDecodeError(
                f"Response does not match {getattr(model_type, '__name__', model_type)}: "
                f"{e.error_count()} validation error(s)",
                payload=raw,
                cause=e,
            ) from e

    return decode
