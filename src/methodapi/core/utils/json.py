"""JSON codec for request bodies and response payloads.

Decoding is driven by the declared type of the body parameter through a
pydantic ``TypeAdapter``. Encoding uses pydantic-core directly so that
Pydantic models, dataclasses, enums and plain containers serialize without
a declared type.
"""

import inspect
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from ...runtime.exceptions import BadRequestError, EncodingError, UnsupportedBodyType


def body_adapter(annotation: Any) -> TypeAdapter:
    """Build the decoder for a body parameter annotation.

    Args:
        annotation: Declared parameter type. A missing annotation decodes to
            plain JSON values.

    Returns:
        TypeAdapter validating JSON into the annotated type.

    Raises:
        UnsupportedBodyType: If pydantic cannot build a schema for the type.
    """
    if annotation is inspect.Parameter.empty:
        annotation = Any
    try:
        return TypeAdapter(annotation)
    except (PydanticSchemaGenerationError, TypeError) as e:
        raise UnsupportedBodyType(
            f"Cannot decode request body into {annotation!r}: {e}"
        ) from e


def decode_json(adapter: TypeAdapter, data: bytes) -> Any:
    """Decode a request body into a freshly allocated value.

    Decoding is strict: JSON strings are not coerced into numbers or booleans.

    Raises:
        BadRequestError: If the body is not valid JSON for the adapter's type.
    """
    try:
        return adapter.validate_json(data, strict=True)
    except ValidationError as e:
        raise BadRequestError(str(e)) from e


def encode_json(obj: Any) -> bytes:
    """Encode a payload as compact JSON bytes.

    Raises:
        EncodingError: If the object (or something inside it) has no JSON form,
            including NaN and infinite floats.
    """
    try:
        return to_json(obj, inf_nan_mode="strict")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise EncodingError(str(e)) from e
