"""JSON codec shared by the credential cache and the token storage."""

from __future__ import annotations

import json
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from credcache.shared.errors import ErrorContext, RecordDecodeError, RecordEncodeError

RecordT = TypeVar("RecordT", bound=BaseModel)


def decode_record(
    data: str,
    model: type[RecordT],
    *,
    message: str,
    operation: str | None = None,
) -> RecordT:
    """Decode a stored JSON document into ``model``.

    Args:
        data: Raw value read from the secret store
        model: Record model to validate against
        message: Error message used if decoding fails
        operation: Operation name recorded in the error context

    Returns:
        The decoded record

    Raises:
        RecordDecodeError: If data is not JSON or does not match the model.
            The whole record is discarded; no partial record is returned.
    """
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as e:
        raise RecordDecodeError(
            message,
            ErrorContext(
                operation=operation,
                additional_data={"offset": e.pos, "reason": e.msg},
            ),
            original_error=e,
        ) from e

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise RecordDecodeError(
            message,
            ErrorContext(
                operation=operation,
                additional_data={
                    "model_name": model.__name__,
                    "validation_error_count": e.error_count(),
                },
            ),
            original_error=e,
        ) from e


def encode_record(
    record: BaseModel,
    *,
    message: str,
    operation: str | None = None,
) -> str:
    """Encode ``record`` as compact JSON in field declaration order.

    Raises:
        RecordEncodeError: If a field serializer fails.
    """
    try:
        # "<", ">" and "&" are stored unescaped; decoders read the same values
        return record.model_dump_json()
    except (PydanticSerializationError, ValueError, OverflowError) as e:
        raise RecordEncodeError(
            message,
            ErrorContext(
                operation=operation,
                additional_data={"model_name": type(record).__name__},
            ),
            original_error=e,
        ) from e
