"""JSON response parsing for Gr4vy SDK."""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import DecodingError, Gr4vyError
from ..result import Result

T = TypeVar("T")

EMPTY_RESPONSE_MESSAGE = "Response string is empty or blank"


@lru_cache(maxsize=None)
def _adapter(response_type: Type[T]) -> TypeAdapter[T]:
    return TypeAdapter(response_type)


def parse(response_string: str, response_type: Type[T]) -> T:
    """Decode ``response_string`` into ``response_type``.

    Unknown keys are ignored by the SDK models.

    Raises:
        DecodingError: if the text is blank, not JSON or does not match the type
    """
    if response_string is None or not response_string.strip():
        raise DecodingError(EMPTY_RESPONSE_MESSAGE)
    try:
        return _adapter(response_type).validate_json(response_string)
    except ValidationError as e:
        raise DecodingError(f"Failed to parse JSON response: {e}") from e
    except (TypeError, ValueError) as e:
        raise DecodingError(f"Invalid JSON format: {e}") from e


def try_parse(response_string: str, response_type: Type[T]) -> Result[T]:
    """Like :func:`parse` but returns a :class:`Result` instead of raising."""
    try:
        return Result.success(parse(response_string, response_type))
    except Gr4vyError as e:
        return Result.failure(e)


def is_valid_json(response_string: Any) -> bool:
    """Return True when ``response_string`` is syntactically valid JSON."""
    if not isinstance(response_string, (str, bytes)) or not response_string.strip():
        return False
    try:
        json.loads(response_string)
    except ValueError:
        return False
    return True


__all__ = [
    "EMPTY_RESPONSE_MESSAGE",
    "is_valid_json",
    "parse",
    "try_parse",
]
