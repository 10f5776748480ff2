"""
Response contracts for Gr4vy SDK.

``Gr4vyTypedResponse`` pairs the decoded model with the raw response text.
Responses whose model carries ``type`` and ``id`` are "identifiable" and get
working ``response_type`` / ``response_id`` accessors.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Gr4vyResponse(Protocol):
    """Marker for decoded response models."""


@runtime_checkable
class Gr4vyIdentifiableResponse(Gr4vyResponse, Protocol):
    """A response carrying a type tag and an id."""

    type: Optional[str]
    id: Optional[str]


def is_identifiable(value: Any) -> bool:
    """Return True when ``value`` exposes non-None ``type`` and ``id``."""
    return getattr(value, "type", None) is not None and getattr(value, "id", None) is not None


@dataclass(frozen=True)
class Gr4vyTypedResponse(Generic[T]):
    """A decoded response together with the raw body it came from.

    Attributes:
        data: The decoded model
        raw_response: Response body exactly as received. It may contain
            fields the model ignores; serialize ``data`` for a cleaned form.
    """

    data: T
    raw_response: str

    @property
    def is_identifiable(self) -> bool:
        return is_identifiable(self.data)

    @property
    def as_identifiable(self) -> Optional[Gr4vyIdentifiableResponse]:
        return self.data if is_identifiable(self.data) else None  # type: ignore[return-value]

    @property
    def response_type(self) -> Optional[str]:
        identifiable = self.as_identifiable
        return identifiable.type if identifiable is not None else None

    @property
    def response_id(self) -> Optional[str]:
        identifiable = self.as_identifiable
        return identifiable.id if identifiable is not None else None


__all__ = [
    "Gr4vyResponse",
    "Gr4vyIdentifiableResponse",
    "Gr4vyTypedResponse",
    "is_identifiable",
]
