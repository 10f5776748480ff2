"""Base models for Gr4vy SDK."""
from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict


class Gr4vyModel(BaseModel):
    """Base model with common configuration.

    Unknown keys in API payloads are ignored so that new server-side fields
    never break decoding.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to its wire dictionary (aliases, no ``None`` values)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Gr4vyModel":
        """Create model from dictionary."""
        return cls.model_validate(data)


class Gr4vyRequestModel(Gr4vyModel):
    """Base class for typed request bodies.

    Per-call fields must be declared with ``Field(default=None, exclude=True)``
    so they stay readable on the object but never reach the payload.

    Attributes:
        query_root: Name of the field whose content is folded into the query
            string when the request is sent with GET. ``None`` folds the whole
            payload.
    """

    query_root: ClassVar[Optional[str]] = None

    def to_payload(self) -> dict[str, Any]:
        return self.to_dict()

    def query_payload(self) -> dict[str, Any]:
        """Return the mapping that GET requests turn into query parameters."""
        payload = self.to_payload()
        if self.query_root is None:
            return payload
        field = type(self).model_fields[self.query_root]
        nested = payload.get(field.alias or self.query_root)
        return nested if isinstance(nested, dict) else {}
