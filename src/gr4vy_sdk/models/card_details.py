"""Card details models for Gr4vy SDK."""
from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field, ValidationError, field_validator

from .base import Gr4vyModel, Gr4vyRequestModel
from .required_fields import Gr4vyRequiredFields


class Gr4vyCardDetails(Gr4vyModel):
    """Card and transaction context used to look up card details."""

    currency: str
    amount: Optional[str] = None
    bin: Optional[str] = None
    country: Optional[str] = None
    intent: Optional[str] = None
    is_subsequent_payment: Optional[bool] = None
    merchant_initiated: Optional[bool] = None
    metadata: Optional[str] = None
    payment_method_id: Optional[str] = None
    payment_source: Optional[str] = None


class Gr4vyCardDetailsRequest(Gr4vyRequestModel):
    """Request for ``GET /card-details``.

    The ``card_details`` object is sent as query parameters.
    """

    query_root: ClassVar[Optional[str]] = "card_details"

    timeout: Optional[float] = Field(default=None, exclude=True)
    card_details: Gr4vyCardDetails


class Gr4vyCardDetailsResponse(Gr4vyModel):
    """Card details returned by the API."""

    type: Optional[str] = None
    id: str
    card_type: Optional[str] = None
    scheme: Optional[str] = None
    scheme_icon_url: Optional[str] = None
    country: Optional[str] = None
    required_fields: Optional[Gr4vyRequiredFields] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("required_fields", mode="before")
    @classmethod
    def lenient_required_fields(cls, v: Any) -> Any:
        """Drop an unreadable ``required_fields`` block instead of failing."""
        if v is None or isinstance(v, Gr4vyRequiredFields):
            return v
        try:
            return Gr4vyRequiredFields.model_validate(v)
        except ValidationError:
            return None
