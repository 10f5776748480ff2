"""Buyer payment method models for Gr4vy SDK."""
from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from .base import Gr4vyModel, Gr4vyRequestModel


class Gr4vySortBy(str, Enum):
    """Sort key for stored payment methods."""

    LAST_USED_AT = "last_used_at"


class Gr4vyOrderBy(str, Enum):
    """Sort direction for stored payment methods."""

    ASC = "asc"
    DESC = "desc"


class Gr4vyBuyersPaymentMethods(Gr4vyModel):
    """Filter for a buyer's stored payment methods."""

    buyer_id: Optional[str] = None
    buyer_external_identifier: Optional[str] = None
    sort_by: Optional[Gr4vySortBy] = None
    order_by: Optional[Gr4vyOrderBy] = Gr4vyOrderBy.DESC
    country: Optional[str] = None
    currency: Optional[str] = None


class Gr4vyBuyersPaymentMethodsRequest(Gr4vyRequestModel):
    """Request for ``GET /buyers/payment-methods``.

    The ``payment_methods`` filter is sent as query parameters.
    """

    query_root: ClassVar[Optional[str]] = "payment_methods"

    merchant_id: Optional[str] = Field(default=None, exclude=True)
    timeout: Optional[float] = Field(default=None, exclude=True)
    payment_methods: Gr4vyBuyersPaymentMethods


class Gr4vyBuyersPaymentMethod(Gr4vyModel):
    """A stored payment method."""

    type: Optional[str] = None
    id: Optional[str] = None
    approval_url: Optional[str] = None
    country: Optional[str] = None
    currency: Optional[str] = None
    expiration_date: Optional[str] = None
    fingerprint: Optional[str] = None
    label: Optional[str] = None
    last_replaced_at: Optional[str] = None
    method: Optional[str] = None
    mode: Optional[str] = None
    scheme: Optional[str] = None
    merchant_account_id: Optional[str] = None
    additional_schemes: Optional[list[str]] = None
    cit_last_used_at: Optional[str] = None
    cit_usage_count: Optional[int] = None
    has_replacement: Optional[bool] = None
    last_used_at: Optional[str] = None
    usage_count: Optional[int] = None


class Gr4vyBuyersPaymentMethodsResponse(Gr4vyModel):
    """List of stored payment methods."""

    items: list[Gr4vyBuyersPaymentMethod]
