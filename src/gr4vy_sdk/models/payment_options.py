"""Payment option models for Gr4vy SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import Gr4vyModel, Gr4vyRequestModel


class Gr4vyPaymentOptionCartItem(Gr4vyModel):
    """A cart line used to narrow down available payment options."""

    name: str
    quantity: int
    unit_amount: int
    discount_amount: Optional[int] = None
    tax_amount: Optional[int] = None
    external_identifier: Optional[str] = None
    sku: Optional[str] = None
    product_url: Optional[str] = None
    image_url: Optional[str] = None
    categories: Optional[list[str]] = None
    product_type: Optional[str] = None
    seller_country: Optional[str] = None


class Gr4vyPaymentOptionRequest(Gr4vyRequestModel):
    """Request for ``POST /payment-options``."""

    merchant_id: Optional[str] = Field(default=None, exclude=True)
    timeout: Optional[float] = Field(default=None, exclude=True)
    metadata: dict[str, str] = Field(default_factory=dict)
    country: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[int] = None
    locale: str
    cart_items: Optional[list[Gr4vyPaymentOptionCartItem]] = None


class Gr4vyPaymentOption(Gr4vyModel):
    """A payment option available for the checkout."""

    method: str
    mode: str
    can_store_payment_method: bool
    can_delay_capture: bool
    type: str = "payment-option"
    icon_url: Optional[str] = None
    label: Optional[str] = None


class PaymentOptionsWrapper(Gr4vyModel):
    """``{"items": [...]}`` envelope of ``POST /payment-options``."""

    items: list[Gr4vyPaymentOption]
