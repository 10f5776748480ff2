"""Checkout session tokenization models for Gr4vy SDK."""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .base import Gr4vyModel, Gr4vyRequestModel


class Card(Gr4vyModel):
    """Raw card data. Number and security code never appear in ``repr``."""

    method: Literal["card"] = "card"
    number: str = Field(repr=False)
    expiration_date: str
    security_code: Optional[str] = Field(default=None, repr=False)

    @property
    def masked_number(self) -> str:
        if len(self.number) <= 4:
            return "*" * len(self.number)
        return "*" * (len(self.number) - 4) + self.number[-4:]


class ClickToPay(Gr4vyModel):
    """Click to Pay checkout reference."""

    method: Literal["click_to_pay"] = "click_to_pay"
    merchant_transaction_id: str
    src_correlation_id: str


class Id(Gr4vyModel):
    """A stored payment method referenced by id."""

    method: Literal["id"] = "id"
    id: str
    security_code: Optional[str] = Field(default=None, repr=False)


Gr4vyPaymentMethod = Annotated[Union[Card, ClickToPay, Id], Field(discriminator="method")]


class Gr4vyCheckoutSessionRequest(Gr4vyRequestModel):
    """Body of ``PUT /checkout/sessions/{id}/fields``."""

    timeout: Optional[float] = Field(default=None, exclude=True)
    payment_method: Gr4vyPaymentMethod


class Gr4vyTokenizeResponse(Gr4vyModel):
    """Outcome of a tokenization.

    The endpoint usually answers with an empty body, in which case the
    defaults are used.
    """

    status: str = "success"
    message: str = "Tokenization completed"
