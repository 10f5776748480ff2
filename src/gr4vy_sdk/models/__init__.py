"""Gr4vy SDK Models."""
from .base import Gr4vyModel, Gr4vyRequestModel
from .errors import (
    ApiErrorResponse,
    BadURL,
    DecodingError,
    Gr4vyError,
    Gr4vyErrorDetail,
    HttpError,
    InvalidGr4vyId,
    NetworkError,
)
from .required_fields import Gr4vyAddressRequiredFields, Gr4vyRequiredFields
from .payment_options import (
    Gr4vyPaymentOption,
    Gr4vyPaymentOptionCartItem,
    Gr4vyPaymentOptionRequest,
    PaymentOptionsWrapper,
)
from .card_details import Gr4vyCardDetails, Gr4vyCardDetailsRequest, Gr4vyCardDetailsResponse
from .payment_methods import (
    Gr4vyBuyersPaymentMethod,
    Gr4vyBuyersPaymentMethods,
    Gr4vyBuyersPaymentMethodsRequest,
    Gr4vyBuyersPaymentMethodsResponse,
    Gr4vyOrderBy,
    Gr4vySortBy,
)
from .checkout_session import (
    Card,
    ClickToPay,
    Gr4vyCheckoutSessionRequest,
    Gr4vyPaymentMethod,
    Gr4vyTokenizeResponse,
    Id,
)

__all__ = [
    "Gr4vyModel",
    "Gr4vyRequestModel",
    # Errors
    "Gr4vyError",
    "Gr4vyErrorDetail",
    "ApiErrorResponse",
    "InvalidGr4vyId",
    "BadURL",
    "HttpError",
    "NetworkError",
    "DecodingError",
    # Required fields
    "Gr4vyRequiredFields",
    "Gr4vyAddressRequiredFields",
    # Payment options
    "Gr4vyPaymentOption",
    "Gr4vyPaymentOptionCartItem",
    "Gr4vyPaymentOptionRequest",
    "PaymentOptionsWrapper",
    # Card details
    "Gr4vyCardDetails",
    "Gr4vyCardDetailsRequest",
    "Gr4vyCardDetailsResponse",
    # Payment methods
    "Gr4vyBuyersPaymentMethod",
    "Gr4vyBuyersPaymentMethods",
    "Gr4vyBuyersPaymentMethodsRequest",
    "Gr4vyBuyersPaymentMethodsResponse",
    "Gr4vyOrderBy",
    "Gr4vySortBy",
    # Checkout sessions
    "Card",
    "ClickToPay",
    "Id",
    "Gr4vyPaymentMethod",
    "Gr4vyCheckoutSessionRequest",
    "Gr4vyTokenizeResponse",
]
