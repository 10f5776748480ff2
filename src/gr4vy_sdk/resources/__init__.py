"""
Resources for the Gr4vy SDK.
"""
from .base import AsyncBaseResource
from .payment_options import AsyncPaymentOptionsResource
from .card_details import AsyncCardDetailsResource
from .payment_methods import AsyncPaymentMethodsResource
from .checkout_sessions import AsyncCheckoutSessionsResource

__all__ = [
    "AsyncBaseResource",
    "AsyncPaymentOptionsResource",
    "AsyncCardDetailsResource",
    "AsyncPaymentMethodsResource",
    "AsyncCheckoutSessionsResource",
]
