"""
Gr4vy Python SDK

Async client for the Gr4vy embedded checkout API: payment options, card
details, buyers' stored payment methods and checkout session tokenization.
"""
import logging

from .client import Gr4vyClient
from .config import Gr4vyServer, Gr4vySettings, Gr4vySetup
from .models.errors import (
    BadURL,
    DecodingError,
    Gr4vyError,
    Gr4vyErrorDetail,
    HttpError,
    InvalidGr4vyId,
    NetworkError,
)
from .models.payment_options import (
    Gr4vyPaymentOption,
    Gr4vyPaymentOptionCartItem,
    Gr4vyPaymentOptionRequest,
    PaymentOptionsWrapper,
)
from .models.card_details import Gr4vyCardDetails, Gr4vyCardDetailsRequest, Gr4vyCardDetailsResponse
from .models.payment_methods import (
    Gr4vyBuyersPaymentMethod,
    Gr4vyBuyersPaymentMethods,
    Gr4vyBuyersPaymentMethodsRequest,
    Gr4vyBuyersPaymentMethodsResponse,
    Gr4vyOrderBy,
    Gr4vySortBy,
)
from .models.checkout_session import (
    Card,
    ClickToPay,
    Gr4vyCheckoutSessionRequest,
    Gr4vyTokenizeResponse,
    Id,
)
from .models.required_fields import Gr4vyRequiredFields
from .http.factory import (
    DefaultHttpClientFactory,
    Gr4vyHttpClientFactory,
    reset_default_factory,
    set_default_factory,
)
from .http.response import Gr4vyTypedResponse
from .http.transport import Gr4vyHttpClient, Gr4vyHttpClientProtocol, RawResponse
from .result import Result
from .session import SessionHolder
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Client
    "Gr4vyClient",
    "__version__",
    # Configuration
    "Gr4vyServer",
    "Gr4vySettings",
    "Gr4vySetup",
    "SessionHolder",
    # Errors
    "Gr4vyError",
    "Gr4vyErrorDetail",
    "InvalidGr4vyId",
    "BadURL",
    "HttpError",
    "NetworkError",
    "DecodingError",
    # Payment options
    "Gr4vyPaymentOption",
    "Gr4vyPaymentOptionCartItem",
    "Gr4vyPaymentOptionRequest",
    "PaymentOptionsWrapper",
    # Card details
    "Gr4vyCardDetails",
    "Gr4vyCardDetailsRequest",
    "Gr4vyCardDetailsResponse",
    "Gr4vyRequiredFields",
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
    "Gr4vyCheckoutSessionRequest",
    "Gr4vyTokenizeResponse",
    # HTTP
    "DefaultHttpClientFactory",
    "Gr4vyHttpClient",
    "Gr4vyHttpClientFactory",
    "Gr4vyHttpClientProtocol",
    "Gr4vyTypedResponse",
    "RawResponse",
    "Result",
    "reset_default_factory",
    "set_default_factory",
]
