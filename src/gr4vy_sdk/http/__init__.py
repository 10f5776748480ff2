"""HTTP layer for Gr4vy SDK: transport, factory, parsing and request execution."""
from ..result import Result
from .request import Gr4vyRequest, Gr4vyRequestModel, Gr4vyRequestWithMetadata
from .response import Gr4vyIdentifiableResponse, Gr4vyResponse, Gr4vyTypedResponse
from .parser import is_valid_json, parse, try_parse
from .transport import (
    MERCHANT_ACCOUNT_HEADER,
    Gr4vyHttpClient,
    Gr4vyHttpClientProtocol,
    Gr4vyHttpConfiguration,
    RawResponse,
)
from .factory import (
    DefaultHttpClientFactory,
    FixedClientFactory,
    Gr4vyHttpClientFactory,
    create_http_client,
    get_default_factory,
    reset_default_factory,
    resolve_factory,
    set_default_factory,
)
from .executor import RequestExecutor

__all__ = [
    "Result",
    "Gr4vyRequest",
    "Gr4vyRequestModel",
    "Gr4vyRequestWithMetadata",
    "Gr4vyResponse",
    "Gr4vyIdentifiableResponse",
    "Gr4vyTypedResponse",
    "is_valid_json",
    "parse",
    "try_parse",
    "MERCHANT_ACCOUNT_HEADER",
    "Gr4vyHttpClient",
    "Gr4vyHttpClientProtocol",
    "Gr4vyHttpConfiguration",
    "RawResponse",
    "DefaultHttpClientFactory",
    "FixedClientFactory",
    "Gr4vyHttpClientFactory",
    "create_http_client",
    "get_default_factory",
    "reset_default_factory",
    "resolve_factory",
    "set_default_factory",
    "RequestExecutor",
]
