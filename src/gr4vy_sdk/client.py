"""
Gr4vy Python SDK

Async client for the Gr4vy embedded checkout API.

Example usage:
    ```python
    from gr4vy_sdk import Gr4vyClient, Gr4vyServer, Gr4vyPaymentOptionRequest

    async with Gr4vyClient(
        gr4vy_id="acme",
        token="your-jwt",
        server=Gr4vyServer.SANDBOX,
    ) as client:
        options = await client.payment_options.list(
            Gr4vyPaymentOptionRequest(locale="en-US", currency="USD", amount=1299)
        )

        await client.tokenize(
            "checkout-session-id",
            Gr4vyCheckoutSessionRequest(
                payment_method=Card(number="4111111111111111", expiration_date="12/30")
            ),
        )
    ```
"""
from __future__ import annotations

from typing import Any, Optional, Union

import httpx

from .config import DEFAULT_TIMEOUT, Gr4vyServer, Gr4vySettings, Gr4vySetup
from .http.executor import RequestExecutor
from .http.factory import Gr4vyHttpClientFactory, resolve_factory
from .http.response import Gr4vyTypedResponse
from .log import get_logger
from .models.checkout_session import Gr4vyTokenizeResponse
from .resources.card_details import AsyncCardDetailsResource
from .resources.checkout_sessions import AsyncCheckoutSessionsResource
from .resources.payment_methods import AsyncPaymentMethodsResource
from .resources.payment_options import AsyncPaymentOptionsResource
from .session import SessionHolder
from .utils.error_handler import Completion, handle_async

logger = get_logger(__name__)


class Gr4vyClient:
    """
    Gr4vy API client.

    Provides access to the API resources:
    - payment_options: Payment options available for a checkout
    - card_details: Card metadata looked up by BIN
    - payment_methods: A buyer's stored payment methods
    - checkout_sessions: Tokenization of payment method data

    Args:
        gr4vy_id: Gr4vy instance id, e.g. ``acme``
        token: JWT sent as a bearer token
        merchant_id: Default merchant account id
        server: Sandbox or production environment
        timeout: Default request timeout in seconds (default: 30)
        debug_mode: Log request and response details
        http_client: Pre-configured ``httpx.AsyncClient``; takes precedence
            over ``http_client_factory``, is never closed by this client and
            should be used from a single event loop
        http_client_factory: Factory used to build the transport

    Raises:
        InvalidGr4vyId: if ``gr4vy_id`` is empty
    """

    def __init__(
        self,
        gr4vy_id: str,
        token: Optional[str] = None,
        merchant_id: Optional[str] = None,
        *,
        server: Union[Gr4vyServer, str] = Gr4vyServer.SANDBOX,
        timeout: float = DEFAULT_TIMEOUT,
        debug_mode: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
        http_client_factory: Optional[Gr4vyHttpClientFactory] = None,
    ):
        setup = Gr4vySetup(
            gr4vy_id=gr4vy_id,
            token=token,
            merchant_id=merchant_id,
            server=Gr4vyServer(server),
            timeout=timeout,
        )
        self.debug_mode = debug_mode
        self._session = SessionHolder(setup)

        factory: Optional[Gr4vyHttpClientFactory] = None
        if http_client is not None or http_client_factory is not None:
            factory = resolve_factory(http_client, http_client_factory)

        # Without a caller client the executor keeps one httpx client per event loop
        self._executor = RequestExecutor(
            self._session,
            factory,
            debug_mode,
            base_client=http_client,
        )

        # Initialize resources
        self.payment_options = AsyncPaymentOptionsResource(self._executor)
        self.card_details = AsyncCardDetailsResource(self._executor)
        self.payment_methods = AsyncPaymentMethodsResource(self._executor)
        self.checkout_sessions = AsyncCheckoutSessionsResource(self._executor)

        if debug_mode:
            logger.debug("Gr4vy SDK initialized with %r", setup)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Gr4vySettings] = None,
        **kwargs: Any,
    ) -> "Gr4vyClient":
        """Create a client from ``GR4VY_*`` environment variables."""
        settings = settings or Gr4vySettings()
        kwargs.setdefault("debug_mode", settings.debug_mode)
        return cls(
            settings.gr4vy_id,
            settings.token or None,
            settings.merchant_id or None,
            server=settings.server,
            timeout=settings.timeout,
            **kwargs,
        )

    @property
    def setup(self) -> Gr4vySetup:
        """The setup used by the next request."""
        return self._session.current()

    async def update_token(self, token: Optional[str]) -> None:
        """Replace the bearer token for all subsequent requests."""

        async def operation() -> None:
            self._session.replace_token(token)
            if self.debug_mode:
                logger.info("Token updated successfully")

        await handle_async("Gr4vy.update_token", operation)

    async def update_merchant_id(self, merchant_id: Optional[str]) -> None:
        """Replace the default merchant account id; None removes it."""

        async def operation() -> None:
            self._session.replace_merchant_id(merchant_id)
            if self.debug_mode:
                logger.info("Merchant ID updated successfully")

        await handle_async("Gr4vy.update_merchant_id", operation)

    async def tokenize(
        self, checkout_session_id: str, request: Any
    ) -> Gr4vyTypedResponse[Gr4vyTokenizeResponse]:
        """Store payment method data against a checkout session."""
        return await self.checkout_sessions.tokenize(checkout_session_id, request)

    def tokenize_callback(self, checkout_session_id: str, request: Any, completion: Completion) -> Any:
        return self.checkout_sessions.tokenize_callback(checkout_session_id, request, completion)

    async def aclose(self) -> None:
        """Close the transport and the HTTP client created by this client."""
        await self._executor.aclose()

    async def __aenter__(self) -> "Gr4vyClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()


__all__ = ["Gr4vyClient"]
