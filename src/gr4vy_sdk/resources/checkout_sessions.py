"""Checkout sessions resource for Gr4vy SDK."""
from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from ..http.response import Gr4vyTypedResponse
from ..models.checkout_session import Gr4vyTokenizeResponse
from ..urls import checkout_session_fields_path
from ..utils.error_handler import Completion, handle_callback
from .base import AsyncBaseResource

T = TypeVar("T")

_CONTEXT = "CheckoutSessions.tokenize"


class AsyncCheckoutSessionsResource(AsyncBaseResource):
    """``PUT /checkout/sessions/{id}/fields``.

    The endpoint usually answers with an empty body; when the body is empty or
    not JSON, a default :class:`Gr4vyTokenizeResponse` is returned and the raw
    body is kept on the typed response.
    """

    async def tokenize(
        self, checkout_session_id: str, request: Any
    ) -> Gr4vyTypedResponse[Gr4vyTokenizeResponse]:
        """Store payment method data against a checkout session.

        Raises:
            BadURL: if ``checkout_session_id`` is empty
            Gr4vyError: on any other failure
        """
        return await self._put(
            checkout_session_fields_path(checkout_session_id),
            request,
            Gr4vyTokenizeResponse,
            default=Gr4vyTokenizeResponse,
            context=_CONTEXT,
        )

    async def tokenize_as(
        self,
        checkout_session_id: str,
        request: Any,
        response_type: Type[T],
        default: Optional[Any] = None,
    ) -> Gr4vyTypedResponse[T]:
        """Like :meth:`tokenize` but decodes into ``response_type``.

        ``default`` builds the value used when the body is empty or not JSON;
        without it such a body raises ``DecodingError``.
        """
        return await self._put(
            checkout_session_fields_path(checkout_session_id),
            request,
            response_type,
            default=default,
            context=_CONTEXT,
        )

    def tokenize_callback(
        self, checkout_session_id: str, request: Any, completion: Completion
    ) -> Any:
        async def run() -> Gr4vyTypedResponse[Gr4vyTokenizeResponse]:
            return await self.tokenize(checkout_session_id, request)

        return handle_callback(_CONTEXT, run, completion)
