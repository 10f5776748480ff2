"""Buyer payment methods resource for Gr4vy SDK."""
from __future__ import annotations

from typing import Any, Type, TypeVar

from ..http.response import Gr4vyTypedResponse
from ..models.payment_methods import Gr4vyBuyersPaymentMethodsResponse
from ..urls import BUYERS_PAYMENT_METHODS_PATH
from ..utils.error_handler import Completion
from .base import AsyncBaseResource

T = TypeVar("T")

_CONTEXT = "PaymentMethods.list"


class AsyncPaymentMethodsResource(AsyncBaseResource):
    """``GET /buyers/payment-methods``.

    Example:
        ```python
        request = Gr4vyBuyersPaymentMethodsRequest(
            payment_methods=Gr4vyBuyersPaymentMethods(
                buyer_external_identifier="user-123",
                sort_by=Gr4vySortBy.LAST_USED_AT,
            )
        )
        response = await client.payment_methods.list(request)
        ```
    """

    async def list(self, request: Any) -> Gr4vyTypedResponse[Gr4vyBuyersPaymentMethodsResponse]:
        return await self._get(
            BUYERS_PAYMENT_METHODS_PATH, request, Gr4vyBuyersPaymentMethodsResponse, _CONTEXT
        )

    async def list_as(self, request: Any, response_type: Type[T]) -> Gr4vyTypedResponse[T]:
        return await self._get(BUYERS_PAYMENT_METHODS_PATH, request, response_type, _CONTEXT)

    def list_callback(self, request: Any, completion: Completion) -> Any:
        return self._callback(
            "GET",
            BUYERS_PAYMENT_METHODS_PATH,
            request,
            Gr4vyBuyersPaymentMethodsResponse,
            completion,
            context=_CONTEXT,
        )
