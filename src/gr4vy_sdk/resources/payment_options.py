"""Payment options resource for Gr4vy SDK."""
from __future__ import annotations

from typing import Any, Type, TypeVar

from ..http.response import Gr4vyTypedResponse
from ..models.payment_options import PaymentOptionsWrapper
from ..urls import PAYMENT_OPTIONS_PATH
from ..utils.error_handler import Completion
from .base import AsyncBaseResource

T = TypeVar("T")

_CONTEXT = "PaymentOptions.list"


class AsyncPaymentOptionsResource(AsyncBaseResource):
    """``POST /payment-options``.

    Example:
        ```python
        request = Gr4vyPaymentOptionRequest(locale="en-GB", amount=1299, currency="GBP")
        response = await client.payment_options.list(request)
        for option in response.data.items:
            print(option.method, option.mode)
        ```
    """

    async def list(self, request: Any) -> Gr4vyTypedResponse[PaymentOptionsWrapper]:
        """List the payment options available for ``request``.

        Raises:
            Gr4vyError: on any failure
        """
        return await self._post(PAYMENT_OPTIONS_PATH, request, PaymentOptionsWrapper, _CONTEXT)

    async def list_as(self, request: Any, response_type: Type[T]) -> Gr4vyTypedResponse[T]:
        """Like :meth:`list` but decodes into ``response_type``."""
        return await self._post(PAYMENT_OPTIONS_PATH, request, response_type, _CONTEXT)

    def list_callback(self, request: Any, completion: Completion) -> Any:
        return self._callback(
            "POST", PAYMENT_OPTIONS_PATH, request, PaymentOptionsWrapper, completion, context=_CONTEXT
        )
