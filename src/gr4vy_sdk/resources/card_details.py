"""Card details resource for Gr4vy SDK."""
from __future__ import annotations

from typing import Any, Type, TypeVar

from ..http.response import Gr4vyTypedResponse
from ..models.card_details import Gr4vyCardDetailsResponse
from ..urls import CARD_DETAILS_PATH
from ..utils.error_handler import Completion
from .base import AsyncBaseResource

T = TypeVar("T")

_CONTEXT = "CardDetails.get"


class AsyncCardDetailsResource(AsyncBaseResource):
    """``GET /card-details``; the card details are sent as query parameters."""

    async def get(self, request: Any) -> Gr4vyTypedResponse[Gr4vyCardDetailsResponse]:
        return await self._get(CARD_DETAILS_PATH, request, Gr4vyCardDetailsResponse, _CONTEXT)

    async def get_as(self, request: Any, response_type: Type[T]) -> Gr4vyTypedResponse[T]:
        return await self._get(CARD_DETAILS_PATH, request, response_type, _CONTEXT)

    def get_callback(self, request: Any, completion: Completion) -> Any:
        return self._callback(
            "GET", CARD_DETAILS_PATH, request, Gr4vyCardDetailsResponse, completion, context=_CONTEXT
        )
