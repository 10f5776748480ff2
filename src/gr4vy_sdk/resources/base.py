"""
Base resource class for Gr4vy SDK.

Resources are thin: each endpoint method names the path, verb, request and
response type and hands the work to the shared :class:`RequestExecutor`.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Type, TypeVar

from ..http.executor import RequestExecutor
from ..http.response import Gr4vyTypedResponse
from ..utils.error_handler import Completion

T = TypeVar("T")


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _executor: The request executor shared with the client
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    @property
    def debug_mode(self) -> bool:
        return self._executor.debug_mode

    async def _get(
        self,
        path: str,
        request: Any,
        response_type: Type[T],
        context: Optional[str] = None,
    ) -> Gr4vyTypedResponse[T]:
        """Make a GET request; ``request`` is sent as query parameters."""
        return await self._executor.execute("GET", path, request, response_type, context=context)

    async def _post(
        self,
        path: str,
        request: Any,
        response_type: Type[T],
        context: Optional[str] = None,
    ) -> Gr4vyTypedResponse[T]:
        """Make a POST request with ``request`` as the JSON body."""
        return await self._executor.execute("POST", path, request, response_type, context=context)

    async def _put(
        self,
        path: str,
        request: Any,
        response_type: Type[T],
        default: Optional[Callable[[], T]] = None,
        context: Optional[str] = None,
    ) -> Gr4vyTypedResponse[T]:
        """Make a PUT request with ``request`` as the JSON body."""
        return await self._executor.execute(
            "PUT", path, request, response_type, default=default, context=context
        )

    def _callback(
        self,
        method: str,
        path: str,
        request: Any,
        response_type: Type[T],
        completion: Completion,
        default: Optional[Callable[[], T]] = None,
        context: Optional[str] = None,
    ) -> Any:
        """Run a request and deliver its :class:`~gr4vy_sdk.result.Result` to ``completion``."""
        return self._executor.execute_callback(
            method, path, request, response_type, completion, default=default, context=context
        )
