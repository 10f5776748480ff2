"""
Generic request execution for Gr4vy SDK.

``RequestExecutor`` is the one place where a typed request becomes an HTTP
call and the raw answer becomes a typed response. Resources only declare the
path, verb, request and response type.
"""
from __future__ import annotations

import asyncio
import threading
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

import httpx

from ..config import Gr4vySetup
from ..log import get_logger
from ..models.errors import DecodingError, HttpError
from ..session import SessionHolder
from ..urls import build_url
from ..utils.error_handler import Completion, handle_async, handle_callback
from .factory import Gr4vyHttpClientFactory, get_default_factory
from .parser import is_valid_json, parse
from .request import request_overrides
from .response import Gr4vyTypedResponse
from .transport import Gr4vyHttpClientProtocol, RawResponse

logger = get_logger(__name__)

T = TypeVar("T")


class RequestExecutor:
    """Executes requests against the API host of the current setup.

    The transport is obtained from the factory and rebuilt whenever the
    session holder publishes a new setup, the resolved factory changes or the
    call runs on a different event loop.

    Args:
        session: Holder of the current setup
        factory: Transport factory; None uses the process-wide default
        debug_mode: Passed to the factory; enables verbose request logging
        base_client: httpx client handed to the factory; when None the
            executor creates one per event loop and closes them in :meth:`aclose`
    """

    def __init__(
        self,
        session: SessionHolder,
        factory: Optional[Gr4vyHttpClientFactory] = None,
        debug_mode: bool = False,
        base_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._session = session
        self._factory = factory
        self._debug_mode = debug_mode
        self._base_client = base_client
        self._owned_clients: Dict[asyncio.AbstractEventLoop, httpx.AsyncClient] = {}
        self._lock = threading.Lock()
        self._transport: Optional[Gr4vyHttpClientProtocol] = None
        self._transport_key: Optional[Tuple[Any, ...]] = None

    @property
    def session(self) -> SessionHolder:
        return self._session

    @property
    def debug_mode(self) -> bool:
        return self._debug_mode

    @property
    def factory(self) -> Gr4vyHttpClientFactory:
        return self._factory if self._factory is not None else get_default_factory()

    def _client_for(self, loop: asyncio.AbstractEventLoop) -> httpx.AsyncClient:
        """Return the httpx client for ``loop``; call with the lock held.

        Pooled connections are bound to the loop that opened them, so an
        owned client is never shared between loops. Clients of closed loops
        are dropped since they can no longer be closed.
        """
        if self._base_client is not None:
            return self._base_client
        for stale in [known for known in self._owned_clients if known.is_closed()]:
            del self._owned_clients[stale]
            logger.debug("Dropped httpx client of a closed event loop")
        client = self._owned_clients.get(loop)
        if client is None:
            client = self._owned_clients[loop] = httpx.AsyncClient()
        return client

    def transport_for(self, setup: Gr4vySetup) -> Gr4vyHttpClientProtocol:
        """Return the transport for ``setup`` on the running event loop.

        A new transport is created on first use and whenever the setup, the
        resolved factory or the event loop differs from the cached one.
        """
        loop = asyncio.get_running_loop()
        factory = self.factory
        key = (setup, factory, loop)
        with self._lock:
            transport, transport_key = self._transport, self._transport_key
            if (
                transport is None
                or transport_key is None
                or any(new is not old for new, old in zip(key, transport_key))
            ):
                transport = factory.create(setup, self._debug_mode, self._client_for(loop))
                self._transport, self._transport_key = transport, key
        return transport

    def resolve_overrides(
        self, request: Any, setup: Gr4vySetup
    ) -> tuple[Optional[str], float]:
        """Return the effective ``(merchant_id, timeout)`` for ``request``."""
        merchant_id, timeout = request_overrides(request)
        if merchant_id is None:
            merchant_id = setup.merchant_id
        if timeout is None:
            timeout = setup.timeout
        return merchant_id, timeout

    async def send(
        self,
        method: str,
        path: str,
        request: Any = None,
        query: Optional[dict[str, Any]] = None,
    ) -> RawResponse:
        """Perform the call and promote error statuses to ``HttpError``."""
        setup = self._session.current()
        merchant_id, timeout = self.resolve_overrides(request, setup)
        url = build_url(setup, path, query)
        transport = self.transport_for(setup)

        raw = await transport.perform(
            url=url,
            method=method,
            body=request,
            merchant_id=merchant_id or "",
            timeout=timeout,
        )
        if not raw.is_success:
            error = HttpError.from_response(raw.status_code, raw.text)
            logger.error("%s %s failed: %s", method.upper(), path, error)
            raise error
        return raw

    async def execute(
        self,
        method: str,
        path: str,
        request: Any,
        response_type: Type[T],
        query: Optional[dict[str, Any]] = None,
        default: Optional[Callable[[], T]] = None,
        context: Optional[str] = None,
    ) -> Gr4vyTypedResponse[T]:
        """Execute a request and decode the answer into ``response_type``.

        Args:
            method: HTTP verb
            path: Endpoint path, e.g. ``/payment-options``
            request: Request body (folded into the query for GET)
            response_type: Model to decode into
            query: Extra query parameters for the URL
            default: Builds the response when the body is empty or not JSON
            context: Label used in logs and converted errors

        Raises:
            Gr4vyError: one of the five SDK error kinds
        """
        label = context or f"{method.upper()} {path}"

        async def operation() -> Gr4vyTypedResponse[T]:
            raw = await self.send(method, path, request, query)
            if default is not None and not is_valid_json(raw.text):
                return Gr4vyTypedResponse(default(), raw.text)
            try:
                data = parse(raw.text, response_type)
            except DecodingError:
                if default is None:
                    raise
                data = default()
            return Gr4vyTypedResponse(data, raw.text)

        return await handle_async(label, operation)

    def execute_callback(
        self,
        method: str,
        path: str,
        request: Any,
        response_type: Type[T],
        completion: Completion,
        query: Optional[dict[str, Any]] = None,
        default: Optional[Callable[[], T]] = None,
        context: Optional[str] = None,
    ) -> Any:
        """Callback flavour of :meth:`execute`; never raises.

        Returns the scheduled task or future, which resolves to the delivered
        :class:`~gr4vy_sdk.result.Result`.
        """
        label = context or f"{method.upper()} {path}"
        return handle_callback(
            label,
            lambda: self.execute(method, path, request, response_type, query, default, label),
            completion,
        )

    async def aclose(self) -> None:
        """Close the current transport and the httpx clients this executor created.

        A client belonging to another, still running loop is closed on that
        loop.
        """
        with self._lock:
            transport, self._transport, self._transport_key = self._transport, None, None
            owned, self._owned_clients = self._owned_clients, {}
        close = getattr(transport, "aclose", None)
        if close is not None:
            await close()

        current = asyncio.get_running_loop()
        for loop, client in owned.items():
            if client.is_closed or loop.is_closed():
                continue
            if loop is current:
                await client.aclose()
            elif loop.is_running():
                await asyncio.wrap_future(asyncio.run_coroutine_threadsafe(client.aclose(), loop))


__all__ = ["RequestExecutor"]
