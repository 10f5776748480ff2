"""
Transport factories for Gr4vy SDK.

A factory turns a setup into a transport. The module keeps one process-wide
default factory which tests can swap with :func:`set_default_factory` and
restore with :func:`reset_default_factory`.

Example:
    ```python
    class StubFactory:
        def create(self, setup, debug_mode=False, client=None):
            return StubTransport(setup)

    set_default_factory(StubFactory())
    try:
        ...
    finally:
        reset_default_factory()
    ```
"""
from __future__ import annotations

import threading
from typing import Optional, Protocol, runtime_checkable

import httpx

from ..config import Gr4vySetup
from .transport import Gr4vyHttpClient, Gr4vyHttpClientProtocol, Gr4vyHttpConfiguration


@runtime_checkable
class Gr4vyHttpClientFactory(Protocol):
    """Builds a transport for a given setup."""

    def create(
        self,
        setup: Gr4vySetup,
        debug_mode: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Gr4vyHttpClientProtocol:
        ...


class DefaultHttpClientFactory:
    """Creates :class:`Gr4vyHttpClient` instances.

    When ``client`` is None the transport creates and owns its own httpx client.
    """

    def create(
        self,
        setup: Gr4vySetup,
        debug_mode: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Gr4vyHttpClientProtocol:
        return Gr4vyHttpClient(Gr4vyHttpConfiguration(setup, debug_mode, client))


class FixedClientFactory:
    """Factory that always sends through one pre-configured httpx client.

    Used when a caller supplies their own ``httpx.AsyncClient``; the client
    passed to :meth:`create` is ignored.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    def create(
        self,
        setup: Gr4vySetup,
        debug_mode: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Gr4vyHttpClientProtocol:
        return Gr4vyHttpClient(Gr4vyHttpConfiguration(setup, debug_mode, self._client))


_lock = threading.Lock()
_default_factory: Gr4vyHttpClientFactory = DefaultHttpClientFactory()


def get_default_factory() -> Gr4vyHttpClientFactory:
    """Return the process-wide default factory."""
    return _default_factory


def set_default_factory(factory: Gr4vyHttpClientFactory) -> None:
    """Replace the process-wide default factory."""
    global _default_factory
    if not isinstance(factory, Gr4vyHttpClientFactory):
        raise TypeError(f"{type(factory).__name__} does not implement create()")
    with _lock:
        _default_factory = factory


def reset_default_factory() -> None:
    """Restore :class:`DefaultHttpClientFactory` as the default."""
    global _default_factory
    with _lock:
        _default_factory = DefaultHttpClientFactory()


def resolve_factory(
    http_client: Optional[httpx.AsyncClient] = None,
    http_client_factory: Optional[Gr4vyHttpClientFactory] = None,
) -> Gr4vyHttpClientFactory:
    """Pick the factory for a client.

    A directly supplied httpx client wins over an injected factory, which wins
    over the registry default.
    """
    if http_client is not None:
        return FixedClientFactory(http_client)
    if http_client_factory is not None:
        return http_client_factory
    return get_default_factory()


def create_http_client(
    setup: Gr4vySetup,
    debug_mode: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> Gr4vyHttpClientProtocol:
    """Create a transport through the current default factory."""
    return get_default_factory().create(setup, debug_mode, client)


__all__ = [
    "Gr4vyHttpClientFactory",
    "DefaultHttpClientFactory",
    "FixedClientFactory",
    "create_http_client",
    "get_default_factory",
    "reset_default_factory",
    "resolve_factory",
    "set_default_factory",
]
