"""Tests for transport factories and the default factory registry."""
from __future__ import annotations

import httpx
import pytest

from gr4vy_sdk.http.factory import (
    DefaultHttpClientFactory,
    FixedClientFactory,
    Gr4vyHttpClientFactory,
    create_http_client,
    get_default_factory,
    reset_default_factory,
    resolve_factory,
    set_default_factory,
)
from gr4vy_sdk.http.transport import Gr4vyHttpClient


class TestDefaultFactory:
    async def test_creates_httpx_transport(self, setup):
        client = httpx.AsyncClient()
        transport = DefaultHttpClientFactory().create(setup, True, client)

        assert isinstance(transport, Gr4vyHttpClient)
        assert transport.configuration.setup is setup
        assert transport.configuration.debug_mode is True
        assert transport.configuration.client is client
        await client.aclose()

    async def test_creates_own_client_when_none_given(self, setup):
        transport = DefaultHttpClientFactory().create(setup)
        assert transport.configuration.client is not None
        await transport.aclose()
        assert transport.configuration.client.is_closed

    async def test_fixed_factory_ignores_passed_client(self, setup):
        fixed = httpx.AsyncClient()
        other = httpx.AsyncClient()
        transport = FixedClientFactory(fixed).create(setup, False, other)
        assert transport.configuration.client is fixed
        await fixed.aclose()
        await other.aclose()


class TestRegistry:
    def test_default_is_default_factory(self):
        assert isinstance(get_default_factory(), DefaultHttpClientFactory)

    def test_set_and_reset(self, stub_factory, setup):
        set_default_factory(stub_factory)
        assert get_default_factory() is stub_factory

        transport = create_http_client(setup, debug_mode=True)
        assert transport is stub_factory.created[0]
        assert stub_factory.create_calls == [(setup, True, None)]

        reset_default_factory()
        assert isinstance(get_default_factory(), DefaultHttpClientFactory)

    def test_rejects_objects_without_create(self):
        with pytest.raises(TypeError):
            set_default_factory(object())  # type: ignore[arg-type]

    def test_stub_satisfies_protocol(self, stub_factory):
        assert isinstance(stub_factory, Gr4vyHttpClientFactory)


class TestResolveFactory:
    async def test_direct_client_wins(self, stub_factory):
        client = httpx.AsyncClient()
        factory = resolve_factory(http_client=client, http_client_factory=stub_factory)
        assert isinstance(factory, FixedClientFactory)
        assert stub_factory.create_calls == []
        await client.aclose()

    def test_injected_factory_over_default(self, stub_factory):
        assert resolve_factory(http_client_factory=stub_factory) is stub_factory

    def test_falls_back_to_registry(self, stub_factory):
        set_default_factory(stub_factory)
        assert resolve_factory() is stub_factory
