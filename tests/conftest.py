"""
Pytest configuration and fixtures for Gr4vy SDK tests.
"""
from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from gr4vy_sdk import Gr4vyServer, Gr4vySetup
from gr4vy_sdk.http.factory import reset_default_factory
from gr4vy_sdk.http.transport import Gr4vyHttpClient, Gr4vyHttpConfiguration, RawResponse
from gr4vy_sdk.session import SessionHolder

BASE_URL = "https://api.sandbox.acme.gr4vy.app"


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    content: Optional[bytes]
    timeout: Any

    def json(self) -> Any:
        return json.loads(self.content) if self.content else None


class _LocalHTTPXMock:
    """Minimal pytest-httpx style mock that also records what was sent."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[SentRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(_MockEntry(method=method.upper(), url=url, response=response))

    def add_exception(self, exception: Exception, *, url: str, method: str = "GET") -> None:
        self._entries.append(_MockEntry(method=method.upper(), url=url, exception=exception))

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )

    @property
    def last_request(self) -> SentRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """Intercept ``httpx.AsyncClient.request`` and record every sent request."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, content=None, headers=None, timeout=None, **kwargs):
        mock.requests.append(
            SentRequest(
                method=method.upper(),
                url=str(url),
                headers=dict(headers or {}),
                content=content,
                timeout=timeout,
            )
        )
        match = mock._pop_match(method, str(url))
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    return mock


class StubTransport:
    """Zero-network transport returning queued responses."""

    def __init__(self, setup: Gr4vySetup, responses: Optional[list[Any]] = None) -> None:
        self.setup = setup
        self.responses: list[Any] = list(responses or [])
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, item: Any) -> None:
        self.responses.append(item)

    async def perform(
        self,
        url: str,
        method: str = "POST",
        body: Any = None,
        merchant_id: str = "",
        timeout: Optional[float] = None,
    ) -> RawResponse:
        self.calls.append(
            {
                "url": url,
                "method": method,
                "body": body,
                "merchant_id": merchant_id,
                "timeout": timeout,
                "token": self.setup.token,
            }
        )
        item = self.responses.pop(0) if self.responses else RawResponse("{}")
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, str):
            return RawResponse(item)
        return item

    async def aclose(self) -> None:
        self.closed = True


@dataclass
class StubFactory:
    """Factory that hands out :class:`StubTransport` instances sharing one queue."""

    responses: list[Any] = field(default_factory=list)
    created: list[StubTransport] = field(default_factory=list)
    create_calls: list[tuple[Gr4vySetup, bool, Any]] = field(default_factory=list)

    def create(self, setup: Gr4vySetup, debug_mode: bool = False, client: Any = None) -> StubTransport:
        self.create_calls.append((setup, debug_mode, client))
        transport = StubTransport(setup, self.responses)
        transport.responses = self.responses
        self.created.append(transport)
        return transport

    @property
    def calls(self) -> list[dict[str, Any]]:
        return [call for transport in self.created for call in transport.calls]


@pytest.fixture(autouse=True)
def restore_default_factory():
    """Make sure no test leaks a replaced default factory."""
    yield
    reset_default_factory()


@pytest.fixture
def setup() -> Gr4vySetup:
    return Gr4vySetup(
        gr4vy_id="acme",
        token="test-token",
        merchant_id="default-merchant",
        server=Gr4vyServer.SANDBOX,
    )


@pytest.fixture
def session(setup: Gr4vySetup) -> SessionHolder:
    return SessionHolder(setup)


@pytest.fixture
def stub_factory() -> StubFactory:
    return StubFactory()


# Mock response data
MOCK_RESPONSES = {
    "payment_options": {
        "items": [
            {
                "type": "payment-option",
                "method": "card",
                "mode": "card",
                "can_store_payment_method": True,
                "can_delay_capture": True,
                "icon_url": "https://cdn.gr4vy.app/card.svg",
                "label": "Card",
                "unknown_new_field": "ignored",
            },
            {
                "type": "payment-option",
                "method": "paypal",
                "mode": "redirect",
                "can_store_payment_method": False,
                "can_delay_capture": False,
            },
        ]
    },
    "card_details": {
        "type": "card-detail",
        "id": "visa",
        "card_type": "credit",
        "scheme": "visa",
        "country": "US",
        "required_fields": {"first_name": True, "address": {"city": True, "postal_code": True}},
    },
    "payment_methods": {
        "items": [
            {
                "type": "payment-method",
                "id": "pm_123",
                "method": "card",
                "mode": "card",
                "scheme": "visa",
                "label": "4242",
                "expiration_date": "12/30",
                "usage_count": 3,
            }
        ]
    },
    "validation_error": {
        "type": "error",
        "code": "bad_request",
        "status": 400,
        "message": "Request failed validation",
        "details": [
            {
                "location": "body",
                "pointer": "/amount",
                "message": "must be greater than 0",
                "type": "value_error",
            }
        ],
    },
}


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


class _KeepAliveHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def do_POST(self) -> None:
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        body = b'{"items": []}'
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture
def local_server(monkeypatch):
    """Serve ``{"items": []}`` over keep-alive HTTP/1.1 on a free local port."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    server = ThreadingHTTPServer(("127.0.0.1", 0), _KeepAliveHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


class _RedirectingTransport:
    def __init__(self, transport: Gr4vyHttpClient, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url

    async def perform(
        self,
        url: str,
        method: str = "POST",
        body: Any = None,
        merchant_id: str = "",
        timeout: Optional[float] = None,
    ) -> RawResponse:
        return await self._transport.perform(
            url.replace(BASE_URL, self._base_url), method, body, merchant_id, timeout
        )


@dataclass
class LocalServerFactory:
    """Real httpx transports whose requests go to ``base_url`` instead of the API host."""

    base_url: str
    clients: list[Any] = field(default_factory=list)

    def create(self, setup: Gr4vySetup, debug_mode: bool = False, client: Any = None) -> _RedirectingTransport:
        self.clients.append(client)
        transport = Gr4vyHttpClient(Gr4vyHttpConfiguration(setup, debug_mode, client))
        return _RedirectingTransport(transport, self.base_url)
