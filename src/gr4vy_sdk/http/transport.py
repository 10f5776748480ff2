"""
HTTP transport for Gr4vy SDK.

``Gr4vyHttpClientProtocol`` is the single seam between the SDK and the
network. ``Gr4vyHttpClient`` implements it on top of ``httpx.AsyncClient``:
it validates the URL, sets the standard headers, serializes the body (JSON for
write verbs, query parameters for GET) and returns the raw response of every
completed exchange. Promoting error statuses to ``HttpError`` is left to the
caller.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple, runtime_checkable
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from ..config import Gr4vySetup
from ..log import get_logger
from ..models.errors import BadURL, DecodingError, NetworkError
from ..version import user_agent

logger = get_logger(__name__)

MERCHANT_ACCOUNT_HEADER = "x-gr4vy-merchant-account-id"

BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

_DANGEROUS_URL_CHARS = re.compile(r"[<>\"'{}|\\^`\[\]]")
_DANGEROUS_QUERY_CHARS = re.compile(r"[<>&\"'{}|\\^`\[\]]")


@dataclass(frozen=True)
class RawResponse:
    """Body text of a completed HTTP exchange, kept verbatim.

    Attributes:
        text: Response body
        status_code: HTTP status code
        headers: Response headers
    """

    text: str
    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class Gr4vyHttpClientProtocol(Protocol):
    """Performs one HTTP request and returns the raw response."""

    async def perform(
        self,
        url: str,
        method: str = "POST",
        body: Any = None,
        merchant_id: str = "",
        timeout: Optional[float] = None,
    ) -> RawResponse:
        """Send a request.

        Args:
            url: Absolute http(s) URL
            method: HTTP verb
            body: Request model (or mapping); folded into the query for GET
            merchant_id: Merchant account override; empty uses the setup value
            timeout: Timeout override in seconds; None uses the setup value

        Raises:
            BadURL: before any I/O if the URL or verb is unusable
            NetworkError: if the exchange does not complete
        """
        ...


@dataclass(frozen=True)
class Gr4vyHttpConfiguration:
    """Everything a transport needs: setup, debug flag and the httpx client."""

    setup: Gr4vySetup
    debug_mode: bool = False
    client: Optional[httpx.AsyncClient] = None


def sanitize_url(url: str) -> str:
    """Validate ``url`` and strip characters usable for injection.

    Raises:
        BadURL: if the URL is empty, not http(s) or malformed
    """
    if not url or not url.strip():
        raise BadURL("URL cannot be empty")
    if not url.lower().startswith(("http://", "https://")):
        raise BadURL("URL must start with http:// or https://")

    if _DANGEROUS_URL_CHARS.search(url):
        logger.warning("URL contains potentially dangerous characters, sanitizing")
        url = _DANGEROUS_URL_CHARS.sub("", url)

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise BadURL(f"Malformed URL: {e}") from e
    if not parsed.host:
        raise BadURL(f"Malformed URL: missing host in {url}")
    return url


def _sanitize_query_param(key: str, value: str) -> Tuple[str, str]:
    sanitized_key = _DANGEROUS_QUERY_CHARS.sub("", key)
    sanitized_value = _DANGEROUS_QUERY_CHARS.sub("", value)
    if sanitized_key != key or sanitized_value != value:
        logger.warning("Query parameter sanitized for security")
    return sanitized_key, sanitized_value


def _query_value(value: Any) -> Optional[str]:
    """Render a JSON scalar as a query value; None means "skip"."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value or None
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return None


def to_payload(body: Any) -> Optional[Dict[str, Any]]:
    """Return the JSON payload for ``body`` (request model, pydantic model or mapping)."""
    if body is None:
        return None
    if hasattr(body, "to_payload"):
        return body.to_payload()
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return dict(body)
    raise TypeError(f"Cannot serialize request body of type {type(body).__name__}")


def query_params(body: Any) -> List[Tuple[str, str]]:
    """Flatten ``body`` into ordered query parameters.

    Scalars become ``key=value``; nested objects are flattened one level as
    ``key.nested=value``; lists, empty strings and nulls are skipped.
    """
    if body is None:
        return []
    payload = body.query_payload() if hasattr(body, "query_payload") else to_payload(body)
    params: List[Tuple[str, str]] = []
    for key, value in (payload or {}).items():
        if isinstance(value, Mapping):
            for nested_key, nested_value in value.items():
                rendered = _query_value(nested_value)
                if rendered is not None:
                    params.append(_sanitize_query_param(f"{key}.{nested_key}", rendered))
        elif isinstance(value, (list, tuple)):
            logger.debug("Skipping complex JSON type for query param: %s", key)
        else:
            rendered = _query_value(value)
            if rendered is not None:
                params.append(_sanitize_query_param(str(key), rendered))
    return params


def build_url_with_query_params(base_url: str, body: Any) -> str:
    """Append the query folding of ``body`` to ``base_url``."""
    url = sanitize_url(base_url)
    params = query_params(body)
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"


class Gr4vyHttpClient:
    """httpx based implementation of :class:`Gr4vyHttpClientProtocol`.

    Args:
        configuration: Setup, debug flag and the httpx client to send with
        owns_client: Close the httpx client in :meth:`aclose`
    """

    def __init__(self, configuration: Gr4vyHttpConfiguration, owns_client: bool = False) -> None:
        if configuration.client is None:
            configuration = replace(configuration, client=httpx.AsyncClient())
            owns_client = True
        self._configuration = configuration
        self._owns_client = owns_client

    @property
    def configuration(self) -> Gr4vyHttpConfiguration:
        return self._configuration

    def build_headers(self, merchant_id: str = "") -> Dict[str, str]:
        """Return the headers for a request on behalf of ``merchant_id``."""
        setup = self._configuration.setup
        headers = {
            "Content-Type": "application/json",
            "User-Agent": user_agent(),
        }
        if setup.token:
            headers["Authorization"] = f"Bearer {setup.token}"
        if merchant_id:
            headers[MERCHANT_ACCOUNT_HEADER] = merchant_id
        elif setup.merchant_id:
            headers[MERCHANT_ACCOUNT_HEADER] = setup.merchant_id
        return headers

    def build_request(
        self,
        url: str,
        method: str,
        body: Any = None,
        merchant_id: str = "",
    ) -> Tuple[str, str, Dict[str, str], Optional[bytes]]:
        """Return ``(method, url, headers, content)`` for a call.

        Raises:
            BadURL: if the URL or verb is unusable
        """
        verb = (method or "").upper()
        url = sanitize_url(url)
        headers = self.build_headers(merchant_id)

        try:
            if verb == "GET":
                return verb, build_url_with_query_params(url, body), headers, None
            if verb in BODY_METHODS:
                if isinstance(body, (str, bytes)):
                    content = body.encode("utf-8") if isinstance(body, str) else body
                else:
                    payload = to_payload(body)
                    content = json.dumps(payload if payload is not None else {}).encode("utf-8")
                return verb, url, headers, content
        except TypeError as e:
            raise DecodingError(f"Failed to serialize request body: {e}") from e
        raise BadURL(f"Unsupported HTTP method: {method}")

    async def perform(
        self,
        url: str,
        method: str = "POST",
        body: Any = None,
        merchant_id: str = "",
        timeout: Optional[float] = None,
    ) -> RawResponse:
        verb, request_url, headers, content = self.build_request(url, method, body, merchant_id)
        effective_timeout = timeout if timeout is not None else self._configuration.setup.timeout

        logger.debug("%s %s", verb, request_url)
        if self._configuration.debug_mode:
            logger.debug("Request headers:")
            for name, value in headers.items():
                logger.debug("  %s: %s", name, value)
            if content is not None:
                logger.debug("Request body: %s", content.decode("utf-8", errors="replace"))
            elif verb == "GET":
                logger.debug("Request body: (converted to URL query parameters)")

        try:
            response = await self._configuration.client.request(
                verb,
                request_url,
                content=content,
                headers=headers,
                timeout=effective_timeout,
            )
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", verb, request_url, e)
            raise NetworkError(e) from e

        text = response.text
        if self._configuration.debug_mode:
            if text:
                logger.debug("Response: %s", response.status_code)
                logger.debug("Response body: %s", text)
            else:
                logger.debug("Response: %s (no content)", response.status_code)

        return RawResponse(
            text=text,
            status_code=response.status_code,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the httpx client if this transport created it."""
        if self._owns_client and not self._configuration.client.is_closed:
            await self._configuration.client.aclose()


__all__ = [
    "MERCHANT_ACCOUNT_HEADER",
    "RawResponse",
    "Gr4vyHttpClientProtocol",
    "Gr4vyHttpConfiguration",
    "Gr4vyHttpClient",
    "build_url_with_query_params",
    "query_params",
    "sanitize_url",
    "to_payload",
]
