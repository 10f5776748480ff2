"""Endpoint URLs for the Gr4vy API."""
from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

from .config import Gr4vySetup
from .models.errors import BadURL

PAYMENT_OPTIONS_PATH = "/payment-options"
CARD_DETAILS_PATH = "/card-details"
BUYERS_PAYMENT_METHODS_PATH = "/buyers/payment-methods"
CHECKOUT_SESSION_FIELDS_PATH = "/checkout/sessions/{checkout_session_id}/fields"


def api_base_url(setup: Gr4vySetup) -> str:
    """``https://api.{instance}.gr4vy.app`` for ``setup``."""
    if not setup.gr4vy_id:
        raise BadURL("Gr4vy ID is empty")
    return f"https://api.{setup.instance}.gr4vy.app"


def build_url(
    setup: Gr4vySetup,
    path: str,
    query: Optional[Mapping[str, Any]] = None,
) -> str:
    """Join the API host for ``setup`` with ``path`` and an optional query."""
    if not path.startswith("/"):
        path = "/" + path
    url = api_base_url(setup) + path
    if query:
        params = [(key, value) for key, value in query.items() if value is not None]
        if params:
            url = f"{url}?{urlencode(params)}"
    return url


def path_segment(value: str, name: str) -> str:
    """Percent-encode an id used inside a path, rejecting empty ids."""
    if not value or not value.strip():
        raise BadURL(f"{name} is empty")
    return quote(value, safe="")


def checkout_session_fields_path(checkout_session_id: str) -> str:
    return CHECKOUT_SESSION_FIELDS_PATH.format(
        checkout_session_id=path_segment(checkout_session_id, "Checkout session ID")
    )


def payment_options_url(setup: Gr4vySetup) -> str:
    return build_url(setup, PAYMENT_OPTIONS_PATH)


def card_details_url(setup: Gr4vySetup) -> str:
    return build_url(setup, CARD_DETAILS_PATH)


def buyers_payment_methods_url(setup: Gr4vySetup) -> str:
    return build_url(setup, BUYERS_PAYMENT_METHODS_PATH)


def checkout_session_fields_url(setup: Gr4vySetup, checkout_session_id: str) -> str:
    return build_url(setup, checkout_session_fields_path(checkout_session_id))


__all__ = [
    "BUYERS_PAYMENT_METHODS_PATH",
    "CARD_DETAILS_PATH",
    "CHECKOUT_SESSION_FIELDS_PATH",
    "PAYMENT_OPTIONS_PATH",
    "api_base_url",
    "build_url",
    "buyers_payment_methods_url",
    "card_details_url",
    "checkout_session_fields_path",
    "checkout_session_fields_url",
    "path_segment",
    "payment_options_url",
]
