"""
Request contracts for Gr4vy SDK.

A request is anything that can produce its JSON wire payload. Requests that
also carry ``merchant_id`` / ``timeout`` override the client-wide defaults for
that one call; those fields are never sent on the wire.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ..models.base import Gr4vyRequestModel


@runtime_checkable
class Gr4vyRequest(Protocol):
    """Anything that can be sent as a request body."""

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-compatible wire payload."""
        ...


@runtime_checkable
class Gr4vyRequestWithMetadata(Gr4vyRequest, Protocol):
    """A request carrying per-call merchant id and timeout overrides."""

    merchant_id: Optional[str]
    timeout: Optional[float]


def request_overrides(request: Any) -> tuple[Optional[str], Optional[float]]:
    """Return the ``(merchant_id, timeout)`` overrides carried by ``request``."""
    if request is None:
        return None, None
    merchant_id = getattr(request, "merchant_id", None)
    timeout = getattr(request, "timeout", None)
    return (merchant_id or None), timeout


__all__ = [
    "Gr4vyRequest",
    "Gr4vyRequestWithMetadata",
    "Gr4vyRequestModel",
    "request_overrides",
]
