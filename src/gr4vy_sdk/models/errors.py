"""Error models for Gr4vy SDK.

Every failure that leaves the SDK is one of the five ``Gr4vyError``
subclasses defined here. Errors compare structurally so they can be asserted
on and de-duplicated.

Example:
    ```python
    try:
        options = await client.payment_options.list(request)
    except HttpError as error:
        if error.has_details():
            print(error.get_detailed_error_message())
    except NetworkError:
        ...
    ```
"""
from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from pydantic import ConfigDict, ValidationError

from .base import Gr4vyModel


class Gr4vyErrorDetail(Gr4vyModel):
    """A single validation error detail returned by the API.

    Attributes:
        location: Where the error occurred ("body", "query", "path", ...)
        pointer: JSON pointer to the offending field, if any
        message: Human-readable description
        type: Machine-readable error type
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    location: str
    pointer: Optional[str] = None
    message: str
    type: str


class ApiErrorResponse(Gr4vyModel):
    """Structured error body returned by the API."""

    type: Optional[str] = None
    code: Optional[str] = None
    status: Optional[int] = None
    message: Optional[str] = None
    details: Optional[list[Gr4vyErrorDetail]] = None


class Gr4vyError(Exception):
    """Base exception for Gr4vy SDK.

    Subclasses list the attributes that take part in equality in ``_fields``.
    """

    _fields: tuple[str, ...] = ()

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({args})"

    def _key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "type": type(self).__name__,
                "message": self.message,
            }
        }


class InvalidGr4vyId(Gr4vyError):
    """The Gr4vy merchant identifier is empty or invalid."""

    def __init__(self) -> None:
        super().__init__(
            "The provided Gr4vy ID is invalid or empty. Please check your configuration."
        )


class BadURL(Gr4vyError):
    """A request URL could not be built or is not an HTTP(S) URL."""

    _fields = ("url",)

    def __init__(self, url: str):
        super().__init__(f"Invalid URL configuration: {url}")
        self.url = url


def _build_http_error_message(
    status_code: int,
    error_message: Optional[str],
    code: Optional[str],
    details: Sequence[Gr4vyErrorDetail],
) -> str:
    code_info = f" ({code})" if code is not None else ""
    message = error_message if error_message is not None else "Unknown error occurred"
    base = f"API request failed with status {status_code}{code_info}: {message}"
    if not details:
        return base
    count = len(details)
    suffix = "1 validation error" if count == 1 else f"{count} validation errors"
    return f"{base} ({suffix})"


class HttpError(Gr4vyError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code
        response_data: Raw response body bytes
        error_message: Message reported by the API
        code: Gr4vy error code
        details: Field level validation errors
    """

    _fields = ("status_code", "response_data", "error_message", "code", "details")

    def __init__(
        self,
        status_code: int,
        response_data: Optional[bytes] = None,
        error_message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Sequence[Gr4vyErrorDetail]] = None,
    ):
        self.status_code = status_code
        self.response_data = response_data
        self.error_message = error_message
        self.code = code
        self.details: tuple[Gr4vyErrorDetail, ...] = tuple(details or ())
        super().__init__(
            _build_http_error_message(status_code, error_message, code, self.details)
        )

    def has_details(self) -> bool:
        """Return True when field level validation errors are available."""
        return len(self.details) > 0

    def get_details_for_location(self, location: str) -> list[Gr4vyErrorDetail]:
        """Return the details reported for ``location`` ("body", "query", ...)."""
        return [detail for detail in self.details if detail.location == location]

    def get_detailed_error_message(self) -> str:
        """Return the error message followed by one line per detail.

        Example output::

            Request failed
            - body (/amount): amount must be greater than 0
        """
        if not self.details:
            return self.error_message or "Unknown error occurred"

        head = self.error_message or "Request failed"
        lines = []
        for detail in self.details:
            pointer = f" ({detail.pointer})" if detail.pointer else ""
            lines.append(f"- {detail.location}{pointer}: {detail.message}")
        return head + "\n" + "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        as_dict = super().to_dict()
        as_dict["error"].update(
            {
                "status_code": self.status_code,
                "code": self.code,
                "details": [detail.model_dump() for detail in self.details],
            }
        )
        return as_dict

    @classmethod
    def from_response(cls, status_code: int, body: Optional[str]) -> "HttpError":
        """Create HttpError from an HTTP error response body."""
        response_data = body.encode("utf-8") if body is not None else None
        if not body:
            return cls(status_code=status_code, response_data=response_data)

        try:
            api_error = ApiErrorResponse.model_validate_json(body)
        except ValidationError:
            api_error = None

        if api_error is not None and (api_error.message or api_error.code or api_error.details):
            return cls(
                status_code=status_code,
                response_data=response_data,
                error_message=api_error.message,
                code=api_error.code,
                details=api_error.details,
            )

        # Legacy error bodies: {"message": ...} or {"error": ...}
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            message = payload.get("message") or payload.get("error")
            code = payload.get("code")
            return cls(
                status_code=status_code,
                response_data=response_data,
                error_message=str(message) if message else None,
                code=str(code) if code else None,
            )

        return cls(status_code=status_code, response_data=response_data, error_message=body)


class NetworkError(Gr4vyError):
    """The request never completed (connection failure, timeout, TLS error, ...)."""

    _fields = ("exception",)

    def __init__(self, exception: BaseException):
        super().__init__(f"Network error: {exception}")
        self.exception = exception
        self.__cause__ = exception


class DecodingError(Gr4vyError):
    """The response could not be decoded into the expected type."""

    _fields = ("error_message",)

    def __init__(self, error_message: str):
        super().__init__(f"Failed to process response: {error_message}")
        self.error_message = error_message


__all__ = [
    "Gr4vyErrorDetail",
    "ApiErrorResponse",
    "Gr4vyError",
    "InvalidGr4vyId",
    "BadURL",
    "HttpError",
    "NetworkError",
    "DecodingError",
]
