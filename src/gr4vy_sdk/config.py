"""Configuration surface for the Gr4vy SDK.

``Gr4vySetup`` is the immutable snapshot every request reads. ``Gr4vySettings``
loads the same values from ``GR4VY_*`` environment variables or a ``.env``
file.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.errors import InvalidGr4vyId

DEFAULT_TIMEOUT = 30.0


class Gr4vyServer(str, Enum):
    """Gr4vy server environment.

    - ``SANDBOX``: ``https://api.sandbox.{id}.gr4vy.app``
    - ``PRODUCTION``: ``https://api.{id}.gr4vy.app``
    """

    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @classmethod
    def from_value(cls, value: str) -> Optional["Gr4vyServer"]:
        """Return the server for ``value`` or None if it is not recognized."""
        for server in cls:
            if server.value == value:
                return server
        return None


@dataclass(frozen=True)
class Gr4vySetup:
    """Credentials and environment used for every request.

    Instances are immutable; the ``with_*`` helpers return new values.

    Raises:
        InvalidGr4vyId: if ``gr4vy_id`` is empty or blank
    """

    gr4vy_id: str
    token: Optional[str] = None
    merchant_id: Optional[str] = None
    server: Gr4vyServer = Gr4vyServer.SANDBOX
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.gr4vy_id, str) or not self.gr4vy_id.strip():
            raise InvalidGr4vyId()

    @property
    def instance(self) -> str:
        """Host segment of the API URL."""
        if self.server == Gr4vyServer.SANDBOX:
            return f"sandbox.{self.gr4vy_id}"
        return self.gr4vy_id

    def with_token(self, token: Optional[str]) -> "Gr4vySetup":
        return replace(self, token=token)

    def with_merchant_id(self, merchant_id: Optional[str]) -> "Gr4vySetup":
        return replace(self, merchant_id=merchant_id)

    def with_timeout(self, timeout: float) -> "Gr4vySetup":
        return replace(self, timeout=timeout)

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"Gr4vySetup(gr4vy_id={self.gr4vy_id!r}, token={token!r}, "
            f"merchant_id={self.merchant_id!r}, server={self.server.value!r}, "
            f"timeout={self.timeout!r})"
        )


class Gr4vySettings(BaseSettings):
    """SDK settings read from the environment.

    Variables: ``GR4VY_ID``, ``GR4VY_TOKEN``, ``GR4VY_MERCHANT_ID``,
    ``GR4VY_SERVER``, ``GR4VY_TIMEOUT`` and ``GR4VY_DEBUG_MODE``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GR4VY_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    gr4vy_id: str = Field(default="", validation_alias="GR4VY_ID")
    token: Optional[str] = None
    merchant_id: Optional[str] = None
    server: Gr4vyServer = Gr4vyServer.SANDBOX
    timeout: float = DEFAULT_TIMEOUT
    debug_mode: bool = False

    @field_validator("server", mode="before")
    @classmethod
    def parse_server(cls, v):
        """Accept the server name in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    def to_setup(self) -> Gr4vySetup:
        """Build the immutable setup, validating the gr4vy id."""
        return Gr4vySetup(
            gr4vy_id=self.gr4vy_id,
            token=self.token or None,
            merchant_id=self.merchant_id or None,
            server=self.server,
            timeout=self.timeout,
        )


__all__ = [
    "DEFAULT_TIMEOUT",
    "Gr4vyServer",
    "Gr4vySetup",
    "Gr4vySettings",
]
