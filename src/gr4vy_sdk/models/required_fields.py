"""Required-field flags returned with card details and payment options."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import ConfigDict, model_serializer

from .base import Gr4vyModel

_KNOWN_KEYS = frozenset(
    {
        "email_address",
        "tax_id",
        "first_name",
        "last_name",
        "phone_number",
        "account_number",
        "address",
    }
)


class Gr4vyAddressRequiredFields(Gr4vyModel):
    """Which address lines the buyer has to provide.

    ``organization``, ``line2`` and ``state_code`` are only written out when
    they are ``True``.
    """

    organization: Optional[bool] = None
    house_number_or_name: Optional[bool] = None
    line1: Optional[bool] = None
    line2: Optional[bool] = None
    postal_code: Optional[bool] = None
    city: Optional[bool] = None
    state: Optional[bool] = None
    state_code: Optional[bool] = None
    country: Optional[bool] = None

    @model_serializer(mode="wrap")
    def _drop_false_optional_lines(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        for key in ("organization", "line2", "state_code"):
            if data.get(key) is False:
                del data[key]
        return data


class Gr4vyRequiredFields(Gr4vyModel):
    """Required-field flags.

    Boolean keys the SDK does not know yet are kept and can be read with
    :meth:`get_field` or ``fields["some_key"]``.
    """

    model_config = ConfigDict(extra="allow")

    email_address: Optional[bool] = None
    tax_id: Optional[bool] = None
    first_name: Optional[bool] = None
    last_name: Optional[bool] = None
    address: Optional[Gr4vyAddressRequiredFields] = None
    phone_number: Optional[bool] = None
    account_number: Optional[bool] = None

    @property
    def additional_fields(self) -> dict[str, bool]:
        extra = self.model_extra or {}
        return {
            key: value
            for key, value in extra.items()
            if key not in _KNOWN_KEYS and isinstance(value, bool)
        }

    def get_field(self, key: str) -> Optional[bool]:
        """Return the flag for ``key``, known or additional."""
        if key in _KNOWN_KEYS and key != "address":
            return getattr(self, key)
        return self.additional_fields.get(key)

    def __getitem__(self, key: str) -> Optional[bool]:
        return self.get_field(key)

    @property
    def is_empty(self) -> bool:
        return (
            all(getattr(self, key) is None for key in _KNOWN_KEYS)
            and not self.additional_fields
        )
