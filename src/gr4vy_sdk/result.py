"""Success/failure result delivered to callback-style callers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .models.errors import Gr4vyError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: either a value or a ``Gr4vyError``.

    Example:
        ```python
        def on_done(result: Result[Gr4vyTypedResponse[PaymentOptionsWrapper]]) -> None:
            if result.is_success:
                print(result.get_or_none().data.items)
            else:
                print(result.error)
        ```
    """

    value: Optional[T] = None
    error: Optional[Gr4vyError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Gr4vyError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get_or_none(self) -> Optional[T]:
        return self.value if self.error is None else None

    def error_or_none(self) -> Optional[Gr4vyError]:
        return self.error

    def get_or_raise(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = ["Result"]
