"""Thread-safe holder of the current ``Gr4vySetup``.

Readers take the published reference without locking. Writers serialize
through a single lock, derive the replacement from the most recently
published value and publish it with one reference assignment, so concurrent
``replace_token`` / ``replace_merchant_id`` calls never lose each other's
update and no reader ever sees a half-updated setup.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional

from .config import Gr4vySetup
from .log import get_logger

logger = get_logger(__name__)


class SessionHolder:
    """Holds exactly one current ``Gr4vySetup``.

    Args:
        setup: The initial, already validated setup
    """

    def __init__(self, setup: Gr4vySetup) -> None:
        if not isinstance(setup, Gr4vySetup):
            raise TypeError(f"expected Gr4vySetup, got {type(setup).__name__}")
        self._setup = setup
        self._lock = threading.Lock()

    def current(self) -> Gr4vySetup:
        """Return the most recently published setup."""
        return self._setup

    def update(self, change: Callable[[Gr4vySetup], Gr4vySetup]) -> Gr4vySetup:
        """Apply ``change`` to the latest setup and publish the result atomically.

        ``change`` runs while the lock is held and must not perform I/O.
        """
        with self._lock:
            updated = change(self._setup)
            if not isinstance(updated, Gr4vySetup):
                raise TypeError(f"expected Gr4vySetup, got {type(updated).__name__}")
            self._setup = updated
        return updated

    def replace_token(self, token: Optional[str]) -> Gr4vySetup:
        updated = self.update(lambda setup: setup.with_token(token))
        logger.debug("Token replaced")
        return updated

    def replace_merchant_id(self, merchant_id: Optional[str]) -> Gr4vySetup:
        updated = self.update(lambda setup: setup.with_merchant_id(merchant_id))
        logger.debug("Merchant ID replaced")
        return updated

    def replace_timeout(self, timeout: float) -> Gr4vySetup:
        updated = self.update(lambda setup: setup.with_timeout(timeout))
        logger.debug("Timeout replaced with %ss", timeout)
        return updated


__all__ = ["SessionHolder"]
