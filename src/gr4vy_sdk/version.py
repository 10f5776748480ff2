"""SDK identity used in outgoing request headers."""
from __future__ import annotations

import platform

__version__ = "0.1.0"

SDK_NAME = "Gr4vy-Python"


def user_agent() -> str:
    """Return the User-Agent header value, e.g. ``Gr4vy-Python/0.1.0 (Python 3.12.1)``."""
    return f"{SDK_NAME}/{__version__} (Python {platform.python_version()})"
