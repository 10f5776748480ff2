"""Logging helpers for Gr4vy SDK.

All SDK modules obtain their logger through :func:`get_logger`, which attaches
a :class:`SensitiveDataFilter` so that tokens, card data and other secrets are
masked before any handler sees the record. Logging itself is plain
:mod:`logging`; configure handlers and levels in the host application, e.g.
``logging.getLogger("gr4vy_sdk").setLevel(logging.DEBUG)``.
"""
from __future__ import annotations

import logging
import re
from typing import Pattern

PACKAGE_LOGGER = "gr4vy_sdk"

# Key and value separator, e.g. `token=`, `token: ` or `"token": "`
_SEP = r"[\"']?\s*[:=]\s*[\"']?"

_SENSITIVE_PATTERNS: list[tuple[Pattern[str], str]] = [
    # Authentication tokens and keys
    (re.compile(r"(?i)(authorization[\"':=\s]+bearer[\s:=]+)[a-zA-Z0-9_.\-]{3,}"), r"\1***"),
    (re.compile(r"(?i)\b(bearer[\s:=]+)[a-zA-Z0-9_.\-]{3,}"), r"\1***"),
    (re.compile(r"(?i)(token" + _SEP + r")(?!bearer)[a-zA-Z0-9_.\-]{3,}"), r"\1***"),
    (re.compile(r"(?i)(api[_\-]?key" + _SEP + r")[a-zA-Z0-9_.\-]{3,}"), r"\1***"),
    (re.compile(r"(?i)(jwt" + _SEP + r")[a-zA-Z0-9_.\-]{3,}"), r"\1***"),
    # Card numbers
    (re.compile(r"\b[0-9]{4}[\s\-]?[0-9]{4}[\s\-]?[0-9]{4}[\s\-]?[0-9]{4}\b"), "****-****-****-****"),
    (re.compile(r"\b[0-9]{4}[\s\-]?[0-9]{6}[\s\-]?[0-9]{5}\b"), "****-******-*****"),
    # CVV / CVC / security codes and PINs
    (re.compile(r"(?i)(cvv[\"':=\s]+)[0-9]{3,4}"), r"\1***"),
    (re.compile(r"(?i)(cvc[\"':=\s]+)[0-9]{3,4}"), r"\1***"),
    (re.compile(r"(?i)(security[_\s]?code[\"':=\s]+)[0-9]{3,4}"), r"\1***"),
    (re.compile(r"(?i)(pin[\"':=\s]+)[0-9]{4,8}"), r"\1***"),
    # Bank details
    (re.compile(r"(?i)(account[_\s]?number[\"':=\s]+)[0-9]{8,17}"), r"\1***"),
    (re.compile(r"(?i)(routing[_\s]?number[\"':=\s]+)[0-9]{9}"), r"\1***"),
    (re.compile(r"\b[0-9]{3}-[0-9]{2}-[0-9]{4}\b"), "***-**-****"),
    # Emails keep the first characters and the domain
    (
        re.compile(r"\b([a-zA-Z0-9._%+\-]{1,3})[a-zA-Z0-9._%+\-]*@([a-zA-Z0-9.\-]+\.[a-zA-Z]{2,})\b"),
        r"\1***@\2",
    ),
    # Passwords
    (re.compile(r"(?i)(password" + _SEP + r")[^\s,}\]]{3,}"), r"\1***"),
    (re.compile(r"(?i)(pwd" + _SEP + r")[^\s,}\]]{3,}"), r"\1***"),
    # Merchant and account ids are partially kept for debugging
    (
        re.compile(
            r"(?i)(merchant[_\-\s]?(?:account[_\-\s]?)?id" + _SEP + r")"
            r"([a-zA-Z0-9_\-]{2})([a-zA-Z0-9_\-]*)([a-zA-Z0-9_\-]{2})"
        ),
        r"\1\2***\4",
    ),
    (
        re.compile(r"(?i)(account[_\s]?id" + _SEP + r")([a-zA-Z0-9_\-]{2})([a-zA-Z0-9_\-]*)([a-zA-Z0-9_\-]{2})"),
        r"\1\2***\4",
    ),
]


def redact(message: str) -> str:
    """Mask sensitive values in ``message``."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


class SensitiveDataFilter(logging.Filter):
    """Rewrite log records so that secrets never reach a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        record.msg = redact(str(record.msg))
        return True


_FILTER = SensitiveDataFilter()


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` with secret redaction attached."""
    logger = logging.getLogger(name)
    if _FILTER not in logger.filters:
        logger.addFilter(_FILTER)
    return logger


__all__ = [
    "PACKAGE_LOGGER",
    "SensitiveDataFilter",
    "get_logger",
    "redact",
]
