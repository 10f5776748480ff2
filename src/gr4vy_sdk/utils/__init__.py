"""Utilities for Gr4vy SDK."""
from .error_handler import Completion, convert_exception, handle_async, handle_callback

__all__ = ["Completion", "convert_exception", "handle_async", "handle_callback"]
