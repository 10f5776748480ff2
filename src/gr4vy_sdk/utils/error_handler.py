"""
Error handling adapters shared by every SDK operation.

``handle_async`` guarantees that only ``Gr4vyError`` subclasses escape an
operation. ``handle_callback`` runs the same coroutine and hands the outcome
to a completion callback as a :class:`~gr4vy_sdk.result.Result`, so the
two call styles always agree on success and on the error kind.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import json
import threading
from typing import Awaitable, Callable, Optional, TypeVar, Union

import httpx
from pydantic import ValidationError

from ..result import Result
from ..log import get_logger
from ..models.errors import BadURL, DecodingError, Gr4vyError, NetworkError

logger = get_logger(__name__)

T = TypeVar("T")

Completion = Callable[[Result[T]], None]

_loop_lock = threading.Lock()
_background: Optional[asyncio.AbstractEventLoop] = None


def _wrapped(message: str, cause: BaseException) -> Exception:
    wrapper = Exception(message)
    wrapper.__cause__ = cause
    return wrapper


def convert_exception(exception: BaseException, context: str) -> Gr4vyError:
    """Map any exception raised inside ``context`` onto the SDK error taxonomy."""
    if isinstance(exception, Gr4vyError):
        return exception
    if isinstance(exception, httpx.TimeoutException):
        return NetworkError(_wrapped(f"Request timeout in {context}: {exception}", exception))
    if isinstance(exception, httpx.ConnectError):
        return NetworkError(_wrapped(f"Connection failed in {context}: {exception}", exception))
    if isinstance(exception, (httpx.RequestError, OSError)):
        return NetworkError(
            _wrapped(f"Network connectivity issue in {context}: {exception}", exception)
        )
    if isinstance(exception, (ValidationError, json.JSONDecodeError)):
        return DecodingError(f"JSON serialization error in {context}: {exception}")
    if isinstance(exception, ValueError):
        if "url" in str(exception).lower():
            return BadURL(f"Invalid URL in {context}: {exception}")
        return DecodingError(f"Invalid argument in {context}: {exception}")
    return NetworkError(_wrapped(f"Unexpected error in {context}: {exception}", exception))


async def handle_async(context: str, operation: Callable[[], Awaitable[T]]) -> T:
    """Await ``operation()`` and convert stray exceptions to ``Gr4vyError``.

    Cancellation is not intercepted.
    """
    try:
        return await operation()
    except Gr4vyError:
        raise
    except Exception as e:
        error = convert_exception(e, context)
        logger.error("%s failed: %s", context, error)
        raise error from e


def _background_loop() -> asyncio.AbstractEventLoop:
    """Event loop thread used for callbacks issued outside any running loop."""
    global _background
    with _loop_lock:
        if _background is None or _background.is_closed():
            loop = asyncio.new_event_loop()
            thread = threading.Thread(
                target=loop.run_forever,
                name="gr4vy-sdk-callbacks",
                daemon=True,
            )
            thread.start()
            _background = loop
        return _background


def handle_callback(
    context: str,
    operation: Callable[[], Awaitable[T]],
    completion: Completion,
) -> Union["asyncio.Task[Result[T]]", "concurrent.futures.Future[Result[T]]"]:
    """Run ``operation`` and deliver its :class:`Result` to ``completion``.

    Inside a running event loop the work is scheduled as a task on that loop;
    otherwise it runs on the SDK's background loop thread. The returned task or
    future resolves to the same result that was passed to ``completion``.
    """

    async def run() -> Result[T]:
        try:
            value = await handle_async(context, operation)
        except Gr4vyError as error:
            result: Result[T] = Result.failure(error)
        else:
            result = Result.success(value)
        completion(result)
        return result

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run_coroutine_threadsafe(run(), _background_loop())
    return loop.create_task(run())


__all__ = [
    "Completion",
    "convert_exception",
    "handle_async",
    "handle_callback",
]
