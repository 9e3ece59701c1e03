"""Constructors for Results.

``safe`` is the boundary between raising code and Result-returning code: wrap
every call into a library that may raise with it, and handle the Failure
instead of the exception.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from inspect import isawaitable
import logging
from typing import Any, TypeAlias, TypeVar, overload

from pipeable_result.result import Failure, Result, Success
from pipeable_result.tags import TaggedError, UnknownError

log = logging.getLogger(__name__)

ErrorOrHandler: TypeAlias = Any | Callable[[Exception], Any]

T = TypeVar("T")
E = TypeVar("E")


@overload
def succeed() -> Success[None]: ...
@overload
def succeed(value: T) -> Success[T]: ...
def succeed(value: Any = None) -> Success[Any]:
    """Create a Success holding ``value`` (``None`` for a void success)."""
    return Success(value)


@overload
def fail(error: E) -> Failure[E]: ...
@overload
def fail(error: str, message: str) -> Failure[TaggedError]: ...
def fail(error: Any, message: str | None = None) -> Failure[Any]:
    """Create a Failure from a structured error.

    Passing a discriminant and a message builds a ``TaggedError``::

        fail({"tag": "HttpNotFound", "status": 404})
        fail("HttpNotFound", "no such media file")
    """
    if message is not None:
        return Failure(TaggedError(tag=error, message=message))
    return Failure(error)


def _failure_from(exc: Exception, error_or_handler: ErrorOrHandler | None) -> Failure[Any]:
    log.debug("safe() caught %s", type(exc).__name__, exc_info=exc)
    if error_or_handler is None:
        return Failure(UnknownError(message=str(exc), exception=exc))
    if callable(error_or_handler):
        return Failure(error_or_handler(exc))
    return Failure(error_or_handler)


async def _safe_async(
    pending: Awaitable[Any], error_or_handler: ErrorOrHandler | None
) -> Result[Any, Any]:
    try:
        value = await pending
    except Exception as exc:
        return _failure_from(exc, error_or_handler)
    return Success(value)


@overload
def safe(
    fn: Callable[[], Awaitable[T]], error_or_handler: ErrorOrHandler | None = None
) -> Awaitable[Result[T, Any]]: ...
@overload
def safe(
    fn: Callable[[], T], error_or_handler: ErrorOrHandler | None = None
) -> Result[T, Any]: ...
def safe(
    fn: Callable[[], Any], error_or_handler: ErrorOrHandler | None = None
) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
    """Run ``fn`` and capture its outcome as a Result.

    Args:
        fn: Zero-argument callable. May return a value or an awaitable.
        error_or_handler: What a raised exception becomes. ``None`` wraps it
            in ``UnknownError``; a structured error is used as-is; a callable
            receives the exception and returns the error.

    Returns:
        A Result, or a coroutine resolving to one when ``fn`` returned an
        awaitable.

    Example:
        result = safe(lambda: int(raw), {"tag": "ParseError", "raw": raw})
        result = await safe(lambda: client.fetch(url), lambda exc: NetworkDown(message=str(exc)))
    """
    try:
        outcome = fn()
    except Exception as exc:
        return _failure_from(exc, error_or_handler)
    if isawaitable(outcome):
        return _safe_async(outcome, error_or_handler)
    return Success(outcome)
