"""Internal helpers for settling awaitables and normalizing callback returns.

Results never hold awaitables. Whenever a callback hands back an awaitable,
the operator returns a coroutine that awaits it and only then builds the
Result, so downstream steps always observe settled payloads.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from inspect import isawaitable
from typing import Any, TypeVar

from pipeable_result.errors import MalformedErrorError
from pipeable_result.result import Failure, Result, Success
from pipeable_result.tags import TaggedError

R = TypeVar("R")


def to_result(outcome: Any) -> Result[Any, Any]:
    """Normalize a callback return: Result as-is, TaggedError to Failure, else Success."""
    if isinstance(outcome, Result):
        return outcome
    if isinstance(outcome, TaggedError):
        return Failure(outcome)
    return Success(outcome)


def to_failure(outcome: Any) -> Result[Any, Any]:
    """Wrap a new error in a Failure; a returned Result is a misuse of ``map_err``."""
    if isinstance(outcome, Result):
        raise MalformedErrorError(
            f"map_err() callback must return an error, got {outcome!r}",
            hint="Return the new error itself; use chain_err() to recover with a Result.",
        )
    return Failure(outcome)


async def _settle_async(pending: Awaitable[Any], wrap: Callable[[Any], R]) -> R:
    return wrap(await pending)


def settle(outcome: Any, wrap: Callable[[Any], R]) -> R | Awaitable[R]:
    """Apply ``wrap`` now, or after awaiting when ``outcome`` is pending."""
    if isawaitable(outcome):
        return _settle_async(outcome, wrap)
    return wrap(outcome)


async def _after_async(pending: Awaitable[Any], keep: R) -> R:
    await pending
    return keep


def after(outcome: Any, keep: R) -> R | Awaitable[R]:
    """Return ``keep``, once ``outcome`` has settled if it is pending."""
    if isawaitable(outcome):
        return _after_async(outcome, keep)
    return keep
