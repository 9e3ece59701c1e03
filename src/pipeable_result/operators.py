"""Curried operators for ``Result.pipe``.

Each public function takes its configuration (usually a callback) and returns
a unary operator from Result to Result. Success-oriented operators pass a
Failure through untouched, failure-oriented ones pass a Success through.

When a callback returns an awaitable, the operator returns a coroutine that
awaits it before building the next Result; ``pipe`` picks that up and runs the
remaining steps asynchronously.

    from pipeable_result.operators import chain, map, tap_err

    outcome = await load_user(user_id).pipe(
        chain(lambda user: fetch_documents(user.document_ids)),
        map(lambda docs: [d for d in docs if d.validated]),
        tap_err(lambda err: log.warning("lookup failed: %s", err)),
    )
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from inspect import isawaitable
from typing import Any, TypeAlias

from pipeable_result._settle import after, settle, to_failure, to_result
from pipeable_result.result import Cases, Handler, Result, Success

__all__ = [
    "catch_err",
    "chain",
    "chain_err",
    "map",
    "map_err",
    "match",
    "match_errors",
    "tap",
    "tap_err",
]

Operator: TypeAlias = Callable[[Result[Any, Any]], Any]




def _named(operator: Operator, kind: str, detail: str) -> Operator:
    operator.__name__ = f"{kind}({detail})"
    operator.__qualname__ = operator.__name__
    return operator


def _callable_name(fn: Any) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def map(fn: Callable[[Any], Any]) -> Operator:  # noqa: A001
    """Transform the value of a Success."""

    def _map(result: Result[Any, Any]) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
        if result.is_failure():
            return result
        outcome = fn(result.value())
        if isawaitable(outcome):
            return settle(outcome, to_result)
        return Success(outcome)

    return _named(_map, "map", _callable_name(fn))


def map_err(fn: Callable[[Any], Any]) -> Operator:
    """Transform the error of a Failure into a new error."""

    def _map_err(result: Result[Any, Any]) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
        if result.is_success():
            return result
        return settle(fn(result.error()), to_failure)

    return _named(_map_err, "map_err", _callable_name(fn))


def chain(fn: Callable[[Any], Any]) -> Operator:
    """Replace a Success with the Result produced from its value.

    The callback may return a Result (used as-is), a ``TaggedError`` (becomes
    a Failure) or any other value (becomes a Success), synchronously or as an
    awaitable.
    """

    def _chain(result: Result[Any, Any]) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
        if result.is_failure():
            return result
        return settle(fn(result.value()), to_result)

    return _named(_chain, "chain", _callable_name(fn))


def chain_err(fn: Callable[[Any], Any]) -> Operator:
    """Replace a Failure with the Result produced from its error (recovery)."""

    def _chain_err(result: Result[Any, Any]) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
        if result.is_success():
            return result
        return settle(fn(result.error()), to_result)

    return _named(_chain_err, "chain_err", _callable_name(fn))


def tap(fn: Callable[[Any], Any]) -> Operator:
    """Run a side effect with the value of a Success; keep the Result."""

    def _tap(result: Result[Any, Any]) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
        if result.is_failure():
            return result
        return after(fn(result.value()), result)

    return _named(_tap, "tap", _callable_name(fn))


def tap_err(fn: Callable[[Any], Any]) -> Operator:
    """Run a side effect with the error of a Failure; keep the Result."""

    def _tap_err(result: Result[Any, Any]) -> Result[Any, Any] | Awaitable[Result[Any, Any]]:
        if result.is_success():
            return result
        return after(fn(result.error()), result)

    return _named(_tap_err, "tap_err", _callable_name(fn))


catch_err = tap_err


def match(cases: Cases | None = None, /, **handlers: Handler) -> Operator:
    """Terminal dispatch over ``Success`` and every error tag."""

    def _match(result: Result[Any, Any]) -> Any:
        return result.match(cases, **handlers)

    return _named(_match, "match", ", ".join([*(cases or {}), *handlers]))


def match_errors(cases: Cases | None = None, /, **handlers: Handler) -> Operator:
    """Dispatch a Failure by error tag; pass a Success through."""

    def _match_errors(result: Result[Any, Any]) -> Any:
        return result.match_errors(cases, **handlers)

    return _named(_match_errors, "match_errors", ", ".join([*(cases or {}), *handlers]))

