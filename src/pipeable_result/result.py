"""Result primitives: a tagged union of ``Success`` and ``Failure``.

A Result replaces raising with returning. ``Success`` carries a value,
``Failure`` carries a structured error with a string discriminant (see
``pipeable_result.tags``). Both variants are frozen; every transformation
produces a new Result.

Usage:
    result = fail({"tag": "NotFound", "id": 3})

    result.unwrap(lambda err: None)                 # catch-all
    result.unwrap(NotFound=lambda err: None)        # per discriminant
    result.match(Success=render, NotFound=missing)  # exhaustive

    match result:
        case Success(value):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from inspect import isawaitable
import logging
from typing import TYPE_CHECKING, Any, Generic, Never, TypeAlias, TypeGuard, TypeVar

from pipeable_result.errors import (
    InvalidAccessError,
    MalformedErrorError,
    PendingPayloadError,
    UnhandledErrorCaseError,
)
from pipeable_result.tags import CATCH_ALL, SUCCESS_CASE, describe_error, error_tag

if TYPE_CHECKING:
    from pipeable_result.config import Settings

log = logging.getLogger(__name__)

Handler: TypeAlias = Callable[[Any], Any]
Cases: TypeAlias = Mapping[str, Handler]

T = TypeVar("T")
E = TypeVar("E")


def _merge_cases(cases: Cases | None, handlers: dict[str, Handler]) -> dict[str, Handler]:
    merged: dict[str, Handler] = dict(cases) if cases is not None else {}
    merged.update(handlers)
    return merged


def _missing(tag: str, cases: Mapping[str, Handler], *, hint: str) -> Never:
    log.debug("No handler for %r among %s", tag, sorted(cases))
    raise UnhandledErrorCaseError(tag, cases.keys(), hint=hint)


class Result(ABC, Generic[T, E]):
    """Outcome of an operation: either ``Success`` or ``Failure``.

    Construct through ``succeed``/``fail``/``safe`` rather than directly.
    """

    __slots__ = ()

    @abstractmethod
    def is_success(self) -> bool:
        """Return True for a ``Success``."""

    @abstractmethod
    def is_failure(self) -> bool:
        """Return True for a ``Failure``."""

    @abstractmethod
    def value(self) -> T:
        """Return the held value."""
        """Return the success value; raise ``InvalidAccessError`` on a Failure."""

    @abstractmethod
    def error(self) -> E | None:
        """Return the error of a Failure, or None for a Success."""

    @abstractmethod
    def inspect(self) -> str:
        """Return a diagnostic rendering such as ``Success(3)``."""

    def unwrap(
        self,
        handler: Callable[[E], T] | Cases | None = None,
        /,
        **handlers: Handler,
    ) -> T:
        """Extract the value, turning a failure into a value via a handler.

        ``handler`` is either a single function applied to any error, or a
        mapping from discriminant to function. Keyword arguments extend the
        mapping. In mapping mode the ``"err"`` key serves as a fallback for
        discriminants without their own entry.

        Raises:
            UnhandledErrorCaseError: No handler applies to the error.
        """
        if self.is_success():
            return self.value()

        err = self.error()
        if callable(handler) and not isinstance(handler, Mapping):
            return handler(err)

        cases = _merge_cases(handler, handlers)
        tag = error_tag(err) or ""
        fn = cases.get(tag) or cases.get(CATCH_ALL)
        if fn is None:
            _missing(
                tag,
                cases,
                hint=f"Add a {tag!r} handler or an {CATCH_ALL!r} fallback to unwrap().",
            )
        return fn(err)

    def match(self, cases: Cases | None = None, /, **handlers: Handler) -> Any:
        """Dispatch to the ``Success`` case or to the case named by the error tag.

        The selected handler's return value is passed back untouched: a
        Result, a plain value, or an awaitable.

        Raises:
            UnhandledErrorCaseError: The ``Success`` case or the case for
                the actual discriminant is missing.
        """
        merged = _merge_cases(cases, handlers)
        if SUCCESS_CASE not in merged:
            _missing(
                SUCCESS_CASE,
                merged,
                hint="match() needs a 'Success' case; use match_errors() to handle failures only.",
            )
        if self.is_success():
            return merged[SUCCESS_CASE](self.value())
        return self._dispatch_error(merged)

    def match_errors(self, cases: Cases | None = None, /, **handlers: Handler) -> Any:
        """Dispatch a Failure by discriminant; return a Success unchanged."""
        if self.is_success():
            return self
        return self._dispatch_error(_merge_cases(cases, handlers))

    def _dispatch_error(self, cases: dict[str, Handler]) -> Any:
        err = self.error()
        tag = error_tag(err) or ""
        fn = cases.get(tag)
        if fn is None:
            _missing(tag, cases, hint=f"Add a case for {tag!r}.")
        return fn(err)

    def pipe(self, *operators: Callable[[Any], Any], settings: Settings | None = None) -> Any:
        """Thread this Result through ``operators``; see ``pipeable_result.pipeline.pipe``."""
        from pipeable_result.pipeline import pipe

        return pipe(self, *operators, settings=settings)

    def __str__(self) -> str:
        return self.inspect()


@dataclass(frozen=True, slots=True, repr=False)
class Success(Result[T, Any]):
    """A successful outcome holding a value (``None`` for a void success)."""

    _value: T

    def __post_init__(self) -> None:
        if isawaitable(self._value):
            raise PendingPayloadError(
                "Success cannot hold an awaitable",
                hint="Await the value first, or return it from a map()/chain() callback.",
            )

    def is_success(self) -> bool:
        """Return True."""
        return True

    def is_failure(self) -> bool:
        """Return False."""
        return False

    def value(self) -> T:
        """Return the held value."""
        return self._value

    def error(self) -> None:
        """Return None; a Success carries no error."""
        return None

    def inspect(self) -> str:
        """Render as ``Success(<repr>)``."""
        return f"Success({self._value!r})"

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result[Any, E]):
    """A failed outcome holding a structured, tagged error."""

    _error: E

    def __post_init__(self) -> None:
        if isawaitable(self._error):
            raise PendingPayloadError(
                "Failure cannot hold an awaitable",
                hint="Await the error first, or return it from a map_err() callback.",
            )
        tag = error_tag(self._error)
        if tag is None:
            raise MalformedErrorError(
                f"Failure error must carry a string 'tag' discriminant, got {self._error!r}",
                hint="Use a TaggedError subclass, a mapping with a 'tag' key, or fail(tag, message).",
            )
        if tag == SUCCESS_CASE:
            raise MalformedErrorError(
                f"{SUCCESS_CASE!r} is reserved for the success case and cannot tag an error",
                hint="Rename the error tag, e.g. 'SuccessRejected'.",
            )

    def is_success(self) -> bool:
        """Return False."""
        return False

    def is_failure(self) -> bool:
        """Return True."""
        return True

    def value(self) -> Never:
        """Refuse access; a Failure has no value."""
        raise InvalidAccessError(
            f"Cannot get value from Failure: {describe_error(self._error)}",
            hint="Check is_success() first, or use unwrap()/match().",
        )

    def error(self) -> E:
        """Return the tagged error."""
        return self._error

    def inspect(self) -> str:
        """Render as ``Failure(<tag>: <fields>)``."""
        return f"Failure({describe_error(self._error)})"

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


def is_result(candidate: Any) -> TypeGuard[Result[Any, Any]]:
    """Return True when ``candidate`` is a ``Success`` or ``Failure``."""
    return isinstance(candidate, Result)
