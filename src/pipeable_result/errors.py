"""Exception hierarchy for pipeable-result.

These exceptions form the programmer-error channel. Domain failures travel as
``Failure`` values and never raise; the faults below signal call sites that
misuse a Result (reading the value of a Failure, leaving an error case
unhandled, building a malformed Failure).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class PipeableResultError(Exception):
    """Base exception for all pipeable-result faults."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(PipeableResultError):
    """Settings validation or resolution failed."""


class InvalidAccessError(PipeableResultError):
    """The value of a Failure was requested."""


class UnhandledErrorCaseError(PipeableResultError):
    """No handler was supplied for the discriminant of a Failure's error."""

    def __init__(
        self,
        tag: str,
        available: Iterable[str] = (),
        *,
        hint: str | None = None,
    ) -> None:
        self.tag = tag
        self.available = tuple(available)
        known = ", ".join(repr(k) for k in self.available) or "none"
        super().__init__(
            f"No handler for error tag {tag!r} (handlers: {known})",
            hint=hint,
        )


class MalformedErrorError(PipeableResultError, TypeError):
    """A Failure was built from an error without a string discriminant."""


class PendingPayloadError(PipeableResultError, TypeError):
    """An awaitable was used as a Result payload instead of being awaited."""


class InvariantViolationError(PipeableResultError):
    """A pipeline step broke the Result contract (strict mode only)."""

    def __init__(
        self,
        message: str,
        *,
        step: int | None = None,
        operator: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.step = step
        self.operator = operator
