"""Pipeline composition: thread a Result through a sequence of operators.

Steps run strictly left to right. While every step returns a concrete
Result the pipeline stays synchronous and returns a Result. As soon as one
step returns an awaitable, the remaining steps run inside a coroutine that
awaits each outcome before applying the next operator, and ``pipe`` returns
that coroutine. Once asynchronous, a pipeline stays asynchronous.

Exceptions raised by operators propagate unchanged: an operator that raises
is a bug, not a domain failure. Use ``safe`` to turn exceptions into
Failures at the boundary.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from inspect import isawaitable
import logging
from typing import TYPE_CHECKING, Any, TypeAlias

from pipeable_result.config import default_settings
from pipeable_result.errors import InvariantViolationError
from pipeable_result.result import Result

if TYPE_CHECKING:
    from pipeable_result.config import Settings

log = logging.getLogger(__name__)

Operator: TypeAlias = Callable[[Any], Any]




def _operator_name(operator: Operator) -> str:
    return getattr(operator, "__name__", type(operator).__name__)


def _observe(
    current: Any,
    step: int,
    operators: Sequence[Operator],
    settings: Settings,
) -> None:
    """Apply trace logging and strict-mode checks to a settled step outcome."""
    operator = operators[step]
    if settings.trace:
        rendered = current.inspect() if isinstance(current, Result) else repr(current)
        log.debug("pipe step %d %s -> %s", step, _operator_name(operator), rendered)

    # The last step may be a terminal match producing any value
    if settings.validate and step < len(operators) - 1 and not isinstance(current, Result):
        raise InvariantViolationError(
            f"Step {step} ({_operator_name(operator)}) produced {type(current).__name__}; "
            "expected Success|Failure.",
            step=step,
            operator=_operator_name(operator),
            hint="Only the final step of a pipeline may return a non-Result value.",
        )


async def _run_async(
    pending: Awaitable[Any],
    start: int,
    operators: Sequence[Operator],
    settings: Settings,
) -> Any:
    current = await pending
    if start > 0:
        _observe(current, start - 1, operators, settings)
    for step in range(start, len(operators)):
        current = operators[step](current)
        if isawaitable(current):
            current = await current
        _observe(current, step, operators, settings)
    return current


def _run(initial: Any, operators: Sequence[Operator], settings: Settings) -> Any:
    if isawaitable(initial):
        return _run_async(initial, 0, operators, settings)
    current = initial
    for step, operator in enumerate(operators):
        current = operator(current)
        if isawaitable(current):
            return _run_async(current, step + 1, operators, settings)
        _observe(current, step, operators, settings)
    return current


def pipe(
    result: Result[Any, Any] | Awaitable[Result[Any, Any]],
    *operators: Operator,
    settings: Settings | None = None,
) -> Any:
    """Apply ``operators`` to ``result`` in order.

    Args:
        result: The initial Result, or an awaitable resolving to one.
        *operators: Unary operators, typically from ``pipeable_result.operators``.
        settings: Strict-mode and trace toggles; defaults to the environment.

    Returns:
        The final Result (or terminal match value) when every step completed
        synchronously; otherwise a coroutine resolving to it. With no
        operators, ``result`` itself.

    Example:
        total = succeed(2).pipe(map(lambda n: n * 10))                 # Success(20)
        total = await succeed(2).pipe(chain(fetch_price), map(round))  # async step
    """
    if not operators:
        return result
    return _run(result, operators, settings or default_settings())


def compose(*operators: Operator, settings: Settings | None = None) -> Operator:
    """Bundle ``operators`` into a single reusable operator."""

    def _composed(result: Result[Any, Any]) -> Any:
        return pipe(result, *operators, settings=settings)

    _composed.__name__ = f"compose({', '.join(_operator_name(op) for op in operators)})"
    return _composed
