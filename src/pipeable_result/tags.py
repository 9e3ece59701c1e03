"""Error discrimination convention.

Every error carried by a ``Failure`` exposes a string discriminant under the
field named by ``ERROR_TAG``. The check is structural: a mapping with a
``"tag"`` key qualifies, as does any object with a ``tag`` attribute. Matching
dispatches on that string, never on the error's class.

``TaggedError`` is the recommended base for declaring error shapes::

    @dataclass(frozen=True, kw_only=True)
    class HttpNotFound(TaggedError):
        tag: str = "HttpNotFound"
        resource: str
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Final, Protocol, TypeGuard, runtime_checkable

__all__ = [
    "CATCH_ALL",
    "ERROR_TAG",
    "SUCCESS_CASE",
    "ResultError",
    "TaggedError",
    "UnknownError",
    "describe_error",
    "error_fields",
    "error_tag",
    "is_error",
    "is_error_type",
]

ERROR_TAG: Final[str] = "tag"
SUCCESS_CASE: Final[str] = "Success"
# Fallback key accepted by ``Result.unwrap`` in mapping mode
CATCH_ALL: Final[str] = "err"


@runtime_checkable
class ResultError(Protocol):
    """Structural shape of an error object (attribute form)."""

    @property
    def tag(self) -> str: ...  # noqa: D102


@dataclass(frozen=True, kw_only=True)
class TaggedError:
    """Base class for structured errors.

    Subclasses pin their discriminant by redeclaring ``tag`` with a default.
    Returning a ``TaggedError`` from a ``chain``/``chain_err`` callback is the
    explicit way to request a Failure without writing ``fail(...)``.
    """

    tag: str
    message: str = ""


@dataclass(frozen=True, kw_only=True)
class UnknownError(TaggedError):
    """Error produced by ``safe`` when no mapping for the exception was given."""

    tag: str = "UnknownError"
    exception: BaseException | None = None


def error_tag(candidate: Any) -> str | None:
    """Return the discriminant of ``candidate`` or None when it has none."""
    if isinstance(candidate, Mapping):
        tag = candidate.get(ERROR_TAG)
    else:
        tag = getattr(candidate, ERROR_TAG, None)
    return tag if isinstance(tag, str) else None


def is_error(candidate: Any) -> TypeGuard[ResultError | Mapping[str, Any]]:
    """Return True when ``candidate`` follows the discrimination convention."""
    return error_tag(candidate) is not None


def is_error_type(candidate: Any, tag: str) -> bool:
    """Return True when ``candidate`` is an error carrying exactly ``tag``."""
    return error_tag(candidate) == tag


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def error_fields(error: Any) -> list[tuple[str, Any]]:
    """Return the non-discriminant fields of ``error`` in declaration order."""
    if isinstance(error, Mapping):
        items = list(error.items())
    elif is_dataclass(error) and not isinstance(error, type):
        items = [(f.name, getattr(error, f.name)) for f in fields(error)]
    elif isinstance(error, tuple) and hasattr(error, "_fields"):
        items = list(zip(error._fields, error, strict=True))
    elif hasattr(error, "__dict__"):
        items = list(vars(error).items())
    else:
        items = [(n, getattr(error, n)) for n in _slot_names(type(error)) if hasattr(error, n)]
    return [(str(k), v) for k, v in items if k != ERROR_TAG]


def describe_error(error: Any) -> str:
    """Render ``error`` as ``<tag>`` or ``<tag>: key: value, ...``."""
    tag = error_tag(error) or type(error).__name__
    rendered = ", ".join(f"{k}: {v!r}" for k, v in error_fields(error))
    return f"{tag}: {rendered}" if rendered else tag
