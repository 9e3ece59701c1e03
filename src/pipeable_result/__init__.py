"""pipeable-result: Results instead of exceptions, composed through pipes.

Public API:
    - succeed() / fail() / safe(): build Results
    - Result, Success, Failure: the two-variant outcome type
    - pipe() / compose(): thread a Result through operators
    - TaggedError, UnknownError: structured errors with a ``tag`` discriminant

Operators live in ``pipeable_result.operators`` (``map``, ``chain``, ...) so
that importing them never shadows builtins by accident.

Example:
    from pipeable_result import safe
    from pipeable_result.operators import map, match

    label = safe(lambda: int(raw), {"tag": "NotANumber", "raw": raw}).pipe(
        map(lambda n: n * 2),
        match(Success=str, NotANumber=lambda err: f"bad input {err['raw']!r}"),
    )
"""

from __future__ import annotations

import logging

from pipeable_result.config import Settings, resolve_settings
from pipeable_result.errors import (
    ConfigurationError,
    InvalidAccessError,
    InvariantViolationError,
    MalformedErrorError,
    PendingPayloadError,
    PipeableResultError,
    UnhandledErrorCaseError,
)
from pipeable_result.factories import fail, safe, succeed
from pipeable_result.pipeline import compose, pipe
from pipeable_result.result import Failure, Result, Success, is_result
from pipeable_result.tags import (
    CATCH_ALL,
    ERROR_TAG,
    SUCCESS_CASE,
    ResultError,
    TaggedError,
    UnknownError,
    error_tag,
    is_error,
    is_error_type,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pipeable-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("pipeable_result").addHandler(logging.NullHandler())

__all__ = [
    "CATCH_ALL",
    "ERROR_TAG",
    "SUCCESS_CASE",
    "ConfigurationError",
    "Failure",
    "InvalidAccessError",
    "InvariantViolationError",
    "MalformedErrorError",
    "PendingPayloadError",
    "PipeableResultError",
    "Result",
    "ResultError",
    "Settings",
    "Success",
    "TaggedError",
    "UnhandledErrorCaseError",
    "UnknownError",
    "compose",
    "error_tag",
    "fail",
    "is_error",
    "is_error_type",
    "is_result",
    "pipe",
    "resolve_settings",
    "safe",
    "succeed",
]
