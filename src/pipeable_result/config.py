"""Settings: opt-in development checks for pipelines.

Both toggles are off by default so production pipelines pay nothing for
them. They are read from ``PIPEABLE_RESULT_*`` environment variables (a
project ``.env`` is honoured) and can be overridden per call.

Example:
    settings = resolve_settings(overrides={"validate": True})
    succeed(2).pipe(map(double), settings=settings)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from functools import cache
import os
from typing import TYPE_CHECKING, Any, Final

from dotenv import load_dotenv

from pipeable_result.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX: Final[str] = "PIPEABLE_RESULT_"


@dataclass(frozen=True)
class Settings:
    """Immutable pipeline settings.

    Attributes:
        validate: Check that every intermediate pipeline step produced a
            Result and raise ``InvariantViolationError`` otherwise.
        trace: Log every settled pipeline step at DEBUG level.
    """

    validate: bool = False
    trace: bool = False

    def __post_init__(self) -> None:
        """Reject non-boolean toggles early."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{f.name} must be a bool, got {value!r}",
                    hint=f"Set {ENV_PREFIX}{f.name.upper()}=1 or pass {f.name}=True.",
                )


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


def load_env() -> dict[str, Any]:
    """Read ``PIPEABLE_RESULT_*`` variables for the known settings fields."""
    values: dict[str, Any] = {}
    for f in fields(Settings):
        raw = os.environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if raw is not None:
            values[f.name] = _coerce_bool(raw)
    return values


def resolve_settings(overrides: Mapping[str, Any] | None = None) -> Settings:
    """Resolve settings from defaults, environment and explicit overrides.

    Precedence (highest first): ``overrides``, environment variables
    (including a ``.env`` file), field defaults.

    Raises:
        ConfigurationError: An override names an unknown setting.
    """
    load_dotenv()
    values = load_env()
    if overrides:
        known = {f.name for f in fields(Settings)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown setting(s): {', '.join(unknown)}",
                hint=f"Supported settings: {', '.join(sorted(known))}",
            )
        values.update(overrides)
    return Settings(**values)


@cache
def default_settings() -> Settings:
    """Return the environment-derived settings, resolved once per process.

    Call ``default_settings.cache_clear()`` after changing the environment.
    """
    return resolve_settings()
