"""Test helpers: small error shapes shared across suites."""

from __future__ import annotations

from dataclasses import dataclass

from pipeable_result import TaggedError


@dataclass(frozen=True, kw_only=True)
class NotFound(TaggedError):
    tag: str = "NotFound"
    resource: str = ""


@dataclass(frozen=True, kw_only=True)
class Forbidden(TaggedError):
    tag: str = "Forbidden"
    user: str = ""
