"""Pytest configuration and fixtures.

Provides environment isolation for ``PIPEABLE_RESULT_*`` settings. All fixtures here are autouse.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from pipeable_result.config import ENV_PREFIX, default_settings

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests."""
    with suppress(Exception):
        monkeypatch.setattr(
            "pipeable_result.config.load_dotenv",
            lambda *_args, **_kwargs: False,
        )


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch):
    """Clear PIPEABLE_RESULT_* variables and the cached default settings."""
    for key in list(os.environ.keys()):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()
