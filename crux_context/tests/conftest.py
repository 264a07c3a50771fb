"""Pytest configuration for the context test suite.

Every test starts from built-in defaults: settings environment variables are
cleared, the cached external config file is dropped, and the shared logger is
put back to ``INFO`` afterwards so a test that enables ``DEBUG`` does not leak
event noise into the rest of the run.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from crux_context.base.logging import LOG_LEVEL_ENV, configure_logger
from crux_context.config import reset_settings_cache
from crux_context.config.env import CONFIG_FILE_ENV, ENV_MAP


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear settings env vars and the config file cache around each test."""

    for var in (*ENV_MAP.values(), CONFIG_FILE_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(var, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
    configure_logger(level=logging.INFO)


@pytest.fixture()
def long_prose() -> str:
    """Repeated prose long enough to force truncation at small budgets."""

    sentence = "The quick brown fox jumps over the lazy dog near the river bank. "
    return sentence * 60
