"""Typed smoke tests for the settings loader and logger factory.

These tests verify four guarantees:
1) `load_settings()` yields a cached `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) A host-style lowercase `LOG_LEVEL` is accepted instead of failing.
4) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import pytest

from citeguard.core.settings import Settings, get_logger, load_settings


def test_settings_instance_type(fresh_settings: None) -> None:
    """`load_settings()` should return the typed `Settings` model, cached."""
    s = load_settings()
    assert isinstance(s, Settings)
    assert s.context_window >= 0
    assert load_settings() is s


def test_env_overrides_with_cache_clear(monkeypatch: Any, fresh_settings: None) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("CITEGUARD_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CITEGUARD_CONTEXT_WINDOW", "35")

    load_settings.cache_clear()
    s = load_settings()

    assert s.environment == "test"
    assert s.log_level == "DEBUG"
    assert s.context_window == 35


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("warn", "WARNING"), ("fatal", "CRITICAL")],
)
def test_log_level_is_case_insensitive(
    monkeypatch: Any, fresh_settings: None, raw: str, expected: str
) -> None:
    """Hosts commonly export lowercase levels; they must not break import."""
    monkeypatch.setenv("LOG_LEVEL", raw)
    load_settings.cache_clear()

    s = load_settings()

    assert s.log_level == expected
    assert s.log_level_numeric() == getattr(logging, expected)


def test_loading_does_not_mutate_environ(monkeypatch: Any, fresh_settings: None) -> None:
    monkeypatch.delenv("CITEGUARD_ENV", raising=False)
    load_settings.cache_clear()

    assert load_settings().environment == "dev"
    assert "CITEGUARD_ENV" not in os.environ


def test_get_logger_respects_level(monkeypatch: Any, fresh_settings: None) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`.

    A unique logger name avoids side effects between tests.
    """
    monkeypatch.setenv("LOG_LEVEL", "error")
    load_settings.cache_clear()

    logger = get_logger("citeguard.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
