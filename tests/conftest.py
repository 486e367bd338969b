"""Shared fixtures: an article factory and a settings cache reset."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from citeguard.core.settings import load_settings


@pytest.fixture
def make_article() -> Callable[..., dict[str, Any]]:
    """
    Return a factory producing a minimal, valid create-shaped article dict.

    Keyword arguments override (or add) top-level fields; passing ``None``
    drops the field entirely.
    """

    def factory(**overrides: Any) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "author": "John Doe",
            "title": "Test Article",
            "coverImage": "https://example.com/cover.jpg",
            "slug": "test-article",
            "blocks": [
                {"type": "text", "data": {"content": "No citations here."}, "position": 0}
            ],
        }
        for key, value in overrides.items():
            if value is None:
                doc.pop(key, None)
            else:
                doc[key] = value
        return doc

    return factory


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Clear the settings cache before and after a test that mutates env vars."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
