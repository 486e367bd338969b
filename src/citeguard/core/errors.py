"""Exception hierarchy for the strict (raising) validation entry points.

The non-strict API never raises for bad input; these exceptions exist only
for call sites that prefer to fail fast with one diagnostic blob.
"""

from __future__ import annotations

from collections.abc import Iterable


class CiteguardError(Exception):
    """Base error for all user-facing citeguard exceptions."""


class _ErrorListMixin(CiteguardError):
    """Carries the full error list; ``str(exc)`` is the newline-joined list."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__("\n".join(self.errors))


class ArticleValidationError(_ErrorListMixin):
    """Raised by ``assert_valid_create`` / ``assert_valid_update`` on failure."""


class ReferenceIntegrityError(_ErrorListMixin):
    """Raised when inline markers and declared annotations disagree."""


__all__ = ["CiteguardError", "ArticleValidationError", "ReferenceIntegrityError"]
