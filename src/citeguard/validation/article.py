"""
Article validation entry points.

This is the single surface consumed by the API layer. One call runs, in a
fixed order:

1. **Shape**: :func:`check_create_shape` / :func:`check_update_shape`.
   A shape failure returns immediately: block and annotation values cannot
   be trusted, so reference reconciliation is skipped.
2. **Block payloads**: every block's ``data`` is typed against its declared
   variant. Failures are collected but do not stop step 3.
3. **References**: inline markers vs. declared annotation ids
   (missing ``annotations`` counts as an empty list on create).
4. **Aggregate**: shape/payload errors first, then reference errors.

Update policy
-------------
An update only reconciles references when the payload carries *both*
``blocks`` and ``annotations``. A partial update that rewrites block text
without resending annotations is therefore not reference-checked until the
next full save. This is a known gap, not an oversight in the checks below.

API
---
- ``validate_create(candidate) -> Verdict[ArticleCreate]``
- ``validate_update(candidate) -> Verdict[ArticleUpdate]``
- ``assert_valid_create(candidate) -> ArticleCreate`` (raises)
- ``assert_valid_update(candidate) -> ArticleUpdate`` (raises)
"""

from __future__ import annotations

from typing import Any

from citeguard.core.contracts.article import ArticleCreate, ArticleUpdate
from citeguard.core.errors import ArticleValidationError
from citeguard.core.result import Verdict
from citeguard.core.settings import get_logger
from citeguard.references.reconciler import validate_reference_integrity

from .schema import check_block_data, check_create_shape, check_update_shape

logger = get_logger("citeguard.validation")


def _finish(kind: str, shape: Verdict[Any], errors: list[str]) -> Verdict[Any]:
    slug = shape.unwrap().slug
    verdict = shape.with_errors(errors)
    if verdict.success:
        logger.debug("%s accepted (slug=%s)", kind, slug)
    else:
        logger.info("%s rejected: %d error(s) (slug=%s)", kind, len(verdict.errors), slug)
    return verdict


def validate_create(candidate: Any) -> Verdict[ArticleCreate]:
    """Validate a full article document for creation.

    Parameters
    ----------
    candidate : Any
        Untyped input, usually a ``dict`` decoded from a request body.

    Returns
    -------
    Verdict[ArticleCreate]
        ``Passed`` with the normalized document, or ``Failed`` with every
        error found (shape errors alone when the shape is invalid).
    """
    shape = check_create_shape(candidate)
    if not shape.success:
        logger.warning("create shape check failed: %d error(s)", len(shape.errors))
        return shape

    doc = shape.unwrap()
    errors = check_block_data(doc.blocks)
    errors.extend(validate_reference_integrity(doc.blocks, doc.annotations or []).errors)
    return _finish("create", shape, errors)


def validate_update(candidate: Any) -> Verdict[ArticleUpdate]:
    """Validate a partial article update.

    Block payloads are checked whenever ``blocks`` is present; references
    only when ``blocks`` and ``annotations`` are both present.
    """
    shape = check_update_shape(candidate)
    if not shape.success:
        logger.warning("update shape check failed: %d error(s)", len(shape.errors))
        return shape

    doc = shape.unwrap()
    errors: list[str] = []
    if doc.blocks is not None:
        errors.extend(check_block_data(doc.blocks))
        if doc.annotations is not None:
            errors.extend(validate_reference_integrity(doc.blocks, doc.annotations).errors)
    return _finish("update", shape, errors)


def assert_valid_create(candidate: Any) -> ArticleCreate:
    """Return the normalized document or raise :class:`ArticleValidationError`.

    ``str(exc)`` is the newline-joined error list.
    """
    verdict = validate_create(candidate)
    if not verdict.success:
        raise ArticleValidationError(verdict.errors)
    return verdict.unwrap()


def assert_valid_update(candidate: Any) -> ArticleUpdate:
    """Update counterpart of :func:`assert_valid_create`."""
    verdict = validate_update(candidate)
    if not verdict.success:
        raise ArticleValidationError(verdict.errors)
    return verdict.unwrap()


__all__ = [
    "assert_valid_create",
    "assert_valid_update",
    "validate_create",
    "validate_update",
]
