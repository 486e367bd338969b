"""citeguard: reference-integrity validation for block-based articles.

Public entry points are re-exported here so API handlers can write:
    from citeguard import validate_create, report_reference_usage
"""

from __future__ import annotations

from citeguard.references import (
    assert_reference_integrity,
    collect_markers,
    report_reference_usage,
    validate_reference_integrity,
)
from citeguard.validation import (
    assert_valid_create,
    assert_valid_update,
    validate_create,
    validate_update,
)

__all__ = [
    "__version__",
    "assert_reference_integrity",
    "assert_valid_create",
    "assert_valid_update",
    "collect_markers",
    "report_reference_usage",
    "validate_create",
    "validate_reference_integrity",
    "validate_update",
]
__version__ = "0.1.0"
