"""Inline reference markers: scanning, reconciliation and usage reports."""

from __future__ import annotations

from .reconciler import (
    assert_reference_integrity,
    find_dangling_references,
    find_orphan_annotations,
    validate_reference_integrity,
)
from .report import UsageRecord, report_reference_usage
from .scanner import MARKER_PATTERN, collect_markers, scan_markers, searchable_text

__all__ = [
    "MARKER_PATTERN",
    "UsageRecord",
    "assert_reference_integrity",
    "collect_markers",
    "find_dangling_references",
    "find_orphan_annotations",
    "report_reference_usage",
    "scan_markers",
    "searchable_text",
    "validate_reference_integrity",
]
