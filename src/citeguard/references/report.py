"""Usage reporter: where each marker occurs, with surrounding text.

This is a diagnostic view for tooling and debugging. Unlike the reconciler it
keeps every occurrence (no de-duplication), so ``[1]`` cited three times
yields three records.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from citeguard.core.settings import load_settings

from .scanner import block_parts, iter_marker_matches, searchable_text

ELLIPSIS = "..."


class UsageRecord(BaseModel):
    """One marker occurrence located in a block."""

    marker_id: int = Field(..., description="Numeric marker value, e.g. 2 for '[2]'.")
    block_index: int = Field(..., ge=0, description="Index of the block in document order.")
    block_type: str = Field(..., description="Declared type of the block.")
    context: str = Field(..., description="Marker plus surrounding text.")


def _snippet(text: str, start: int, end: int, window: int) -> str:
    lo = max(0, start - window)
    hi = min(len(text), end + window)
    snippet = text[lo:hi]
    return f"{ELLIPSIS}{snippet}" if lo > 0 else snippet


def report_reference_usage(
    blocks: Iterable[Any], *, window: int | None = None
) -> list[UsageRecord]:
    """List every marker occurrence across ``blocks``.

    Records are ordered by block index, then by position within the block.
    ``window`` defaults to ``settings.context_window`` (20 characters).
    """
    radius = load_settings().context_window if window is None else max(0, window)
    records: list[UsageRecord] = []
    for index, block in enumerate(blocks):
        text = searchable_text(block)
        kind, _ = block_parts(block)
        for match in iter_marker_matches(text):
            records.append(
                UsageRecord(
                    marker_id=match.marker_id,
                    block_index=index,
                    block_type=kind or "",
                    context=_snippet(text, match.start, match.end, radius),
                )
            )
    return records


__all__ = ["UsageRecord", "report_reference_usage"]
