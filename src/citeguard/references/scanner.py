"""
Reference scanner: find inline citation markers in block text.

A marker is the literal text ``[<digits>]``, e.g. ``[1]`` or ``[42]``. The
scanner decides which field(s) of a block are searchable from the block's
``type`` and then matches markers left to right:

=========  =============================================
type       searchable text
=========  =============================================
text       ``data.content``
image      ``data.caption`` (``""`` when absent)
quote      ``data.content + " " + data.source``
=========  =============================================

Matching rules
--------------
- ASCII digits only; ``[ 1]``, ``[-1]`` and ``[1a]`` are not markers, and
  ``[[1]]`` matches only its inner ``[1]``.
- Leading zeros parse to the numeric value (``[007]`` -> 7).
- Missing or non-string fields count as empty text; the scanner never raises.

Blocks may be :class:`~citeguard.core.contracts.block.ArticleBlock` models,
typed :data:`~citeguard.core.contracts.block.BlockContent` variants, or raw
mappings straight from ``json.load``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, NamedTuple

from pydantic import BaseModel

# [0-9] rather than \d: str patterns would otherwise match non-ASCII digits
MARKER_PATTERN = re.compile(r"\[([0-9]+)\]")


class MarkerMatch(NamedTuple):
    """One marker occurrence inside a searchable string."""

    marker_id: int
    start: int
    end: int


def block_parts(block: Any) -> tuple[str | None, Mapping[str, Any]]:
    """Return ``(type, data)`` for a model or mapping block."""
    if isinstance(block, Mapping):
        kind, data = block.get("type"), block.get("data")
    else:
        kind, data = getattr(block, "type", None), getattr(block, "data", None)
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if not isinstance(data, Mapping):
        data = {}
    return (kind if isinstance(kind, str) else None), data


def _field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def searchable_text(block: Any) -> str:
    """Return the text of ``block`` that may contain reference markers."""
    kind, data = block_parts(block)
    if kind == "text":
        return _field(data, "content")
    if kind == "image":
        return _field(data, "caption")
    if kind == "quote":
        return f"{_field(data, 'content')} {_field(data, 'source')}"
    return ""


def iter_marker_matches(text: str) -> Iterator[MarkerMatch]:
    """Yield every marker in ``text`` in left-to-right order."""
    for match in MARKER_PATTERN.finditer(text):
        yield MarkerMatch(int(match.group(1)), match.start(), match.end())


def scan_markers(block: Any) -> set[int]:
    """Return the set of marker ids used by a single block."""
    return {m.marker_id for m in iter_marker_matches(searchable_text(block))}


def collect_markers(blocks: Iterable[Any]) -> set[int]:
    """Return the union of marker ids used across ``blocks``."""
    used: set[int] = set()
    for block in blocks:
        used |= scan_markers(block)
    return used


__all__ = [
    "MARKER_PATTERN",
    "MarkerMatch",
    "block_parts",
    "collect_markers",
    "iter_marker_matches",
    "scan_markers",
    "searchable_text",
]
