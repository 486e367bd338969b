"""Unit tests for the reference scanner (marker extraction per block)."""

from __future__ import annotations

from typing import Any

import pytest

from citeguard.core.contracts.block import (
    ArticleBlock,
    QuoteBlock,
    QuoteBlockData,
    TextBlock,
    TextBlockData,
)
from citeguard.references.scanner import (
    collect_markers,
    iter_marker_matches,
    scan_markers,
    searchable_text,
)


def _block(kind: str, **data: Any) -> dict[str, Any]:
    return {"type": kind, "data": data, "position": 0}


def test_text_block_uses_content() -> None:
    assert scan_markers(_block("text", content="fact[1] and fact[2]")) == {1, 2}


def test_image_block_uses_caption_only() -> None:
    block = _block("image", url="https://example.com/[9].jpg", alt="[8]", caption="Photo[3]")
    assert scan_markers(block) == {3}


def test_image_block_without_caption_is_empty() -> None:
    assert searchable_text(_block("image", url="https://example.com/a.jpg")) == ""
    assert scan_markers(_block("image", url="https://example.com/a.jpg", caption=None)) == set()


def test_quote_block_joins_content_and_source() -> None:
    block = _block("quote", content="Act now[1]", author="Jane[7]", source="Summit 2024[2]")
    assert searchable_text(block) == "Act now[1] Summit 2024[2]"
    assert scan_markers(block) == {1, 2}


def test_quote_missing_source_is_blank() -> None:
    assert searchable_text(_block("quote", content="Q[4]")) == "Q[4] "


def test_quote_join_does_not_fuse_a_marker_across_fields() -> None:
    """The separating space keeps ``"x[1" + "]"`` from forming ``[1]``."""
    assert scan_markers(_block("quote", content="x[1", source="]")) == set()


@pytest.mark.parametrize(
    "text",
    ["[1", "]1[", "[ 1]", "[1 ]", "[-1]", "[1a]", "[]", "(1)", "{1}", "[١]"],
)
def test_malformed_markers_do_not_match(text: str) -> None:
    assert scan_markers(_block("text", content=text)) == set()


def test_leading_zeros_and_nested_brackets() -> None:
    assert scan_markers(_block("text", content="a[007] b[[3]]")) == {7, 3}


def test_large_marker_parses_exactly() -> None:
    assert scan_markers(_block("text", content="[12345678901234567890]")) == {
        12345678901234567890
    }


def test_duplicates_collapse() -> None:
    assert scan_markers(_block("text", content="[1][1] and [1]")) == {1}


def test_iter_marker_matches_reports_offsets_in_order() -> None:
    matches = list(iter_marker_matches("ab[2]cd[10]"))
    assert [(m.marker_id, m.start, m.end) for m in matches] == [(2, 2, 5), (10, 7, 11)]


@pytest.mark.parametrize(
    "block",
    [
        {"type": "video", "data": {"content": "[1]"}},
        {"type": "text", "data": "not a mapping [1]"},
        {"type": "text", "data": {"content": 42}},
        {"type": "text"},
        {},
    ],
)
def test_unusable_blocks_are_treated_as_empty(block: dict[str, Any]) -> None:
    assert searchable_text(block) == ""
    assert scan_markers(block) == set()


def test_accepts_pydantic_models() -> None:
    envelope = ArticleBlock(type="text", data={"content": "see [4]"}, position=0)
    typed_text = TextBlock(data=TextBlockData(content="see [5]"))
    typed_quote = QuoteBlock(data=QuoteBlockData(content="q", source="src [6]"))

    assert scan_markers(envelope) == {4}
    assert scan_markers(typed_text) == {5}
    assert scan_markers(typed_quote) == {6}


def test_collect_markers_unions_all_blocks() -> None:
    blocks = [
        _block("text", content="[1] and [2]"),
        _block("image", url="https://example.com/a.jpg", caption="[2] [3]"),
        _block("quote", content="[1]", source="[4]"),
    ]
    assert collect_markers(blocks) == {1, 2, 3, 4}
    assert collect_markers([]) == set()
