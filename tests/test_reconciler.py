"""Unit tests for the reference reconciler (two-way set equality)."""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from citeguard.core.contracts.annotation import Annotation
from citeguard.core.errors import ReferenceIntegrityError
from citeguard.references.reconciler import (
    assert_reference_integrity,
    declared_ids,
    find_dangling_references,
    find_orphan_annotations,
    validate_reference_integrity,
)


def _text(content: str) -> dict[str, Any]:
    return {"type": "text", "data": {"content": content}, "position": 0}


def _notes(*ids: int) -> list[dict[str, Any]]:
    return [{"id": i, "content": f"note {i}"} for i in ids]


def test_matching_sets_pass() -> None:
    verdict = validate_reference_integrity([_text("fact[1] and fact[2]")], _notes(1, 2))
    assert verdict.success
    assert verdict.errors == ()


def test_dangling_marker_is_reported() -> None:
    verdict = validate_reference_integrity([_text("fact[1] and fact[2]")], _notes(1))
    assert not verdict.success
    assert verdict.errors == (
        "Reference [2] is used in blocks but has no corresponding annotation",
    )


def test_orphan_annotation_is_reported() -> None:
    verdict = validate_reference_integrity([_text("only fact[1]")], _notes(1, 2))
    assert verdict.errors == (
        "Annotation with ID 2 exists but is not referenced in any block",
    )


def test_both_directions_reported_in_one_pass() -> None:
    verdict = validate_reference_integrity([_text("[3] [1] [5]")], _notes(4, 1, 2))
    assert verdict.errors == (
        "Reference [3] is used in blocks but has no corresponding annotation",
        "Reference [5] is used in blocks but has no corresponding annotation",
        "Annotation with ID 2 exists but is not referenced in any block",
        "Annotation with ID 4 exists but is not referenced in any block",
    )


def test_no_markers_and_no_annotations_pass() -> None:
    assert validate_reference_integrity([_text("plain")], []).success


def test_markers_without_any_annotations_are_all_dangling() -> None:
    verdict = validate_reference_integrity([_text("[1][2]")], [])
    assert len(verdict.errors) == 2
    assert all("no corresponding annotation" in e for e in verdict.errors)


def test_duplicate_markers_count_once() -> None:
    blocks = [_text("[1] [1]"), _text("again [1]")]
    assert validate_reference_integrity(blocks, _notes(1)).success


def test_accepts_annotation_models() -> None:
    notes = [Annotation(id=1, content="a"), Annotation(id=2, content="b")]
    assert validate_reference_integrity([_text("[1][2]")], notes).success


def test_declared_ids_skips_entries_without_int_id() -> None:
    assert declared_ids([{"id": 1}, {"id": "2"}, {"content": "x"}, {"id": True}]) == {1}


def test_find_helpers_return_sorted_differences() -> None:
    blocks = [_text("[9] [2] [7]")]
    notes = _notes(7, 3, 1)
    assert find_dangling_references(blocks, notes) == [2, 9]
    assert find_orphan_annotations(blocks, notes) == [1, 3]


def test_assert_reference_integrity_raises_with_all_errors() -> None:
    with pytest.raises(ReferenceIntegrityError) as excinfo:
        assert_reference_integrity([_text("[1]")], _notes(2))

    exc = excinfo.value
    assert len(exc.errors) == 2
    assert str(exc) == "\n".join(exc.errors)


def test_assert_reference_integrity_passes_silently() -> None:
    assert assert_reference_integrity([_text("[1]")], _notes(1)) is None


@pytest.mark.parametrize(
    ("used", "declared"),
    list(itertools.product([(), (1,), (1, 2), (2, 3)], repeat=2)),
)
def test_passes_iff_used_equals_declared(used: tuple[int, ...], declared: tuple[int, ...]) -> None:
    """Set-equality property over a small grid of marker/annotation combinations."""
    content = " ".join(f"[{i}]" for i in used) or "no markers"
    verdict = validate_reference_integrity([_text(content)], _notes(*declared))

    assert verdict.success is (set(used) == set(declared))
    dangling = [e for e in verdict.errors if e.startswith("Reference")]
    orphans = [e for e in verdict.errors if e.startswith("Annotation")]
    assert len(dangling) == len(set(used) - set(declared))
    assert len(orphans) == len(set(declared) - set(used))
