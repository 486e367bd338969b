"""Reference reconciler: markers used in blocks vs. annotations declared.

The article invariant is two-way set equality::

    collect_markers(blocks) == {a.id for a in annotations}

Both differences are always computed in full, so a document with a dangling
marker *and* an orphan annotation reports both in the same pass. Errors are
emitted dangling-first, each group in ascending id order, which keeps the
output stable across runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from citeguard.core.errors import ReferenceIntegrityError
from citeguard.core.result import Verdict, failed, passed

from .scanner import collect_markers


def _annotation_id(annotation: Any) -> Any:
    if isinstance(annotation, Mapping):
        return annotation.get("id")
    return getattr(annotation, "id", None)


def declared_ids(annotations: Iterable[Any]) -> set[int]:
    """Return the set of annotation ids (entries without an int id are skipped)."""
    ids: set[int] = set()
    for annotation in annotations:
        value = _annotation_id(annotation)
        if isinstance(value, int) and not isinstance(value, bool):
            ids.add(value)
    return ids


def find_dangling_references(blocks: Iterable[Any], annotations: Iterable[Any]) -> list[int]:
    """Marker ids used in text that no annotation declares."""
    return sorted(collect_markers(blocks) - declared_ids(annotations))


def find_orphan_annotations(blocks: Iterable[Any], annotations: Iterable[Any]) -> list[int]:
    """Annotation ids that no marker in any block references."""
    return sorted(declared_ids(annotations) - collect_markers(blocks))


def dangling_message(marker_id: int) -> str:
    return f"Reference [{marker_id}] is used in blocks but has no corresponding annotation"


def orphan_message(annotation_id: int) -> str:
    return f"Annotation with ID {annotation_id} exists but is not referenced in any block"


def validate_reference_integrity(
    blocks: Sequence[Any], annotations: Sequence[Any]
) -> Verdict[None]:
    """Check the marker/annotation invariant and report every violation.

    Parameters
    ----------
    blocks : Sequence
        Article blocks (models or mappings), in document order.
    annotations : Sequence
        Declared annotations (models or mappings with an ``id``).

    Returns
    -------
    Verdict[None]
        ``Passed(None)`` when the sets are equal, otherwise ``Failed`` with
        one message per dangling marker followed by one per orphan.
    """
    used = collect_markers(blocks)
    declared = declared_ids(annotations)

    errors = [dangling_message(i) for i in sorted(used - declared)]
    errors.extend(orphan_message(i) for i in sorted(declared - used))

    if errors:
        return failed(errors)
    return passed(None)


def assert_reference_integrity(blocks: Sequence[Any], annotations: Sequence[Any]) -> None:
    """Raise :class:`ReferenceIntegrityError` if the invariant does not hold."""
    verdict = validate_reference_integrity(blocks, annotations)
    if not verdict.success:
        raise ReferenceIntegrityError(verdict.errors)


__all__ = [
    "assert_reference_integrity",
    "dangling_message",
    "declared_ids",
    "find_dangling_references",
    "find_orphan_annotations",
    "orphan_message",
    "validate_reference_integrity",
]
