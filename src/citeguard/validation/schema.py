"""
Structural schema validation for article documents.

This module turns an untyped candidate (usually the output of ``json.load``)
into a typed :class:`ArticleCreate` / :class:`ArticleUpdate`, or into the
complete list of field-level errors. Reference integrity is out of scope
here; it only runs once the shape is trusted.

Error format
------------
Each violated constraint becomes one :class:`FieldError` whose string form is
``"<path>: <message>"``. Paths use the wire (camelCase) field names with list
indices in brackets, e.g. ``blocks[0].data.url`` or ``annotations[2].id``.

Block payloads
--------------
The envelope check only requires ``data`` to be an object. The per-variant
payload check (:func:`check_block_data`) is a separate step so the
orchestrator can report payload errors *and* still run reference
reconciliation on the same pass.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from citeguard.core.contracts.article import ArticleCreate, ArticleUpdate
from citeguard.core.contracts.block import (
    BLOCK_TYPES,
    PAYLOAD_MODELS,
    VARIANT_MODELS,
    BlockContent,
)
from citeguard.core.result import Verdict, failed, passed

ROOT_PATH = "(document)"


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single violated constraint.

    Attributes
    ----------
    path : str
        Dotted/bracketed location, e.g. ``blocks[0].data.url``; empty for
        errors about the candidate as a whole.
    message : str
        Human-readable reason.
    """

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path or ROOT_PATH}: {self.message}"


def format_loc(loc: Sequence[int | str], prefix: str = "") -> str:
    """Render a pydantic ``loc`` tuple as ``a.b[0].c`` under ``prefix``."""
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def field_errors(exc: ValidationError, prefix: str = "") -> list[FieldError]:
    """Flatten a pydantic ``ValidationError`` into :class:`FieldError` entries.

    An error carrying ``ctx["messages"]`` (several constraints failed on one
    field) expands into one entry per message, all at the same path.
    """
    out: list[FieldError] = []
    for e in exc.errors():
        path = format_loc(e["loc"], prefix)
        messages = e.get("ctx", {}).get("messages") or (e["msg"],)
        out.extend(FieldError(path, message) for message in messages)
    return out


def check_create_shape(candidate: Any) -> Verdict[ArticleCreate]:
    """Validate ``candidate`` against the creation shape."""
    try:
        return passed(ArticleCreate.model_validate(candidate))
    except ValidationError as exc:
        return failed(str(e) for e in field_errors(exc))


def check_update_shape(candidate: Any) -> Verdict[ArticleUpdate]:
    """Validate ``candidate`` against the partial update shape (``id`` required)."""
    try:
        return passed(ArticleUpdate.model_validate(candidate))
    except ValidationError as exc:
        return failed(str(e) for e in field_errors(exc))


def parse_block_content(block: Any, *, path: str = "") -> Verdict[BlockContent]:
    """Type a block's ``data`` against the variant named by its ``type``.

    Parameters
    ----------
    block : ArticleBlock | Mapping
        A block envelope (model or raw mapping).
    path : str
        Location prefix for error messages, e.g. ``"blocks[3]"``.
    """
    if isinstance(block, Mapping):
        kind, data = block.get("type"), block.get("data")
    else:
        kind, data = getattr(block, "type", None), getattr(block, "data", None)

    payload_model = PAYLOAD_MODELS.get(kind) if isinstance(kind, str) else None
    if payload_model is None:
        reason = f"Unknown block type {kind!r}; expected one of {', '.join(BLOCK_TYPES)}"
        return failed([str(FieldError(format_loc(["type"], path), reason))])

    try:
        payload = payload_model.model_validate(data)
    except ValidationError as exc:
        return failed(str(e) for e in field_errors(exc, format_loc(["data"], path)))
    return passed(VARIANT_MODELS[kind](type=kind, data=payload))


def check_block_data(blocks: Sequence[Any]) -> list[str]:
    """Return payload errors for every block, in block order."""
    errors: list[str] = []
    for index, block in enumerate(blocks):
        verdict = parse_block_content(block, path=f"blocks[{index}]")
        errors.extend(verdict.errors)
    return errors


__all__ = [
    "FieldError",
    "check_block_data",
    "check_create_shape",
    "check_update_shape",
    "field_errors",
    "format_loc",
    "parse_block_content",
]
