"""Annotation: a citation record referenced from block text as ``[id]``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .common import AnnotationContent, AnnotationUrl, PositiveId


class Annotation(BaseModel):
    """A citation attached to an article.

    ``id`` is the marker value: an annotation with ``id=3`` is cited by the
    text ``[3]`` somewhere in the article's blocks.
    """

    id: PositiveId = Field(..., description="Marker number, unique within the article.")
    content: AnnotationContent = Field(..., description="Citation body.")
    url: AnnotationUrl | None = Field(default=None, description="Optional source link.")


__all__ = ["Annotation"]
