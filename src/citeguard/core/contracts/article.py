"""Article create/update contracts.

This module defines the document shapes accepted from the authoring layer:

- `ArticleCreate`: every required field must be present.
- `ArticleUpdate`: every field is optional except the article `id`; fields
  that *are* present carry the same constraints as on create.

Wire names are camelCase (``coverImage``, ``publishedAt``, ``keywordIds``);
Python attributes are snake_case. Both spellings are accepted on input and
``model_dump(by_alias=True)`` restores the wire names.

Notes
-----
- Unknown keys are ignored, matching how the authoring forms post extra
  bookkeeping fields (video titles, positions).
- Annotation ids must be unique within one document.
- Cross-field reference integrity is *not* checked here; see
  ``citeguard.references.reconciler``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

from .annotation import Annotation
from .block import ArticleBlock
from .common import (
    AuthorName,
    CoverImageUrl,
    Identifier,
    IsoDatetime,
    PodcastUrl,
    PositiveId,
    Slug,
    Title,
    VideoUrl,
)


def _at_least_one_block(blocks: list[ArticleBlock]) -> list[ArticleBlock]:
    if not blocks:
        raise PydanticCustomError("blocks_empty", "At least one block is required")
    return blocks


BlockList = Annotated[list[ArticleBlock], AfterValidator(_at_least_one_block)]


def _unique_ids(annotations: list[Annotation]) -> list[Annotation]:
    seen: set[int] = set()
    messages: list[str] = []
    for index, annotation in enumerate(annotations):
        if annotation.id in seen:
            messages.append(f"Duplicate annotation id {annotation.id} (index {index})")
        seen.add(annotation.id)
    if messages:
        raise PydanticCustomError(
            "annotation_id_duplicate", "; ".join(messages), {"messages": tuple(messages)}
        )
    return annotations


AnnotationList = Annotated[list[Annotation], AfterValidator(_unique_ids)]


class Video(BaseModel):
    url: VideoUrl


class Podcast(BaseModel):
    url: PodcastUrl


class ArticleCreate(BaseModel):
    """Full article document submitted on creation."""

    model_config = ConfigDict(populate_by_name=True)

    author: AuthorName
    title: Title
    cover_image: CoverImageUrl = Field(..., alias="coverImage")
    slug: Slug
    published_at: IsoDatetime | None = Field(default=None, alias="publishedAt")

    blocks: BlockList
    annotations: AnnotationList | None = None

    videos: list[Video] | None = None
    podcasts: list[Podcast] | None = None

    keyword_ids: list[Identifier] | None = Field(default=None, alias="keywordIds")
    new_keywords: list[str] | None = Field(default=None, alias="newKeywords")
    nine_block_ids: list[Identifier] | None = Field(default=None, alias="nineBlockIds")
    cake_category_id: list[Identifier] | None = Field(default=None, alias="cakeCategoryId")


class ArticleUpdate(BaseModel):
    """Partial article document; only ``id`` is mandatory."""

    model_config = ConfigDict(populate_by_name=True)

    id: PositiveId

    author: AuthorName | None = None
    title: Title | None = None
    cover_image: CoverImageUrl | None = Field(default=None, alias="coverImage")
    slug: Slug | None = None
    published_at: IsoDatetime | None = Field(default=None, alias="publishedAt")

    blocks: BlockList | None = None
    annotations: AnnotationList | None = None

    videos: list[Video] | None = None
    podcasts: list[Podcast] | None = None

    keyword_ids: list[Identifier] | None = Field(default=None, alias="keywordIds")
    new_keywords: list[str] | None = Field(default=None, alias="newKeywords")
    nine_block_ids: list[Identifier] | None = Field(default=None, alias="nineBlockIds")
    cake_category_id: list[Identifier] | None = Field(default=None, alias="cakeCategoryId")


__all__ = ["AnnotationList", "ArticleCreate", "ArticleUpdate", "BlockList", "Podcast", "Video"]
