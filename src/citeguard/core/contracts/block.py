"""
Block Contracts

A block is one ordered content unit of an article. Blocks come in a closed
set of variants (``text``, ``image``, ``quote``), each with its own payload
shape. Two views of a block exist:

- :class:`ArticleBlock` is the *envelope* accepted at the document boundary:
  the ``type`` tag is checked against the closed set, while ``data`` is only
  required to be a JSON object. This mirrors how blocks are stored.
- :class:`TextBlock` / :class:`ImageBlock` / :class:`QuoteBlock` form the
  tagged union :data:`BlockContent`, where ``data`` is fully typed for the
  declared variant. The payload check lives in ``validation.schema``.

Reference markers such as ``[1]`` may appear in ``TextBlockData.content``,
``ImageBlockData.caption`` and in both ``QuoteBlockData.content`` and
``QuoteBlockData.source``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .common import Dimension, ImageUrl, Position, QuoteContent, TextContent

BlockType = Literal["text", "image", "quote"]
BLOCK_TYPES: tuple[BlockType, ...] = ("text", "image", "quote")


# ---- Payload variants --------------------------------------------------------


class TextBlockData(BaseModel):
    """Paragraph text with inline reference markers, e.g. ``"A fact[1]."``."""

    content: TextContent


class ImageBlockData(BaseModel):
    """Image source plus optional caption (the caption may carry markers)."""

    model_config = ConfigDict(populate_by_name=True)

    url: ImageUrl
    public_id: str | None = Field(
        default=None, alias="publicId", description="Image host public id."
    )
    width: Dimension | None = Field(default=None, description="Width in pixels.")
    height: Dimension | None = Field(default=None, description="Height in pixels.")
    alt: str | None = None
    caption: str | None = None


class QuoteBlockData(BaseModel):
    """Quoted passage with optional attribution."""

    content: QuoteContent
    author: str | None = None
    source: str | None = None


# ---- Tagged union ------------------------------------------------------------


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    data: TextBlockData


class ImageBlock(BaseModel):
    type: Literal["image"] = "image"
    data: ImageBlockData


class QuoteBlock(BaseModel):
    type: Literal["quote"] = "quote"
    data: QuoteBlockData


BlockContent = Annotated[TextBlock | ImageBlock | QuoteBlock, Field(discriminator="type")]

PAYLOAD_MODELS: dict[str, type[BaseModel]] = {
    "text": TextBlockData,
    "image": ImageBlockData,
    "quote": QuoteBlockData,
}
VARIANT_MODELS: dict[str, type[BaseModel]] = {
    "text": TextBlock,
    "image": ImageBlock,
    "quote": QuoteBlock,
}


# ---- Envelope ----------------------------------------------------------------


class ArticleBlock(BaseModel):
    """A block as submitted with an article create/update request."""

    id: StrictInt | None = Field(default=None, description="Present on persisted blocks only.")
    type: BlockType = Field(..., description="Variant tag: text, image or quote.")
    data: dict[str, Any] = Field(..., description="Variant payload (JSON object).")
    position: Position = Field(..., description="0-indexed render order.")


__all__ = [
    "ArticleBlock",
    "BLOCK_TYPES",
    "BlockContent",
    "BlockType",
    "ImageBlock",
    "ImageBlockData",
    "PAYLOAD_MODELS",
    "QuoteBlock",
    "QuoteBlockData",
    "TextBlock",
    "TextBlockData",
    "VARIANT_MODELS",
]
