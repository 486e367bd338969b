"""Pydantic contracts for article documents, blocks and annotations."""

from __future__ import annotations

from .annotation import Annotation
from .article import ArticleCreate, ArticleUpdate, Podcast, Video
from .block import (
    BLOCK_TYPES,
    ArticleBlock,
    BlockContent,
    BlockType,
    ImageBlock,
    ImageBlockData,
    QuoteBlock,
    QuoteBlockData,
    TextBlock,
    TextBlockData,
)

__all__ = [
    "Annotation",
    "ArticleBlock",
    "ArticleCreate",
    "ArticleUpdate",
    "BLOCK_TYPES",
    "BlockContent",
    "BlockType",
    "ImageBlock",
    "ImageBlockData",
    "Podcast",
    "QuoteBlock",
    "QuoteBlockData",
    "TextBlock",
    "TextBlockData",
    "Video",
]
