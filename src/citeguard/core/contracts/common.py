"""Shared constrained field types for the article contracts.

Every constraint raises a :class:`PydanticCustomError` with a short,
editor-facing message ("Invalid image URL", "Title too long") so the field
path plus message is readable without knowing pydantic's error vocabulary.

Fields with several constraints run all of them and report every failure:
an empty slug is both "required" and off-pattern. The failed messages ride
in the error's ``ctx["messages"]`` and ``validation.schema`` expands them
into one entry each.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    BeforeValidator,
    Field,
    StrictInt,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

_ANY_URL: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
TITLE_MAX_LENGTH = 200
# Full date-time only: no bare dates, no epoch strings.
ISO_DATETIME_PATTERN = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]+)?(Z|[+-][0-9]{2}:[0-9]{2})$"
)


def _non_empty(message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("string_empty", message)
        return value

    return check


def _max_length(limit: int, message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if len(value) > limit:
            raise PydanticCustomError("string_too_long", message)
        return value

    return check


def _url(message: str, *, allow_empty: bool = False) -> Callable[[str], str]:
    def check(value: str) -> str:
        if allow_empty and value == "":
            return value
        try:
            _ANY_URL.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("url_invalid", message) from None
        return value

    return check


def _slug(value: str) -> str:
    if not SLUG_PATTERN.fullmatch(value):
        raise PydanticCustomError(
            "slug_invalid",
            "Slug must contain only lowercase letters, numbers, and hyphens",
        )
    return value


def _all_of(*checks: Callable[[str], str]) -> Callable[[str], str]:
    """Run every check; raise once carrying all failed messages."""

    def check(value: str) -> str:
        messages: list[str] = []
        for rule in checks:
            try:
                rule(value)
            except PydanticCustomError as exc:
                messages.append(exc.message())
        if messages:
            raise PydanticCustomError(
                "constraints_failed", "; ".join(messages), {"messages": tuple(messages)}
            )
        return value

    return check


def _identifier(value: Any) -> Any:
    # authoring forms post numeric ids; canonical form is a string
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _iso_string(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not ISO_DATETIME_PATTERN.fullmatch(value):
        raise PydanticCustomError("datetime_type", "Expected an ISO-8601 datetime string")
    return value


def _number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise PydanticCustomError("number_type", "Expected a number")
    return value


# ---- Text -------------------------------------------------------------------

AuthorName = Annotated[str, AfterValidator(_non_empty("Author is required"))]
Title = Annotated[
    str,
    AfterValidator(
        _all_of(
            _non_empty("Title is required"),
            _max_length(TITLE_MAX_LENGTH, "Title too long"),
        )
    ),
]
Slug = Annotated[str, AfterValidator(_all_of(_non_empty("Slug is required"), _slug))]
TextContent = Annotated[str, AfterValidator(_non_empty("Text content cannot be empty"))]
QuoteContent = Annotated[str, AfterValidator(_non_empty("Quote content cannot be empty"))]
AnnotationContent = Annotated[
    str, AfterValidator(_non_empty("Annotation content cannot be empty"))
]

# ---- URLs -------------------------------------------------------------------

CoverImageUrl = Annotated[
    str,
    AfterValidator(
        _all_of(_url("Invalid cover image URL"), _non_empty("Cover image is required"))
    ),
]
ImageUrl = Annotated[str, AfterValidator(_url("Invalid image URL"))]
VideoUrl = Annotated[str, AfterValidator(_url("Invalid video URL"))]
PodcastUrl = Annotated[str, AfterValidator(_url("Invalid podcast URL"))]
# Blank form fields arrive as "" and mean "no link".
AnnotationUrl = Annotated[str, AfterValidator(_url("Invalid annotation URL", allow_empty=True))]

# ---- Numbers ----------------------------------------------------------------

# JSON numbers only: "1", true and 1.0 are not ids.
PositiveId = Annotated[StrictInt, Field(gt=0)]
Position = Annotated[StrictInt, Field(ge=0)]
Dimension = Annotated[float, BeforeValidator(_number)]

# ---- Misc -------------------------------------------------------------------

Identifier = Annotated[str, BeforeValidator(_identifier)]
IsoDatetime = Annotated[datetime, BeforeValidator(_iso_string)]


__all__ = [
    "AnnotationContent",
    "AnnotationUrl",
    "AuthorName",
    "CoverImageUrl",
    "Dimension",
    "ISO_DATETIME_PATTERN",
    "Identifier",
    "ImageUrl",
    "IsoDatetime",
    "PodcastUrl",
    "PositiveId",
    "Position",
    "QuoteContent",
    "SLUG_PATTERN",
    "Slug",
    "TITLE_MAX_LENGTH",
    "TextContent",
    "Title",
    "VideoUrl",
]
