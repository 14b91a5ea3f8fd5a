"""
Pydantic models for the library view request.
"""

import re
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from core.filters.tag_contains_filter import TagContainsFilter
from core.filters.title_contains_filter import TitleContainsFilter
from core.utils.constants import (
    ALLOWED_PER_PAGE,
    ARTIST_ALL,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    GROUP_BY_POST_TRUE_VALUES,
    PER_PAGE_ALL,
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: Any) -> int | None:
    """Parse the leading integer of a value ("3abc" -> 3)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def _first(value: Any) -> Any:
    """Collapse a repeated query parameter to its first value."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class LibraryViewRequest(BaseModel):
    """
    Normalization model for the library view API.

    Unlike most request models this one never rejects input: every
    malformed value is replaced by the nearest valid default, and the
    resolved values are echoed back in the response.

    Parameters:
    - artist       → artist id or "all"
    - tag / tags   → repeatable, comma-separated tag fragments
    - title        → title substring
    - groupByPost  → "1", "true" or "yes" enable grouping
    - page         → 1-based page number
    - perPage      → 20, 50, 100, 200, 500 or "all"
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    artist: str = Field(default=ARTIST_ALL, description="Artist id or 'all'")
    tags: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("tag", "tags"),
        description="Lowercase tag fragments; all must match",
    )
    title: str = Field(default="", description="Lowercase title substring")
    group_by_post: bool = Field(default=False, description="Collapse multi-page posts")
    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Requested page (1-based)")
    per_page: int | Literal["all"] = Field(
        default=DEFAULT_PER_PAGE,
        description="Page size or 'all'",
    )

    @field_validator("artist", mode="before")
    @classmethod
    def normalize_artist(cls, value: Any) -> str:
        value = _first(value)
        if not isinstance(value, str) or not value.strip():
            return ARTIST_ALL
        return value.strip()

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> list[str]:
        """Split on commas, trim, lowercase and de-duplicate.

        Input:  ["Red, blue", "RED"]
        Output: ["red", "blue"]
        """
        if isinstance(value, tuple):
            value = list(value)
        if not isinstance(value, (str, list)):
            return []
        return TagContainsFilter.normalize(value)

    @field_validator("title", mode="before")
    @classmethod
    def normalize_title(cls, value: Any) -> str:
        value = _first(value)
        if not isinstance(value, str):
            return ""
        return TitleContainsFilter.normalize(value)

    @field_validator("group_by_post", mode="before")
    @classmethod
    def normalize_group_by_post(cls, value: Any) -> bool:
        value = _first(value)
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() in GROUP_BY_POST_TRUE_VALUES

    @field_validator("page", mode="before")
    @classmethod
    def normalize_page(cls, value: Any) -> int:
        """Non-numeric or non-positive pages become the first page."""
        parsed = _leading_int(_first(value))
        if parsed is None or parsed < 1:
            return DEFAULT_PAGE
        return parsed

    @field_validator("per_page", mode="before")
    @classmethod
    def normalize_per_page(cls, value: Any) -> int | str:
        """Unrecognized page sizes fall back to the default size."""
        value = _first(value)
        if isinstance(value, str) and value.strip().lower() == PER_PAGE_ALL:
            return PER_PAGE_ALL

        parsed = _leading_int(value)
        if parsed in ALLOWED_PER_PAGE:
            return parsed
        return DEFAULT_PER_PAGE

    @classmethod
    def params_from_event(cls, event: Mapping[str, Any]) -> dict[str, Any]:
        """
        Merge API Gateway single and multi-value query parameters.

        Repeated ``tag`` parameters only survive in
        ``multiValueQueryStringParameters``, so that source wins for tags.
        """
        params: dict[str, Any] = dict(event.get("queryStringParameters") or {})
        multi = event.get("multiValueQueryStringParameters") or {}

        if multi.get("tag"):
            params["tag"] = list(multi["tag"])

        return params
