"""Item models produced by the library scan."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from core.utils.time import display_date as format_display_date


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Comment(CamelModel):
    """A single comment attached to an image."""

    author: str = Field("", description="Comment author display name")
    text: str = Field("", description="Comment body")
    date: str | None = Field(None, description="Comment date as found in metadata")


class Item(CamelModel):
    """One physical image file belonging to exactly one artist."""

    artist_id: str = Field(..., description="Artist directory name")
    file_name: str = Field(..., description="Image file name, unique within the artist")
    media_ref: str = Field(..., description="Locator used to fetch the image bytes")

    numeric_id: int | None = Field(None, description="Metadata id or digits from the file name")
    post_id: int | None = Field(None, description="Identifier shared by pages of one post")
    page_index: int = Field(0, ge=0, description="Order of this page within its post")

    title: str = ""
    caption: str = ""
    tags: list[str] = Field(default_factory=list)
    create_date: str | None = Field(None, description="ISO-8601 creation date from metadata")

    likes: int | None = Field(None, ge=0)
    views: int | None = Field(None, ge=0)
    comments: list[Comment] = Field(default_factory=list)

    raw_metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Parsed sidecar document, empty when absent",
    )

    @computed_field(alias="displayDate")  # type: ignore[prop-decorator]
    @property
    def display_date(self) -> str:
        return format_display_date(self.create_date)


class PageSummary(CamelModel):
    """Lightweight description of one page inside a grouped post."""

    media_ref: str
    file_name: str
    page_index: int = 0
    numeric_id: int | None = None
    title: str = ""

    @classmethod
    def from_item(cls, item: Item) -> "PageSummary":
        return cls(
            media_ref=item.media_ref,
            file_name=item.file_name,
            page_index=item.page_index,
            numeric_id=item.numeric_id,
            title=item.title,
        )


class GroupedItem(Item):
    """Representative first page of a post, carrying every page of the post."""

    group_count: int = Field(..., ge=1, description="Number of pages in the post")
    group_pages: list[PageSummary] = Field(
        default_factory=list,
        description="Pages of the post ordered by page index",
    )
