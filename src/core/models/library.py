"""Library aggregate and view response models."""

from typing import Literal

from pydantic import Field, StrictBool, StrictInt, StrictStr

from core.models.item import CamelModel, GroupedItem, Item


class ArtistProfile(CamelModel):
    """Artist details derived from item metadata; never authoritative."""

    name: StrictStr = Field(..., description="Display name, defaults to the artist id")
    username: StrictStr = Field("", description="Account name on the source site")
    description: StrictStr = Field("", description="Profile text")
    image_url: StrictStr = Field("", description="Avatar URL")


class ArtistPreview(CamelModel):
    """Summary of an artist's most recent item."""

    media_ref: StrictStr
    title: StrictStr = ""


class LibraryTotals(CamelModel):
    artists: StrictInt = Field(..., ge=0)
    pictures: StrictInt = Field(..., ge=0)


class LibraryIndex(CamelModel):
    """Full library snapshot built from one filesystem scan."""

    root: StrictStr = Field(..., description="Directory the snapshot was taken from")
    artist_list: list[StrictStr] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list, description="All items, library order")
    items_by_artist: dict[str, list[Item]] = Field(default_factory=dict)
    artist_counts: dict[str, int] = Field(default_factory=dict)
    artist_profiles: dict[str, ArtistProfile] = Field(default_factory=dict)
    artist_previews: dict[str, ArtistPreview | None] = Field(default_factory=dict)

    @property
    def totals(self) -> LibraryTotals:
        return LibraryTotals(artists=len(self.artist_list), pictures=len(self.items))

    def has_artist(self, artist_id: str) -> bool:
        return artist_id in self.items_by_artist


class LibraryViewResponse(CamelModel):
    """JSON view returned for one library query.

    Every request-derived field holds the resolved value, which may
    differ from what the caller asked for.
    """

    artist_list: list[StrictStr]
    totals: LibraryTotals
    artist_counts: dict[str, int]
    artist_profiles: dict[str, ArtistProfile]
    artist_previews: dict[str, ArtistPreview | None]

    selected_artist: StrictStr
    tags: list[StrictStr]
    title: StrictStr
    group_by_post: StrictBool

    page: StrictInt
    per_page: StrictInt | Literal["all"]
    total_items: StrictInt
    total_pages: StrictInt

    items: list[GroupedItem | Item]
