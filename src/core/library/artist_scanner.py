"""
Per-artist directory scanning.

Turns one artist directory into a sorted list of Items. Scanning is
best-effort: an unreadable directory produces no items, and a broken
sidecar produces an item with default fields.
"""

from pathlib import Path
from typing import Any
from urllib.parse import quote

from aws_lambda_powertools import Logger

from core.library.metadata_reader import SidecarMetadataReader
from core.library.ordering import item_sort_key
from core.library.post_grouping import numeric_from_name, resolve_post_grouping
from core.models.item import Comment, Item
from core.utils.constants import DEFAULT_MEDIA_PREFIX, IMAGE_EXTENSIONS
from core.utils.fields import (
    as_int,
    as_non_negative_int,
    as_optional_str,
    as_str,
    as_str_list,
    dig,
)

logger = Logger(UTC=True)


def is_image_file(name: str) -> bool:
    """Check whether a file name has a recognized image extension."""
    ext = Path(name).suffix.lower().lstrip(".")
    return ext in IMAGE_EXTENSIONS


def build_media_ref(artist_id: str, file_name: str, prefix: str = DEFAULT_MEDIA_PREFIX) -> str:
    return f"{prefix}/{quote(artist_id, safe='')}/{quote(file_name, safe='')}"


def _comments_from(meta: dict[str, Any]) -> list[Comment]:
    raw = meta.get("comments")
    if not isinstance(raw, list):
        return []

    comments: list[Comment] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        comments.append(
            Comment(
                author=as_str(dig(entry, "user", "name")),
                text=as_str(entry.get("comment")),
                date=as_optional_str(entry.get("date")),
            )
        )
    return comments


class ArtistScanner:
    """Build Items for the image files of one artist directory."""

    def __init__(
        self,
        reader: SidecarMetadataReader | None = None,
        *,
        media_prefix: str = DEFAULT_MEDIA_PREFIX,
    ) -> None:
        self._reader = reader or SidecarMetadataReader()
        self._media_prefix = media_prefix

    def scan(self, artist_id: str, directory: Path) -> list[Item]:
        """
        Scan ``directory`` for images of ``artist_id``.

        Args:
            artist_id: Identifier stored on every produced item
            directory: Directory holding the image files

        Returns:
            Items in canonical order; empty if the directory cannot be read
        """
        try:
            names = sorted(
                entry.name
                for entry in directory.iterdir()
                if entry.is_file() and is_image_file(entry.name)
            )
        except OSError as exc:
            logger.warning(
                "Unable to read artist directory",
                extra={
                    "artist_id": artist_id,
                    "directory": str(directory),
                    "error": str(exc),
                },
            )
            return []

        items = [self.build_item(artist_id, directory / name) for name in names]
        items.sort(key=item_sort_key)

        logger.debug(
            "Artist scanned",
            extra={"artist_id": artist_id, "count": len(items)},
        )
        return items

    def build_item(self, artist_id: str, image_path: Path) -> Item:
        """Build one Item from an image file and its sidecar."""
        meta = self._reader.read(image_path) or {}
        file_name = image_path.name

        meta_id = as_int(meta.get("id"))
        grouping = resolve_post_grouping(image_path.stem, meta_id)

        return Item(
            artist_id=artist_id,
            file_name=file_name,
            media_ref=build_media_ref(artist_id, file_name, self._media_prefix),
            numeric_id=meta_id or numeric_from_name(file_name),
            post_id=grouping.post_id,
            page_index=grouping.page_index,
            title=as_str(meta.get("title")),
            caption=as_str(meta.get("caption")),
            tags=as_str_list(meta.get("tags")),
            create_date=as_optional_str(meta.get("create_date"))
            or as_optional_str(meta.get("date")),
            likes=as_non_negative_int(meta.get("total_bookmarks")),
            views=as_non_negative_int(meta.get("total_view")),
            comments=_comments_from(meta),
            raw_metadata=meta,
        )
