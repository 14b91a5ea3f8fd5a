"""
Business logic for resolving library views.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from aws_lambda_powertools import Logger

from core.filters.in_memory_item_filter import InMemoryItemFilter
from core.library.artist_scanner import ArtistScanner
from core.library.index_builder import LibraryIndexBuilder
from core.models.library import LibraryIndex, LibraryViewResponse
from core.utils.config import get_gallery_root, get_media_prefix
from core.utils.constants import ARTIST_ALL

from .models import LibraryViewRequest

logger = Logger(UTC=True)


class LibraryViewService:
    """Application service answering library view queries.

    This service coordinates:
    - Scanning the library root into a fresh LibraryIndex
    - Resolving the requested artist
    - Applying tag/title filters and optional post grouping
    - Clamping and applying pagination

    No state is kept between calls; every query sees the filesystem
    as it is at that moment.
    """

    def __init__(
        self,
        root: Path | None = None,
        *,
        media_prefix: str | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            root: Library root; read from GALLERY_ROOT when omitted
            media_prefix: Media URL prefix; read from GALLERY_MEDIA_PREFIX when omitted

        Raises:
            ConfigurationError: If no root is given and GALLERY_ROOT is unset
        """
        root = root if root is not None else get_gallery_root()
        prefix = media_prefix if media_prefix is not None else get_media_prefix()

        self.index_builder = LibraryIndexBuilder(
            Path(root),
            ArtistScanner(media_prefix=prefix),
        )
        self.filters = InMemoryItemFilter()

    def resolve_view(
        self,
        request: LibraryViewRequest | Mapping[str, Any] | None = None,
    ) -> LibraryViewResponse:
        """Build the library view for ``request``.

        Raw parameter mappings are normalized first, so this never
        raises for malformed input.
        """
        if not isinstance(request, LibraryViewRequest):
            request = LibraryViewRequest.model_validate(dict(request or {}))

        # Step 1: Fresh snapshot of the filesystem
        index = self.index_builder.build()

        # Step 2: Resolve the artist, unknown ids mean "all"
        artist = self._resolve_artist(index, request.artist)
        source = index.items if artist == ARTIST_ALL else index.items_by_artist[artist]

        # Step 3: Filter, then group
        refined = self.filters.refine(
            source,
            tags=request.tags,
            title=request.title,
            group_by_post=request.group_by_post,
        )

        # Step 4: Paginate with clamping
        page_items, window = self.filters.paginate(
            refined,
            page=request.page,
            per_page=request.per_page,
        )

        logger.info(
            "Library view resolved",
            extra={
                "artist": artist,
                "tags": request.tags,
                "title": request.title,
                "group_by_post": request.group_by_post,
                "page": window.page,
                "total_items": window.total_items,
                "count": len(page_items),
            },
        )

        return LibraryViewResponse(
            artist_list=index.artist_list,
            totals=index.totals,
            artist_counts=index.artist_counts,
            artist_profiles=index.artist_profiles,
            artist_previews=index.artist_previews,
            selected_artist=artist,
            tags=request.tags,
            title=request.title,
            group_by_post=request.group_by_post,
            page=window.page,
            per_page=window.per_page,
            total_items=window.total_items,
            total_pages=window.total_pages,
            items=page_items,
        )

    @staticmethod
    def _resolve_artist(index: LibraryIndex, requested: str) -> str:
        if requested == ARTIST_ALL or index.has_artist(requested):
            return requested

        logger.info(
            "Unknown artist requested, falling back to all",
            extra={"requested_artist": requested},
        )
        return ARTIST_ALL
