"""
Item filtering service for library views.

Provides a coordination layer that applies filtering, grouping and
pagination strategies to in-memory item collections. This service does
not perform filesystem access and operates on an already built index.
"""

from typing import Literal

from aws_lambda_powertools import Logger

from core.filters.page_pagination import PagePagination
from core.filters.post_grouper import PostGrouper
from core.filters.tag_contains_filter import TagContainsFilter
from core.filters.title_contains_filter import TitleContainsFilter
from core.models.item import GroupedItem, Item
from core.models.pagination import PageWindow

logger = Logger(UTC=True)


class InMemoryItemFilter:
    """
    Service responsible for refining and paginating library items.

    IMPORTANT:
    - Filtering always happens before grouping. A post whose other
      pages were filtered out shows up as a single-page group.
    """

    def __init__(self) -> None:
        """Initialize filter components used for orchestration."""
        self._tag_filter: TagContainsFilter = TagContainsFilter()
        self._title_filter: TitleContainsFilter = TitleContainsFilter()
        self._grouper: PostGrouper = PostGrouper()
        self._pagination: PagePagination = PagePagination()

    def filter_by_tags(self, items: list[Item], *, tags: list[str]) -> list[Item]:
        """
        Keep items matching every requested tag fragment.

        Args:
            items: Items to filter
            tags: Normalized (lowercase, trimmed) tag fragments

        Returns:
            Filtered list of items
        """
        return self._tag_filter.apply(items, tags)

    def filter_by_title(self, items: list[Item], *, title: str) -> list[Item]:
        """Keep items whose title contains ``title``, case-insensitively."""
        return self._title_filter.apply(items, title)

    def group_by_post(self, items: list[Item]) -> list[GroupedItem]:
        """Collapse pages of the same post into one grouped entry."""
        return self._grouper.apply(items)

    def refine(
        self,
        items: list[Item],
        *,
        tags: list[str],
        title: str,
        group_by_post: bool,
    ) -> list[Item]:
        """Apply tag filter, title filter and optional grouping, in that order."""
        refined = self.filter_by_tags(items, tags=tags)
        refined = self.filter_by_title(refined, title=title)

        if group_by_post:
            grouped: list[Item] = list(self.group_by_post(refined))
            refined = grouped

        logger.debug(
            "Items refined",
            extra={
                "input_count": len(items),
                "output_count": len(refined),
                "tags": tags,
                "title": title,
                "group_by_post": group_by_post,
            },
        )
        return refined

    def paginate(
        self,
        items: list[Item],
        *,
        page: int,
        per_page: int | Literal["all"],
    ) -> tuple[list[Item], PageWindow]:
        """
        Apply page-based pagination to a list of items.

        Args:
            items: Refined items in display order
            page: Requested page (clamped into range)
            per_page: Requested page size or "all"

        Returns:
            A tuple of (page_items, window)
        """
        window = self._pagination.resolve(len(items), page=page, per_page=per_page)
        return self._pagination.paginate(items, window), window
