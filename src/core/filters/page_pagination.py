"""
Page-based pagination utilities.
"""

import math
from typing import Literal, TypeVar

from core.models.pagination import PageWindow
from core.utils.constants import PER_PAGE_ALL

T = TypeVar("T")


class PagePagination:
    """
    Page-number pagination helper.

    Out-of-range requests are corrected, never rejected:
    - ``per_page="all"`` returns everything on a single page
    - a page beyond the last one is clamped to the last page
    - a page below 1 is clamped to 1

    Typical usage:
    1. Resolve the window for the total item count
    2. Slice the items with the window
    """

    @staticmethod
    def resolve(
        total_items: int,
        *,
        page: int,
        per_page: int | Literal["all"],
    ) -> PageWindow:
        """
        Compute the effective page window.

        Args:
            total_items: Number of items available before pagination
            page: Requested page (1-based)
            per_page: Requested page size, or "all"

        Returns:
            PageWindow with clamped page and total page count

        Example:
            resolve(10, page=5, per_page=20)
            → page=1, page_size=20, total_pages=1
        """
        if per_page == PER_PAGE_ALL:
            page_size = total_items or 1
        else:
            page_size = max(1, int(per_page))

        total_pages = max(1, math.ceil(total_items / page_size))
        clamped_page = min(max(1, page), total_pages)

        return PageWindow(
            page=clamped_page,
            per_page=per_page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
        )

    @staticmethod
    def paginate(items: list[T], window: PageWindow) -> list[T]:
        """Return the slice of ``items`` covered by ``window``."""
        return items[window.start : window.end]
