"""Collapse multi-page posts into grouped view entries."""

from core.library.ordering import group_sort_key
from core.library.post_grouping import numeric_from_name
from core.models.item import GroupedItem, Item, PageSummary


class PostGrouper:
    """Group items by ``(artist_id, post id)``.

    Items without a post id fall back to their numeric id, then to the
    digits in their file name, then to 0. Each group is represented by
    its first page; groups are ordered like items, using the
    representative's date and post id.
    """

    @staticmethod
    def group_key(item: Item) -> tuple[str, int]:
        fallback = item.numeric_id or numeric_from_name(item.file_name) or 0
        return item.artist_id, item.post_id or fallback

    @classmethod
    def apply(cls, items: list[Item]) -> list[GroupedItem]:
        groups: dict[tuple[str, int], list[Item]] = {}
        for item in items:
            groups.setdefault(cls.group_key(item), []).append(item)

        grouped: list[tuple[tuple[float, int, str, int], GroupedItem]] = []
        for (_, post_key), pages in groups.items():
            pages.sort(key=lambda page: (page.page_index, page.file_name))
            first = pages[0]
            representative = GroupedItem(
                **first.model_dump(exclude={"display_date"}),
                group_count=len(pages),
                group_pages=[PageSummary.from_item(page) for page in pages],
            )
            grouped.append((group_sort_key(first, post_key), representative))

        grouped.sort(key=lambda entry: entry[0])
        return [entry for _, entry in grouped]
