"""
Canonical sort keys.

All orderings are total: after the documented criteria, ties fall
back to identifiers so the result never depends on directory listing
order.
"""

from core.models.item import Item
from core.utils.time import sort_timestamp


def item_sort_key(item: Item) -> tuple[float, int, int, str]:
    """Newest first, then higher post id, then page order, then file name."""
    return (
        -sort_timestamp(item.create_date),
        -(item.post_id or 0),
        item.page_index,
        item.file_name,
    )


def library_sort_key(item: Item) -> tuple[float, int, int, str, str]:
    """Item order across artists; artist id breaks otherwise equal keys."""
    newest, post, page, file_name = item_sort_key(item)
    return (newest, post, page, item.artist_id, file_name)


def group_sort_key(representative: Item, group_key: int) -> tuple[float, int, str, int]:
    """Order post groups by their first page's date and post id."""
    return (
        -sort_timestamp(representative.create_date),
        -(representative.post_id or 0),
        representative.artist_id,
        group_key,
    )
