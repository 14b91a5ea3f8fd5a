"""
Post grouping resolution.

Downloaded files follow several naming conventions for multi-page
posts. This module maps a file name (plus the metadata id, when
known) to a ``(post_id, page_index)`` pair, degrading to an
ungrouped single page rather than failing.

Resolution order, first match wins:

1. Purely numeric stem prefixed by the metadata id:
   ``12345601`` with id ``123456`` -> post 123456, page 1
2. Explicit page patterns:
   ``123_p4``, ``123-p4``, ``123_4``, ``123-4`` -> post 123, page 4
3. Fallback: metadata id, else the first digit run of the stem,
   else no post; page 0
"""

import re
from typing import NamedTuple

_DIGITS = re.compile(r"\d+")

_PAGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(\d+)_p(\d+)$", re.IGNORECASE),
    re.compile(r"^(\d+)-p(\d+)$", re.IGNORECASE),
    re.compile(r"^(\d+)[_-](\d+)$"),
)


class PostGrouping(NamedTuple):
    post_id: int | None
    page_index: int


def numeric_from_name(name: str) -> int | None:
    """Return the first run of digits in ``name`` as an int."""
    match = _DIGITS.search(name)
    return int(match.group(0)) if match else None


def resolve_post_grouping(stem: str, meta_id: int | None = None) -> PostGrouping:
    """
    Derive the post and page of a file.

    Args:
        stem: File name without its extension
        meta_id: ``id`` from the sidecar metadata, if any

    Returns:
        PostGrouping with a non-negative page index
    """
    meta_id = meta_id if meta_id and meta_id > 0 else None

    if meta_id is not None and stem.isdecimal():
        prefix = str(meta_id)
        if stem.startswith(prefix):
            suffix = stem[len(prefix):]
            return PostGrouping(meta_id, int(suffix) if suffix else 0)

    for pattern in _PAGE_PATTERNS:
        match = pattern.match(stem)
        if match:
            return PostGrouping(int(match.group(1)), int(match.group(2)))

    fallback = meta_id or numeric_from_name(stem)
    return PostGrouping(fallback or None, 0)
