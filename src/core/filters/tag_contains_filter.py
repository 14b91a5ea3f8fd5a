"""Tag-based filtering for items."""

from collections.abc import Iterable

from core.models.item import Item
from core.utils.constants import TAG_SEPARATOR


class TagContainsFilter:
    """Filter items by a set of tag fragments.

    An item matches when every requested fragment is a case-insensitive
    substring of at least one of the item's tags. Requesting "red" and
    "blue" therefore keeps an item tagged ["redhead", "blue sky"] and
    drops one tagged ["redhead"].
    """

    @staticmethod
    def normalize(raw_tags: Iterable[str] | str | None) -> list[str]:
        """
        Normalize raw tag parameters.

        Entries are split on commas, trimmed, lowercased and
        de-duplicated, keeping first-seen order.

        Example:
            ["Red, blue", "red", " "] -> ["red", "blue"]
        """
        if raw_tags is None:
            return []
        if isinstance(raw_tags, str):
            raw_tags = [raw_tags]

        seen: set[str] = set()
        normalized: list[str] = []
        for entry in raw_tags:
            if not isinstance(entry, str):
                continue
            for part in entry.split(TAG_SEPARATOR):
                tag = part.strip().lower()
                if not tag or tag in seen:
                    continue
                seen.add(tag)
                normalized.append(tag)
        return normalized

    @staticmethod
    def matches(item: Item, tags: list[str]) -> bool:
        if not tags:
            return True
        lowered = [tag.lower() for tag in item.tags]
        return all(any(needle in tag for tag in lowered) for needle in tags)

    @classmethod
    def apply(cls, items: list[Item], tags: list[str]) -> list[Item]:
        """Return the items matching every tag in ``tags``."""
        if not tags:
            return items

        return [item for item in items if cls.matches(item, tags)]
