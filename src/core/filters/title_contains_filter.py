"""Title-based filtering for items."""

from core.models.item import Item


class TitleContainsFilter:
    """Filter items by title using case-insensitive substring search.

    An empty query matches every item, so callers can pass the
    normalized request value through unconditionally.
    """

    @staticmethod
    def normalize(query: str | None) -> str:
        """Trim and lowercase a raw title query."""
        return (query or "").strip().lower()

    @staticmethod
    def matches(item: Item, query: str) -> bool:
        if not query:
            return True
        return query in item.title.lower()

    @classmethod
    def apply(cls, items: list[Item], query: str | None) -> list[Item]:
        """Return the items whose title contains ``query``."""
        normalized = cls.normalize(query)
        if not normalized:
            return items

        return [item for item in items if cls.matches(item, normalized)]
