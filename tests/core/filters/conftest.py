from collections.abc import Callable

import pytest

from core.models.item import Item


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """
    Helper to build an Item with sensible defaults.

    Usage:
        item = make_item("500_p1.jpg", post_id=500, page_index=1, tags=["red"])
    """

    def _make(file_name: str, **fields: object) -> Item:
        artist_id = str(fields.pop("artist_id", "1001"))
        return Item(
            artist_id=artist_id,
            file_name=file_name,
            media_ref=f"/media/{artist_id}/{file_name}",
            **fields,
        )

    return _make
