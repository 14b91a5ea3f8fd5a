"""
Library index construction.

The library root holds one directory per artist, named by the artist's
numeric id. A root without such directories is treated as a single
artist's folder so the service can be pointed straight at one artist.
"""

from pathlib import Path

from aws_lambda_powertools import Logger

from core.library.artist_scanner import ArtistScanner
from core.library.ordering import library_sort_key
from core.library.profile_extractors import build_artist_profile
from core.models.item import Item
from core.models.library import ArtistPreview, LibraryIndex
from core.utils.constants import SINGLE_ARTIST_ID

logger = Logger(UTC=True)


def is_numeric_name(name: str) -> bool:
    return name.isdecimal()


class LibraryIndexBuilder:
    """Build a fresh LibraryIndex from the filesystem on every call."""

    def __init__(self, root: Path, scanner: ArtistScanner | None = None) -> None:
        """
        Args:
            root: Library root directory
            scanner: Artist scanner, a default one is created if omitted
        """
        self.root = Path(root)
        self._scanner = scanner or ArtistScanner()

    def discover_artists(self) -> dict[str, Path]:
        """Map artist ids to their directories."""
        try:
            artist_dirs = {
                entry.name: entry
                for entry in self.root.iterdir()
                if entry.is_dir() and is_numeric_name(entry.name)
            }
        except OSError as exc:
            logger.warning(
                "Unable to read library root",
                extra={"root": str(self.root), "error": str(exc)},
            )
            artist_dirs = {}

        if artist_dirs:
            return artist_dirs

        root_name = self.root.name
        artist_id = root_name if is_numeric_name(root_name) else SINGLE_ARTIST_ID
        return {artist_id: self.root}

    def build(self) -> LibraryIndex:
        """Scan every artist and aggregate the results."""
        artists = self.discover_artists()
        artist_list = sorted(artists)

        items_by_artist: dict[str, list[Item]] = {}
        all_items: list[Item] = []

        for artist_id in artist_list:
            items = self._scanner.scan(artist_id, artists[artist_id])
            items_by_artist[artist_id] = items
            all_items.extend(items)

        all_items.sort(key=library_sort_key)

        index = LibraryIndex(
            root=str(self.root),
            artist_list=artist_list,
            items=all_items,
            items_by_artist=items_by_artist,
            artist_counts={
                artist_id: len(items) for artist_id, items in items_by_artist.items()
            },
            artist_profiles={
                artist_id: build_artist_profile(artist_id, items)
                for artist_id, items in items_by_artist.items()
            },
            artist_previews={
                artist_id: self._preview(items)
                for artist_id, items in items_by_artist.items()
            },
        )

        logger.info(
            "Library indexed",
            extra={
                "root": str(self.root),
                "artists": len(artist_list),
                "pictures": len(all_items),
            },
        )
        return index

    @staticmethod
    def _preview(items: list[Item]) -> ArtistPreview | None:
        if not items:
            return None
        latest = items[0]
        return ArtistPreview(media_ref=latest.media_ref, title=latest.title)
