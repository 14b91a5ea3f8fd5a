"""
Artist profile extraction from sidecar metadata.

Downloaders disagree on where artist details live (``user.name``,
``user_name``, ``userName``, ...). Each profile field is resolved by an
explicit, ordered chain of key paths; the first non-blank string wins.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from core.models.item import Item
from core.models.library import ArtistProfile
from core.utils.fields import dig, first_non_empty_string

KeyPath = tuple[str, ...]

NAME_PATHS: Sequence[KeyPath] = (
    ("userName",),
    ("user_name",),
    ("artist_name",),
    ("user", "name"),
)

USERNAME_PATHS: Sequence[KeyPath] = (
    ("userAccount",),
    ("user_account",),
    ("account",),
    ("user", "account"),
    ("user", "username"),
)

DESCRIPTION_PATHS: Sequence[KeyPath] = (
    ("userComment",),
    ("user_comment",),
    ("description",),
    ("profile", "comment"),
    ("user", "comment"),
)

IMAGE_URL_PATHS: Sequence[KeyPath] = (
    ("user_profile_image_urls", "medium"),
    ("user_profile_image_urls", "px_170x170"),
    ("userProfileImageUrls", "medium"),
    ("userProfileImageUrls", "px170x170"),
    ("profile_image_urls", "medium"),
    ("profileImageUrls", "medium"),
    ("user", "profile_image_urls", "medium"),
    ("user", "profileImageUrls", "medium"),
    ("user", "profile_image_url"),
    ("user", "profileImageUrl"),
)


def extract_field(meta: Mapping[str, Any] | None, paths: Sequence[KeyPath]) -> str:
    """Return the first non-blank string found along ``paths``, else ""."""
    if not meta:
        return ""
    return first_non_empty_string(dig(meta, *path) for path in paths)


def _first_across(items: Iterable[Item], paths: Sequence[KeyPath]) -> str:
    for item in items:
        value = extract_field(item.raw_metadata, paths)
        if value:
            return value
    return ""


def build_artist_profile(artist_id: str, items: Sequence[Item]) -> ArtistProfile:
    """
    Derive an artist profile from the artist's items.

    Each field comes from the first item (in the given order) that
    yields a value for it, so fields may come from different items.
    The name falls back to the artist id.
    """
    return ArtistProfile(
        name=_first_across(items, NAME_PATHS) or artist_id,
        username=_first_across(items, USERNAME_PATHS),
        description=_first_across(items, DESCRIPTION_PATHS),
        image_url=_first_across(items, IMAGE_URL_PATHS),
    )
