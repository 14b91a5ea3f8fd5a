"""
Pytest configuration and fixtures for gallery service tests.
Provides helpers that build artist library trees under tmp_path.
"""

import base64
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)

ImageWriter = Callable[..., Path]


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """Empty library root directory."""
    root = tmp_path / "library"
    root.mkdir()
    return root


@pytest.fixture
def write_image() -> ImageWriter:
    """
    Helper to create an image file, optionally with sidecar metadata.

    Usage:
        path = write_image(root / "123", "900_p0.jpg", {"id": 900})
        path = write_image(root / "123", "broken.jpg", sidecar_text="{not json")
    """

    def _write(
        directory: Path,
        file_name: str,
        meta: dict[str, Any] | None = None,
        *,
        sidecar_text: str | None = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        image_path = directory / file_name
        image_path.write_bytes(PNG_1X1)

        sidecar = directory / f"{file_name}.json"
        if sidecar_text is not None:
            sidecar.write_text(sidecar_text, encoding="utf-8")
        elif meta is not None:
            sidecar.write_text(json.dumps(meta), encoding="utf-8")

        return image_path

    return _write


@pytest.fixture
def populated_library(library_root: Path, write_image: ImageWriter) -> Path:
    """
    Two artists with multi-page posts, different dates and tags.

    Artist 1001 (user "Mika"):
        500_p0.jpg, 500_p1.jpg   2024-03-01  tags sunset, redsky
        501.png                  2024-02-01  tags harbor, blue
    Artist 1002 (user "Ren"):
        700_p0.jpg               2024-04-01  tags redhead, portrait
        notes.txt                (ignored)
        800.webp                 no metadata
    """
    artist_a = library_root / "1001"
    user_a = {"name": "Mika", "account": "mika_draws"}
    write_image(
        artist_a,
        "500_p0.jpg",
        {
            "id": 500,
            "title": "Red Sunset",
            "tags": ["sunset", "redsky"],
            "create_date": "2024-03-01T10:00:00+00:00",
            "total_bookmarks": 12,
            "total_view": 340,
            "user": user_a,
        },
    )
    write_image(
        artist_a,
        "500_p1.jpg",
        {
            "id": 500,
            "title": "Red Sunset",
            "tags": ["sunset", "redsky"],
            "create_date": "2024-03-01T10:00:00+00:00",
            "user": user_a,
        },
    )
    write_image(
        artist_a,
        "501.png",
        {
            "id": 501,
            "title": "Blue Harbor",
            "tags": ["harbor", "blue"],
            "create_date": "2024-02-01T10:00:00+00:00",
            "user": user_a,
        },
    )

    artist_b = library_root / "1002"
    write_image(
        artist_b,
        "700_p0.jpg",
        {
            "id": 700,
            "title": "Portrait",
            "tags": ["redhead", "portrait"],
            "create_date": "2024-04-01T10:00:00+00:00",
            "user": {"name": "Ren", "account": "ren_sketch"},
        },
    )
    (artist_b / "notes.txt").write_text("not an image", encoding="utf-8")
    write_image(artist_b, "800.webp")

    return library_root
