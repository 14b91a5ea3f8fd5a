#!/usr/bin/env python3
"""
Seed script to create a sample gallery library on disk.

Writes one directory per artist with tiny placeholder images and
sidecar metadata, using the naming conventions the scanner understands,
then runs a library view against the result.

Run:
    pip install -e . && python seed/seed_library.py --root /tmp/gallery
"""

import argparse
import base64
import json
import sys
from pathlib import Path
from typing import Any, cast

from aws_lambda_powertools import Logger

from handlers.list_library.service import LibraryViewService

logger = Logger(service="seed")

# 1x1 transparent PNG
PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed a sample gallery library")

    parser.add_argument(
        "--root",
        required=True,
        type=Path,
        help="Directory to create the library in",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite files that already exist",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "library.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def page_file_name(post_id: int, page: int, naming: str) -> str:
    """Return the file name of one page for a naming convention."""
    if naming == "p":
        return f"{post_id}_p{page}.png"
    if naming == "dash":
        return f"{post_id}-{page}.png"
    if naming == "numeric":
        return f"{post_id}{page}.png"
    return f"{post_id}.png"


def write_post(
    artist_dir: Path,
    post: dict[str, Any],
    user: dict[str, Any],
    *,
    overwrite: bool,
) -> int:
    written = 0
    post_id = int(post["id"])

    for page in range(int(post.get("pages", 1))):
        image_path = artist_dir / page_file_name(post_id, page, post.get("naming", "p"))
        if image_path.exists() and not overwrite:
            logger.warning("File exists, skipping", extra={"path": str(image_path)})
            continue

        image_path.write_bytes(PLACEHOLDER_PNG)

        meta = {key: value for key, value in post.items() if key not in {"pages", "naming"}}
        meta["user"] = user
        sidecar = image_path.with_name(image_path.name + ".json")
        sidecar.write_text(json.dumps(meta, ensure_ascii=False, indent=2), encoding="utf-8")
        written += 1

    return written


def seed_library() -> None:
    try:
        args = parse_args()
        data = load_sample_data()
        root: Path = args.root.expanduser().resolve()
        root.mkdir(parents=True, exist_ok=True)

        logger.info("Starting seeding process", extra={"root": str(root)})

        for artist in cast(list[dict[str, Any]], data.get("artists", [])):
            artist_dir = root / str(artist["artist_id"])
            artist_dir.mkdir(exist_ok=True)

            for post in cast(list[dict[str, Any]], artist.get("posts", [])):
                written = write_post(
                    artist_dir,
                    post,
                    artist.get("user", {}),
                    overwrite=args.overwrite,
                )
                logger.info(
                    "Seeded post",
                    extra={"artist_id": artist["artist_id"], "post_id": post["id"], "files": written},
                )

        logger.info("Seeding completed")

        view = LibraryViewService(root).resolve_view({"groupByPost": "1", "perPage": "all"})
        logger.info(
            "Library view response",
            extra={
                "totals": view.totals.model_dump(),
                "artist_counts": view.artist_counts,
                "groups": view.total_items,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_library()
