"""Sidecar metadata loading."""

import json
from pathlib import Path
from typing import Any

from aws_lambda_powertools import Logger

from core.utils.constants import SIDECAR_SUFFIX

logger = Logger(UTC=True)


def sidecar_path(image_path: Path) -> Path:
    """Return the sidecar location for an image (``<image>.json``)."""
    return image_path.with_name(image_path.name + SIDECAR_SUFFIX)


class SidecarMetadataReader:
    """Load the JSON sidecar stored next to an image file.

    The reader is tolerant by contract: a missing, unreadable or
    malformed sidecar is reported as absent metadata and never fails
    the scan. Only "is it a JSON object" is checked here; field access
    goes through ``core.utils.fields``.
    """

    def read(self, image_path: Path) -> dict[str, Any] | None:
        """
        Read and parse the sidecar of ``image_path``.

        Args:
            image_path: Path of the image file (not of the sidecar)

        Returns:
            The parsed JSON object, or None when absent or unusable
        """
        path = sidecar_path(image_path)

        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug(
                "Unreadable sidecar metadata",
                extra={"path": str(path), "error": str(exc)},
            )
            return None

        try:
            document = json.loads(text)
        except ValueError as exc:
            logger.debug(
                "Invalid sidecar metadata",
                extra={"path": str(path), "error": str(exc)},
            )
            return None

        if not isinstance(document, dict):
            logger.debug(
                "Sidecar metadata is not an object",
                extra={"path": str(path), "type": type(document).__name__},
            )
            return None

        return document
