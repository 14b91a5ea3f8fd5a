"""Environment-driven configuration for the gallery service."""

import os
from pathlib import Path

from core.models.errors import ConfigurationError
from core.utils.constants import (
    DEFAULT_MEDIA_PREFIX,
    ENV_GALLERY_MEDIA_PREFIX,
    ENV_GALLERY_ROOT,
    ERROR_CODE_GALLERY_ROOT_MISSING,
)


def get_gallery_root() -> Path:
    """Return the configured library root.

    Raises:
        ConfigurationError: If ``GALLERY_ROOT`` is unset or blank
    """
    raw = os.getenv(ENV_GALLERY_ROOT, "").strip()
    if not raw:
        raise ConfigurationError(
            message=f"{ENV_GALLERY_ROOT} environment variable is not set",
            error_code=ERROR_CODE_GALLERY_ROOT_MISSING,
            details={"variable": ENV_GALLERY_ROOT},
        )

    return Path(raw).expanduser().resolve()


def get_media_prefix() -> str:
    """Return the URL prefix used when building media references."""
    prefix = os.getenv(ENV_GALLERY_MEDIA_PREFIX, "").strip() or DEFAULT_MEDIA_PREFIX
    return prefix.rstrip("/")
