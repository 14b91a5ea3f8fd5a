"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Configuration Errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"
ERROR_CODE_GALLERY_ROOT_MISSING = "GALLERY_ROOT_MISSING"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Library Layout
# ============================================================================

IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"jpg", "jpeg", "png", "webp", "gif"}
)

SIDECAR_SUFFIX = ".json"

# Artist id used when the root holds one artist's files directly
SINGLE_ARTIST_ID = "single"

DEFAULT_MEDIA_PREFIX = "/media"

UNKNOWN_DATE_LABEL = "unknown"


# ============================================================================
# Query Constraints
# ============================================================================

ARTIST_ALL = "all"

PER_PAGE_ALL = "all"
ALLOWED_PER_PAGE: Final[tuple[int, ...]] = (20, 50, 100, 200, 500)
DEFAULT_PER_PAGE = 100
DEFAULT_PAGE = 1

GROUP_BY_POST_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes"})

TAG_SEPARATOR = ","


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"
CACHE_CONTROL = "no-store"

# ============================================================================
# Observability
# ============================================================================

METRICS_NAMESPACE = "ArtistGallery"
METRIC_LIBRARY_QUERIES = "LibraryQueries"
METRIC_ITEMS_RETURNED = "ItemsReturned"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_GALLERY_ROOT = "GALLERY_ROOT"
ENV_GALLERY_MEDIA_PREFIX = "GALLERY_MEDIA_PREFIX"
