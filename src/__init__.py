"""Artist Gallery Library Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Filesystem-backed artist gallery index and query service for AWS Lambda"
)

__all__ = ["handlers", "core"]
