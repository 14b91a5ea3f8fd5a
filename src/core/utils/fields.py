"""
Defensive accessors for loosely-typed sidecar metadata.

Sidecar documents come from several downloaders and none of their
fields can be trusted to exist or to have the expected type. Every
helper here returns a safe default instead of raising.
"""

from collections.abc import Iterable, Mapping
from typing import Any

Metadata = Mapping[str, Any]


def dig(meta: Any, *keys: str) -> Any:
    """Follow a chain of mapping keys, returning None on any miss.

    Example:
        dig({"user": {"name": "Ann"}}, "user", "name") -> "Ann"
        dig({"user": "Ann"}, "user", "name")         -> None
    """
    current = meta
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def as_str(value: Any, default: str = "") -> str:
    if isinstance(value, str):
        return value
    return default


def as_optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def as_int(value: Any) -> int | None:
    """Coerce ints, integral floats and digit strings; reject everything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def as_non_negative_int(value: Any) -> int | None:
    number = as_int(value)
    if number is None or number < 0:
        return None
    return number


def as_str_list(value: Any) -> list[str]:
    """Return the string entries of a list.

    ``{"name": "..."}`` entries are unwrapped, other entries dropped.
    """
    if not isinstance(value, list):
        return []

    result: list[str] = []
    for entry in value:
        if isinstance(entry, str):
            result.append(entry)
        elif isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
            result.append(entry["name"])
    return result


def first_non_empty_string(values: Iterable[Any]) -> str:
    """Return the first value that is a non-blank string, trimmed."""
    for value in values:
        if not isinstance(value, str):
            continue
        trimmed = value.strip()
        if trimmed:
            return trimmed
    return ""
