"""Boolean parsing helpers."""

from __future__ import annotations

from typing import Optional

from .lookup import EnvLookup, process_lookup

_TRUTHY = frozenset({"true", "yes", "1"})


def parse_boolean(value: str) -> bool:
    """Return True for 'true', 'yes' or '1' (trimmed, any case).

    Anything else, the empty string included, is False.

    Example:
        >>> parse_boolean(" YES ")
        True
        >>> parse_boolean("2")
        False
    """

    return value.strip().lower() in _TRUTHY


def boolean_from_environment_variable(
    key: str, lookup: Optional[EnvLookup] = None
) -> bool:
    """Parse the raw environment value of ``key``; unset reads as ''."""

    lookup = lookup or process_lookup
    return parse_boolean(lookup(key) or "")
