"""Environment lookup capability.

An `EnvLookup` returns the raw value for a key, or None when the key is
not present at all. The registry only reads the environment through
this capability, so tests can pass a plain ``dict.get``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, Optional, Union

from dotenv import dotenv_values

if TYPE_CHECKING:
    from .config import EnvTokenSettings

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]


def process_lookup(key: str) -> Optional[str]:
    """Read ``key`` from the process environment."""
    return os.environ.get(key)


def dotenv_lookup(path: Union[str, Path], *, override: bool = False) -> EnvLookup:
    """Return a lookup backed by the process environment and a .env file.

    The file is read once. By default the process environment wins and
    the file only fills gaps; with ``override`` the file wins. Keys
    declared without a value in the file count as absent. A missing file
    behaves like an empty one.
    """

    path = Path(path)
    values: Dict[str, Optional[str]] = {}
    if path.is_file():
        values = dict(dotenv_values(path))
    else:
        logger.debug("dotenv file %s not found, using process environment only", path)

    def lookup(key: str) -> Optional[str]:
        file_value = values.get(key)
        if override and file_value is not None:
            return file_value
        env_value = os.environ.get(key)
        if env_value is not None:
            return env_value
        return file_value

    return lookup


def lookup_from_settings(settings: EnvTokenSettings) -> EnvLookup:
    """Pick the lookup described by ``settings``."""
    if settings.dotenv_path is None:
        return process_lookup
    return dotenv_lookup(settings.dotenv_path, override=settings.dotenv_override)
