"""envtoken package.

Declare environment-backed configuration keys as tokens, validate them
in a single pass that collects every missing or empty required key, and
read typed values with defaults.

Usage example:
    from envtoken import build_environment, new_token

    env, errors = build_environment([
        new_token("KEY1", "default"),
        new_token("KEY2", required=True),
    ])
    if errors is not None:
        print(errors.aggregate_error())
"""

import logging

from .booleans import boolean_from_environment_variable, parse_boolean
from .collection import ErrorCollection
from .environment import Environment, build_environment, require_environment
from .errors import (
    EnvTokenError,
    InvalidEnvironmentError,
    KeyEmptyValueError,
    KeyNotSetError,
    to_error_payload,
)
from .lookup import EnvLookup, dotenv_lookup, lookup_from_settings, process_lookup
from .token import EnvToken, new_token

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "EnvToken",
    "new_token",
    "parse_boolean",
    "boolean_from_environment_variable",
    "ErrorCollection",
    "Environment",
    "build_environment",
    "require_environment",
    "EnvTokenError",
    "KeyNotSetError",
    "KeyEmptyValueError",
    "InvalidEnvironmentError",
    "to_error_payload",
    "EnvLookup",
    "process_lookup",
    "dotenv_lookup",
    "lookup_from_settings",
]

__version__ = "0.1.0"
