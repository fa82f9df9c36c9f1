"""Environment registry and the validation pass that builds it.

Public API:
    - Environment
    - build_environment
    - require_environment

Usage example:
    tokens = [
        new_token("LOG_FORMAT", default_value="json"),
        new_token("DATABASE_URL", required=True),
    ]
    env, errors = build_environment(tokens)
    if errors is not None:
        print(errors.aggregate_error())
    fmt = env.get_value("LOG_FORMAT")
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, KeysView, Optional, Tuple

from .booleans import parse_boolean
from .collection import ErrorCollection
from .errors import InvalidEnvironmentError
from .lookup import EnvLookup, process_lookup
from .token import EnvToken

logger = logging.getLogger(__name__)


class Environment:
    """Registry of resolved tokens keyed by environment variable name."""

    def __init__(self, tokens: Optional[Iterable[EnvToken]] = None) -> None:
        self._tokens: Dict[str, EnvToken] = {}
        for token in tokens or ():
            self.add(token)

    def add(self, token: EnvToken) -> None:
        """Insert ``token``; a token with the same key is replaced."""
        self._tokens[token.key] = token

    def get(self, key: str) -> Optional[EnvToken]:
        return self._tokens.get(key)

    def get_value(self, key: str) -> Optional[str]:
        """Return the resolved value, else the default, else None.

        Empty strings never count as a value: an empty resolved value
        falls back to the default, and an empty default yields None.
        """

        token = self.get(key)
        if token is None:
            return None
        if token.value:
            return token.value
        if token.default_value:
            return token.default_value
        return None

    def get_boolean(self, key: str) -> bool:
        value = self.get_value(key)
        if value is None:
            return False
        return parse_boolean(value)

    def keys(self) -> KeysView[str]:
        return self._tokens.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Environment(keys={sorted(self._tokens)!r})"


def build_environment(
    tokens: Iterable[EnvToken], lookup: Optional[EnvLookup] = None
) -> Tuple[Environment, Optional[ErrorCollection]]:
    """Validate ``tokens`` against the environment and build a registry.

    Required tokens that are unset or empty are recorded in an
    `ErrorCollection` and left out of the registry; every other token is
    resolved and added. Nothing is raised for validation failures.

    Args:
        tokens: Token declarations, processed in order.
        lookup: Environment lookup; defaults to the process environment.

    Returns:
        The registry, plus the error collection when at least one token
        failed (None otherwise). The registry is returned in both cases.
    """

    lookup = lookup or process_lookup
    env = Environment()
    errors = ErrorCollection()

    for token in tokens:
        value = lookup(token.key)
        if token.required:
            if value is None:
                token.set_value(None)
                errors.add_key_not_set(token.key)
                logger.debug("required key %s is not set", token.key)
                continue
            if value == "":
                token.set_value(None)
                errors.add_key_empty_value(token.key)
                logger.debug("required key %s has an empty value", token.key)
                continue
        token.set_value(value)
        env.add(token)

    logger.debug(
        "environment built: %d token(s) resolved, %d error(s)", len(env), len(errors)
    )
    if errors.is_empty():
        return env, None
    return env, errors


def require_environment(
    tokens: Iterable[EnvToken], lookup: Optional[EnvLookup] = None
) -> Environment:
    """Build the environment or fail fast.

    Raises:
        InvalidEnvironmentError: listing every missing or empty required key.
    """

    env, errors = build_environment(tokens, lookup)
    if errors is not None:
        raise InvalidEnvironmentError(errors.errors())
    return env
