"""Accumulator for validation errors found during one validation pass."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .errors import (
    EnvTokenError,
    InvalidEnvironmentError,
    KeyEmptyValueError,
    KeyNotSetError,
)


class ErrorCollection:
    """Collects not-set and empty-value errors in encounter order.

    Errors are never deduplicated. When rendered, empty-value errors come
    first, then not-set errors.

    Example:
        >>> errors = ErrorCollection()
        >>> _ = errors.add_key_not_set("X")
        >>> _ = errors.add_key_not_set("Y")
        >>> print(errors.aggregate_error())
        Invalid environment, 2 error(s):
        key X, not set
        key Y, not set
    """

    def __init__(self) -> None:
        self._empty_value_errors: List[KeyEmptyValueError] = []
        self._not_set_errors: List[KeyNotSetError] = []

    def add_key_not_set(self, key: str) -> KeyNotSetError:
        err = KeyNotSetError(key)
        self._not_set_errors.append(err)
        return err

    def add_key_empty_value(self, key: str) -> KeyEmptyValueError:
        err = KeyEmptyValueError(key)
        self._empty_value_errors.append(err)
        return err

    @property
    def empty_value_errors(self) -> Tuple[KeyEmptyValueError, ...]:
        return tuple(self._empty_value_errors)

    @property
    def not_set_errors(self) -> Tuple[KeyNotSetError, ...]:
        return tuple(self._not_set_errors)

    def errors(self) -> List[EnvTokenError]:
        """All errors in rendering order."""
        return [*self._empty_value_errors, *self._not_set_errors]

    def is_empty(self) -> bool:
        return not self._empty_value_errors and not self._not_set_errors

    def __len__(self) -> int:
        return len(self._empty_value_errors) + len(self._not_set_errors)

    def aggregate_error(self) -> Optional[InvalidEnvironmentError]:
        """Combine every collected error into one, or None when empty."""
        if self.is_empty():
            return None
        return InvalidEnvironmentError(self.errors())
