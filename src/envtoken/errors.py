"""Error classes and helpers for envtoken.

Validation failures are modelled as structured exceptions carrying a
stable code, a human readable message and optional details. They are
collected as data during a validation pass (see `collection.py`) and
only raised by the fail-fast helper `require_environment`.

Errors are immutable once created: their fields cannot be reassigned,
`details` is a read-only mapping, and payloads are fresh copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(eq=False)
class EnvTokenError(Exception):
    """Base envtoken error with a code and optional details."""

    _read_only: ClassVar[Tuple[str, ...]] = ("code", "message", "details")

    code: str
    message: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        if self.details is not None:
            object.__setattr__(self, "details", _freeze(self.details))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._read_only and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = _thaw(self.details)
        return payload


class KeyNotSetError(EnvTokenError):
    """A required key is absent from the environment."""

    def __init__(self, key: str) -> None:
        super().__init__("KEY_NOT_SET", f"key {key}, not set", {"key": key})
        self._key = key

    @property
    def key(self) -> str:
        return self._key


class KeyEmptyValueError(EnvTokenError):
    """A required key is present in the environment with an empty value."""

    def __init__(self, key: str) -> None:
        super().__init__(
            "KEY_EMPTY_VALUE", f"key {key}, value is empty", {"key": key}
        )
        self._key = key

    @property
    def key(self) -> str:
        return self._key


class InvalidEnvironmentError(EnvTokenError):
    """Aggregate of every validation error found in one pass.

    The message starts with a summary line followed by one line per
    error, in the order given.
    """

    _read_only = EnvTokenError._read_only + ("errors",)

    def __init__(self, errors: Sequence[EnvTokenError]) -> None:
        self.errors: Tuple[EnvTokenError, ...] = tuple(errors)
        lines = [f"Invalid environment, {len(self.errors)} error(s):"]
        lines.extend(e.message for e in self.errors)
        super().__init__(
            "INVALID_ENVIRONMENT",
            "\n".join(lines),
            {
                "count": len(self.errors),
                "errors": [e.to_payload() for e in self.errors],
            },
        )


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Examples:
        >>> to_error_payload(KeyNotSetError("DB_URL"))["code"]
        'KEY_NOT_SET'
        >>> to_error_payload(RuntimeError("boom"))["code"]
        'INTERNAL'
    """

    if isinstance(error, EnvTokenError):
        return error.to_payload()
    return {"code": "INTERNAL", "message": str(error)}
