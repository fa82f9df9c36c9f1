"""Token model describing one environment-backed configuration key."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class EnvToken(BaseModel):
    """One configuration key.

    Attributes:
        key: Environment variable name.
        required: Whether validation fails when the key is absent or empty.
        default_value: Fallback used by `Environment.get_value`.
        value: Resolved value, set once while building an `Environment`.
            ``None`` means the key was never resolved; ``""`` means it
            was present and empty.
    """

    key: str = Field(min_length=1)
    required: bool = False
    default_value: Optional[str] = None
    value: Optional[str] = None

    def set_value(self, value: Optional[str]) -> None:
        self.value = value


def new_token(
    key: str, default_value: Optional[str] = None, required: bool = False
) -> EnvToken:
    """Return an unresolved token for ``key``.

    Example:
        >>> new_token("DATABASE_URL", required=True).value is None
        True
    """

    return EnvToken(key=key, default_value=default_value, required=required)
