"""Library settings for envtoken.

These settings tune how envtoken itself reads the environment; they are
not the tokens an application declares. Use the following environment
variables:

```bash
export ENVTOKEN_DOTENV_PATH="~/myapp/.env"
export ENVTOKEN_DOTENV_OVERRIDE=false
export ENVTOKEN_LOG_LEVEL=DEBUG
```

and read them like this:
```python
from envtoken.config import load_settings
settings = load_settings()
print(settings.dotenv_path)
```
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _expand_path(p: str | Path | None) -> Path | None:
    """Expand ~ and environment variables in a path-like value."""
    if p is None or p == "":
        return None
    s = str(p) if isinstance(p, Path) else p
    return Path(os.path.expanduser(os.path.expandvars(s)))


class EnvTokenSettings(BaseSettings):
    """envtoken settings loaded from ENVTOKEN_-prefixed variables."""

    dotenv_path: Optional[Path] = Field(
        default=None,
        description="Optional .env file consulted in addition to the process environment",
    )
    dotenv_override: bool = Field(
        default=False,
        description="Let values from the .env file override the process environment",
    )
    log_level: str = Field(
        default="WARNING", description="Logging level applied by consumers"
    )

    model_config = SettingsConfigDict(
        env_prefix="ENVTOKEN_",
        case_sensitive=False,
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("dotenv_path", mode="before")
    @classmethod
    def _expand_dotenv_path(cls, v):
        return _expand_path(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings() -> EnvTokenSettings:
    """Load envtoken settings from the environment (and ./.env if present)."""
    return EnvTokenSettings()
