"""Settings for envtoken itself.

Exposes `load_settings`, which reads ENVTOKEN_-prefixed environment
variables into a typed, immutable `EnvTokenSettings`.
"""

from .env import EnvTokenSettings, load_settings

__all__ = ["EnvTokenSettings", "load_settings"]
