"""
Configuration defaults, loading and the engine composition root.
"""

from group_avatar.config.default import DEFAULT_CONFIG
from group_avatar.config.loader import (
    ConfigError, load_settings, validate_settings, build_engine
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "load_settings",
    "validate_settings",
    "build_engine",
]
