"""
Settings loading and the engine composition root.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from group_avatar.cache.color_cache import ConversationColorCache
from group_avatar.config.default import DEFAULT_CONFIG
from group_avatar.engine.partition import AvatarEngine
from group_avatar.engine.strategy import ColorStrategy
from group_avatar.models.theme import Theme
from group_avatar.utils.io import load_config
from group_avatar.utils.logger import log_function_call

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "GROUP_AVATAR_STRATEGY": ("color_strategy", str),
    "GROUP_AVATAR_THEME": ("theme", str),
    "GROUP_AVATAR_LOG_LEVEL": ("log_level", str),
    "GROUP_AVATAR_CACHE_SIZE": ("cache_max_conversations", int),
}


class ConfigError(Exception):
    """Raised when settings are unknown or out of range."""
    pass


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Build validated settings.

    Precedence, lowest first: DEFAULT_CONFIG, the JSON file, environment
    variables, explicit overrides (None values in overrides are ignored).

    Args:
        config_path: Optional JSON configuration file
        overrides: Optional explicit settings, e.g. from the command line
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings dictionary

    Raises:
        ConfigError: If a key is unknown or a value is invalid
    """
    settings = dict(DEFAULT_CONFIG)

    if config_path:
        file_settings = load_config(config_path)
        _check_keys(file_settings, f"config file {config_path}")
        settings.update(file_settings)

    environ = os.environ if environ is None else environ
    for var, (key, cast) in ENV_OVERRIDES.items():
        if environ.get(var):
            try:
                settings[key] = cast(environ[var])
            except ValueError:
                raise ConfigError(f"Invalid value for {var}: {environ[var]!r}")

    if overrides:
        explicit = {k: v for k, v in overrides.items() if v is not None}
        _check_keys(explicit, "overrides")
        settings.update(explicit)

    validate_settings(settings)
    return settings


def validate_settings(settings: Dict[str, Any]) -> None:
    """
    Check value types and ranges.

    Raises:
        ConfigError: On the first invalid setting
    """
    try:
        ColorStrategy.coerce(settings["color_strategy"])
        Theme.coerce(settings["theme"])
    except ValueError as e:
        raise ConfigError(str(e))

    for key in ("avatar_size", "raster_size"):
        if not isinstance(settings[key], (int, float)) or settings[key] <= 0:
            raise ConfigError(f"{key} must be a positive number, got {settings[key]!r}")

    gap = settings["cell_gap"]
    if not isinstance(gap, (int, float)) or not 0 <= gap < settings["avatar_size"]:
        raise ConfigError(f"cell_gap must be between 0 and avatar_size, got {gap!r}")

    cache_size = settings["cache_max_conversations"]
    if cache_size is not None and (not isinstance(cache_size, int) or cache_size < 1):
        raise ConfigError(f"cache_max_conversations must be a positive integer or null, got {cache_size!r}")

    marker = settings["overflow_marker"]
    if not isinstance(marker, str) or not marker:
        raise ConfigError("overflow_marker must be a non-empty string")


@log_function_call()
def build_engine(settings: Optional[Dict[str, Any]] = None) -> AvatarEngine:
    """
    Create the session's cache and engine from settings.

    Call once per application session and pass the engine to the views that
    render avatars or color sender names.
    """
    settings = settings or load_settings()
    cache = ConversationColorCache(max_conversations=settings["cache_max_conversations"])
    engine = AvatarEngine(
        strategy=settings["color_strategy"],
        cache=cache,
        gap=settings["cell_gap"] / settings["avatar_size"],
        overflow_marker=settings["overflow_marker"],
    )
    logger.debug(f"Built avatar engine ({engine.strategy.value}, cache={cache.max_conversations})")
    return engine


def _check_keys(values: Dict[str, Any], source: str) -> None:
    unknown = sorted(set(values) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"Unknown setting(s) in {source}: {', '.join(unknown)}")
