"""
Core module for process-wide settings and small performance helpers.
"""

import os
import logging
import functools
import threading
from typing import Dict, Any, Callable


logger = logging.getLogger(__name__)

# Process-level settings shared by the engine helpers
CONFIG: Dict[str, Any] = {
    # Memoization
    "memo_threshold": int(os.environ.get("GROUP_AVATAR_MEMO_THRESHOLD", "4096")),

    # Performance settings
    "enable_profiling": os.environ.get("GROUP_AVATAR_PROFILE", "false").lower() == "true",
}


def memoize(func: Callable) -> Callable:
    """Thread-safe memoization decorator for caching pure function results."""
    cache = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Create a hashable key from the arguments
        key = (args, tuple(sorted(kwargs.items())))
        with lock:
            if key in cache:
                return cache[key]

        result = func(*args, **kwargs)

        with lock:
            cache[key] = result

            # Simple cache size management
            if len(cache) > CONFIG["memo_threshold"]:
                # Remove oldest 25% of entries when threshold is reached
                remove_count = max(1, len(cache) // 4)
                for _ in range(remove_count):
                    if cache:
                        cache.pop(next(iter(cache)))

        return result

    def cache_clear():
        with lock:
            cache.clear()

    wrapper.cache_clear = cache_clear
    wrapper.cache_size = lambda: len(cache)
    return wrapper


class Profiler:
    """Simple context manager for timing a block at debug level."""
    def __init__(self, name: str, enabled: bool = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        import time
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        import time
        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"Profiling completed: {self.name} - {self.duration:.6f}s")


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the core module configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update
    """
    unknown = set(settings) - set(CONFIG)
    if unknown:
        raise KeyError(f"Unknown core settings: {', '.join(sorted(unknown))}")

    CONFIG.update(settings)
    logger.info(f"Core configuration updated: {', '.join(settings.keys())}")


__all__ = [
    "CONFIG",
    "memoize",
    "Profiler",
    "configure",
]
