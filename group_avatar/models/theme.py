"""
Theme Model Module
==================
This module defines the UI theme enumeration.
"""

from enum import Enum
from typing import Union


class Theme(Enum):
    """Enumeration of UI themes an avatar can be rendered for."""
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def coerce(cls, value: Union["Theme", str]) -> "Theme":
        """
        Accept a Theme or its string value.

        Raises:
            ValueError: If the string is not a known theme
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown theme: {value!r} (expected 'light' or 'dark')")
