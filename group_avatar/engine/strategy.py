"""
Color strategies for the partition engine.
"""

from enum import Enum
from typing import Union


class ColorStrategy(Enum):
    """
    How cell colors are chosen.

    ZONED draws two-participant pairs from one curated zone with collision
    avoidance. FLAT gives every participant its own palette color, the same
    color a single-participant avatar would get.
    """
    ZONED = "zoned"
    FLAT = "flat"

    @classmethod
    def coerce(cls, value: Union["ColorStrategy", str]) -> "ColorStrategy":
        """
        Accept a ColorStrategy or its string value.

        Raises:
            ValueError: If the string is not a known strategy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown color strategy: {value!r} (expected 'zoned' or 'flat')")
