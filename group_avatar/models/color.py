"""
Color model for avatar cells.
Provides an immutable color value parsed from hex or rgb() strings, with
luminance and contrast helpers used to pick readable glyph colors.
"""

from typing import Dict, Tuple, Union

from group_avatar.core import memoize
from group_avatar.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type definitions
RGB = Tuple[int, int, int]
ColorValue = Union[str, RGB]

# Constants
DEFAULT_ALPHA = 1.0

_NAMED_COLORS: Dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
}


class ColorError(Exception):
    """Custom exception for color-related errors."""
    pass


class Color:
    """
    Immutable RGBA color.

    Equality and hashing use the normalized components, so "#FF5A5F" and
    "#ff5a5f" are the same color.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_hash')

    def __init__(self, value: ColorValue, alpha: float = DEFAULT_ALPHA):
        """
        Initialize a color from a hex/rgb()/named string or an RGB tuple.

        Raises:
            ColorError: If the value can't be parsed
        """
        if isinstance(value, str):
            r, g, b, a = self._parse_color_string(value)
        elif isinstance(value, tuple) and len(value) == 3:
            if not all(isinstance(c, (int, float)) for c in value):
                raise ColorError(f"RGB values must be numbers, got {value}")
            r, g, b = (min(255, max(0, int(c))) for c in value)
            a = alpha
        else:
            raise ColorError(f"Unsupported color format: {value!r}")

        self._r = r
        self._g = g
        self._b = b
        self._a = round(min(1.0, max(0.0, float(a))), 4)
        self._hash = hash((self._r, self._g, self._b, self._a))

    @classmethod
    def from_hex(cls, hex_string: str) -> 'Color':
        """Create a color from a hex string such as "#FF5A5F"."""
        return _color_from_hex(hex_string)

    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    @property
    def alpha(self) -> float:
        return self._a

    @property
    def rgb(self) -> RGB:
        return (self._r, self._g, self._b)

    @property
    def hex(self) -> str:
        """Get hex color string without alpha."""
        return f"#{self._r:02x}{self._g:02x}{self._b:02x}"

    @property
    def luminance(self) -> float:
        """
        Calculate relative luminance according to WCAG 2.0.

        Returns:
            Luminance value between 0 (black) and 1 (white)
        """
        def channel(c: int) -> float:
            c = c / 255
            return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

        return 0.2126 * channel(self._r) + 0.7152 * channel(self._g) + 0.0722 * channel(self._b)

    def contrast_ratio(self, other: 'Color') -> float:
        """
        Calculate the WCAG contrast ratio between two colors.

        Returns:
            Contrast ratio between 1 and 21
        """
        l1 = self.luminance
        l2 = other.luminance
        lighter, darker = max(l1, l2), min(l1, l2)
        return (lighter + 0.05) / (darker + 0.05)

    def to_svg_string(self) -> str:
        """Get the SVG fill representation."""
        if self._a < 1.0:
            return f"rgba({self._r},{self._g},{self._b},{self._a})"
        return self.hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb and self._a == other._a

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"Color('{self.hex}', alpha={self._a})"

    @staticmethod
    def _parse_color_string(value: str) -> Tuple[int, int, int, float]:
        value = value.strip().lower()

        if value in _NAMED_COLORS:
            r, g, b = _NAMED_COLORS[value]
            return r, g, b, DEFAULT_ALPHA

        if value.startswith('#'):
            return Color._parse_hex(value)

        if value.startswith('rgb'):
            return Color._parse_rgb(value)

        raise ColorError(f"Unsupported color format: {value}")

    @staticmethod
    def _parse_hex(hex_string: str) -> Tuple[int, int, int, float]:
        hex_string = hex_string.lstrip('#')

        try:
            if len(hex_string) == 3:
                r, g, b = (int(ch + ch, 16) for ch in hex_string)
                return r, g, b, DEFAULT_ALPHA

            if len(hex_string) in (6, 8):
                r = int(hex_string[0:2], 16)
                g = int(hex_string[2:4], 16)
                b = int(hex_string[4:6], 16)
                a = int(hex_string[6:8], 16) / 255 if len(hex_string) == 8 else DEFAULT_ALPHA
                return r, g, b, a
        except ValueError:
            raise ColorError(f"Invalid hex digits in: #{hex_string}")

        raise ColorError(f"Invalid hex color format: #{hex_string}")

    @staticmethod
    def _parse_rgb(rgb_string: str) -> Tuple[int, int, int, float]:
        is_rgba = rgb_string.startswith('rgba')
        values_str = rgb_string[rgb_string.find('(') + 1:rgb_string.find(')')].split(',')

        if is_rgba and len(values_str) != 4:
            raise ColorError(f"Invalid rgba format: {rgb_string}")
        elif not is_rgba and len(values_str) != 3:
            raise ColorError(f"Invalid rgb format: {rgb_string}")

        try:
            r, g, b = [min(255, max(0, int(v.strip()))) for v in values_str[:3]]
            a = float(values_str[3].strip()) if is_rgba else DEFAULT_ALPHA
        except ValueError:
            raise ColorError(f"Invalid RGB values in: {rgb_string}")

        return r, g, b, a


@memoize
def _color_from_hex(hex_string: str) -> Color:
    return Color(hex_string if hex_string.startswith('#') else f"#{hex_string}")


def parse_color(value: str) -> Color:
    """
    Parse a color string.

    Raises:
        ColorError: If the string is not a supported color
    """
    if value.strip().startswith('#'):
        return Color.from_hex(value.strip())
    return Color(value)


WHITE = Color((255, 255, 255))
BLACK = Color((0, 0, 0))


@memoize
def get_contrast_color(
    color: Color,
    light_color: Color = WHITE,
    dark_color: Color = BLACK
) -> Color:
    """
    Get the glyph color (light or dark) with the better contrast on `color`.

    Args:
        color: Background color
        light_color: Light color to use (default: white)
        dark_color: Dark color to use (default: black)

    Returns:
        Contrasting color
    """
    if color.contrast_ratio(light_color) >= color.contrast_ratio(dark_color):
        return light_color
    return dark_color
