"""
Palette store: the fixed avatar palettes for each theme.
"""

from typing import Dict, Tuple, Union

from group_avatar.engine.hasher import digest
from group_avatar.models.color import Color
from group_avatar.models.theme import Theme

Palette = Tuple[Color, ...]

LIGHT_PALETTE: Palette = tuple(Color.from_hex(h) for h in (
    "#FF5A5F",  # coral
    "#4A90E2",  # blue
    "#43B89C",  # green
    "#9B72CF",  # lavender
    "#FF9F1C",  # orange
    "#2EC4B6",  # teal
    "#FF6584",  # pink
    "#6D28D9",  # violet
))

DARK_PALETTE: Palette = tuple(Color.from_hex(h) for h in (
    "#e91e63",  # pink
    "#9c27b0",  # purple
    "#673ab7",  # deep purple
    "#3f51b5",  # indigo
    "#2196f3",  # blue
    "#03a9f4",  # light blue
    "#00bcd4",  # cyan
    "#009688",  # teal
    "#4caf50",  # green
    "#8bc34a",  # light green
    "#ff9800",  # orange
    "#ff5722",  # deep orange
))

_PALETTES: Dict[Theme, Palette] = {
    Theme.LIGHT: LIGHT_PALETTE,
    Theme.DARK: DARK_PALETTE,
}

# Backdrop visible through the gaps between cells
BACKDROP: Dict[Theme, Color] = {
    Theme.LIGHT: Color.from_hex("#EEF0F3"),
    Theme.DARK: Color.from_hex("#1F2328"),
}


def palette(theme: Union[Theme, str]) -> Palette:
    """Return the palette for `theme`."""
    return _PALETTES[Theme.coerce(theme)]


def flat_color(label: str, theme: Union[Theme, str]) -> Color:
    """Single-participant color: `digest(label) % len(palette)`."""
    colors = palette(theme)
    return colors[digest(label) % len(colors)]
