"""
Group Avatar - Data Models
==========================
This package contains data models for participants, themes, colors and
avatar cell geometry.
"""

from group_avatar.models.color import (
    Color, ColorError, parse_color, get_contrast_color, WHITE, BLACK
)
from group_avatar.models.participant import Participant
from group_avatar.models.theme import Theme
from group_avatar.models.layout import (
    Rect, LayoutSlot, Layout, ResolvedAssignment
)

__all__ = [
    'Color', 'ColorError', 'parse_color', 'get_contrast_color', 'WHITE', 'BLACK',
    'Participant', 'Theme',
    'Rect', 'LayoutSlot', 'Layout', 'ResolvedAssignment'
]
