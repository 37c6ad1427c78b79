"""
Group Avatar Package
====================
Deterministic partitioned avatars for conversations: the same participants
always get the same cells and colors, in every view and across restarts.
"""

__version__ = "0.1.0"

from group_avatar.models import Participant, Theme, Color, ResolvedAssignment
from group_avatar.engine import (
    AvatarEngine, ColorStrategy, digest, group_digest, palette, flat_color
)
from group_avatar.cache import ConversationColorCache
from group_avatar.rendering import SVGAvatarRenderer
from group_avatar.config import load_settings, build_engine

__all__ = [
    'Participant',
    'Theme',
    'Color',
    'ResolvedAssignment',
    'AvatarEngine',
    'ColorStrategy',
    'digest',
    'group_digest',
    'palette',
    'flat_color',
    'ConversationColorCache',
    'SVGAvatarRenderer',
    'load_settings',
    'build_engine',
]
