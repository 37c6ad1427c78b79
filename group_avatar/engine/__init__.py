"""
Group Avatar - Engine
=====================
Hashing, palettes, zones, layouts and the partition engine.
"""

from group_avatar.engine.hasher import digest, group_digest, resolve_label
from group_avatar.engine.palette import (
    LIGHT_PALETTE, DARK_PALETTE, BACKDROP, palette, flat_color
)
from group_avatar.engine.zones import (
    Zone, Orientation, LIGHT_ZONES, DARK_ZONES, zones, select_zone,
    orientation_for, zone_indices, pair_colors
)
from group_avatar.engine.layout import (
    DEFAULT_GAP, single_layout, pair_layout, triple_layout, grid_layout,
    layout_variant, select_layout, describe_layout
)
from group_avatar.engine.overflow import (
    MAX_CELLS, DEFAULT_OVERFLOW_MARKER, overflow_index, reduce_overflow
)
from group_avatar.engine.strategy import ColorStrategy
from group_avatar.engine.partition import AvatarEngine, to_participant

__all__ = [
    'digest', 'group_digest', 'resolve_label',
    'LIGHT_PALETTE', 'DARK_PALETTE', 'BACKDROP', 'palette', 'flat_color',
    'Zone', 'Orientation', 'LIGHT_ZONES', 'DARK_ZONES', 'zones', 'select_zone',
    'orientation_for', 'zone_indices', 'pair_colors',
    'DEFAULT_GAP', 'single_layout', 'pair_layout', 'triple_layout', 'grid_layout',
    'layout_variant', 'select_layout', 'describe_layout',
    'MAX_CELLS', 'DEFAULT_OVERFLOW_MARKER', 'overflow_index', 'reduce_overflow',
    'ColorStrategy',
    'AvatarEngine', 'to_participant'
]
