"""
Layout selection: the fixed tilings of the avatar square.

Every layout tiles the unit square with a constant gap between neighbouring
cells. `h` below is the side of a half cell: (1 - gap) / 2.
"""

from typing import Dict

from group_avatar.engine.zones import Orientation, orientation_for
from group_avatar.models.layout import Layout, LayoutSlot, Rect

# 1.5px gap on the reference 54px avatar
DEFAULT_GAP = 1.5 / 54

THREE_CELL_VARIANTS = 4


def _half(gap: float) -> float:
    return (1.0 - gap) / 2


def _slots(*rects: Rect) -> Layout:
    return tuple(LayoutSlot(rect=rect, cell_index=i) for i, rect in enumerate(rects))


def single_layout(gap: float = DEFAULT_GAP) -> Layout:
    return _slots(Rect(0.0, 0.0, 1.0, 1.0))


def pair_layout(orientation: Orientation, gap: float = DEFAULT_GAP) -> Layout:
    """Two half cells: top/bottom for horizontal, left/right for vertical."""
    h = _half(gap)
    if orientation is Orientation.HORIZONTAL:
        return _slots(Rect(0.0, 0.0, 1.0, h), Rect(0.0, 1.0 - h, 1.0, h))
    return _slots(Rect(0.0, 0.0, h, 1.0), Rect(1.0 - h, 0.0, h, 1.0))


def triple_layout(variant: int, gap: float = DEFAULT_GAP) -> Layout:
    """
    One double cell and two quarter cells, in four rotations.

    0: big left; first participant left, others top-right and bottom-right
    1: big right; first two participants top-left and bottom-left
    2: big top; first participant top, others bottom-left and bottom-right
    3: big bottom; first two participants top-left and top-right
    """
    h = _half(gap)
    far = 1.0 - h
    variant = variant % THREE_CELL_VARIANTS
    if variant == 0:
        return _slots(Rect(0.0, 0.0, h, 1.0), Rect(far, 0.0, h, h), Rect(far, far, h, h))
    if variant == 1:
        return _slots(Rect(0.0, 0.0, h, h), Rect(0.0, far, h, h), Rect(far, 0.0, h, 1.0))
    if variant == 2:
        return _slots(Rect(0.0, 0.0, 1.0, h), Rect(0.0, far, h, h), Rect(far, far, h, h))
    return _slots(Rect(0.0, 0.0, h, h), Rect(far, 0.0, h, h), Rect(0.0, far, 1.0, h))


def grid_layout(gap: float = DEFAULT_GAP) -> Layout:
    """2x2 grid: top-left, top-right, bottom-left, bottom-right."""
    h = _half(gap)
    far = 1.0 - h
    return _slots(Rect(0.0, 0.0, h, h), Rect(far, 0.0, h, h), Rect(0.0, far, h, h), Rect(far, far, h, h))


def layout_variant(count: int, group_hash: int) -> int:
    """
    Structural variant for a participant count.

    Counts 2 and 3 have variants (orientation, big-cell rotation); every
    other count has exactly one layout and returns 0.
    """
    if count == 2:
        return 0 if orientation_for(group_hash) is Orientation.HORIZONTAL else 1
    if count == 3:
        return group_hash % THREE_CELL_VARIANTS
    return 0


def select_layout(count: int, group_hash: int, gap: float = DEFAULT_GAP) -> Layout:
    """
    Pick the layout for `count` participants.

    Counts of 0 and 1 share the single full cell; 5 and more use the grid.
    """
    if count <= 1:
        return single_layout(gap)
    if count == 2:
        return pair_layout(orientation_for(group_hash), gap)
    if count == 3:
        return triple_layout(group_hash % THREE_CELL_VARIANTS, gap)
    return grid_layout(gap)


def describe_layout(count: int, group_hash: int) -> str:
    """Short human-readable layout name, used in logs and batch summaries."""
    if count <= 1:
        return "single"
    if count == 2:
        return f"pair-{orientation_for(group_hash).value}"
    if count == 3:
        return _TRIPLE_NAMES[group_hash % THREE_CELL_VARIANTS]
    return "grid" if count == 4 else "grid-overflow"


_TRIPLE_NAMES: Dict[int, str] = {
    0: "triple-big-left",
    1: "triple-big-right",
    2: "triple-big-top",
    3: "triple-big-bottom",
}
