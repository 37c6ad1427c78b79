"""
Overflow reduction for groups larger than the four-cell grid.
"""

from dataclasses import replace
from typing import List

from group_avatar.models.layout import ResolvedAssignment

MAX_CELLS = 4
DEFAULT_OVERFLOW_MARKER = "*"


def overflow_index(group_hash: int) -> int:
    """Grid cell that shows the overflow marker."""
    return group_hash % MAX_CELLS


def reduce_overflow(
    assignments: List[ResolvedAssignment],
    group_hash: int,
    marker: str = DEFAULT_OVERFLOW_MARKER
) -> List[ResolvedAssignment]:
    """
    Flag one grid cell as the overflow marker, keeping its color.

    Args:
        assignments: The four grid assignments built from the first four participants
        group_hash: Digest of the whole participant set
        marker: Glyph drawn in place of the participant initial

    Returns:
        A new list where exactly one assignment is an overflow marker
    """
    target = overflow_index(group_hash)
    return [
        replace(a, is_overflow_marker=True, overflow_marker=marker) if i == target else a
        for i, a in enumerate(assignments[:MAX_CELLS])
    ]
