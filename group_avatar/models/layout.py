"""
Layout Model Module
===================
This module defines the geometric cell types and the resolved cell assignment
produced by one partition of a participant group.
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

from group_avatar.models.color import Color
from group_avatar.models.participant import Participant


class Rect(NamedTuple):
    """Relative position and size inside the unit square."""
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def scaled(self, size: float) -> "Rect":
        """Scale the unit-square rectangle to a square of side `size`."""
        return Rect(self.x * size, self.y * size, self.width * size, self.height * size)


@dataclass(frozen=True)
class LayoutSlot:
    """One cell of a layout."""
    rect: Rect
    cell_index: int


Layout = Tuple[LayoutSlot, ...]


@dataclass(frozen=True)
class ResolvedAssignment:
    """A participant placed in a slot with its resolved color."""
    participant: Participant
    color: Color
    slot: LayoutSlot
    is_overflow_marker: bool = False
    overflow_marker: str = "*"

    @property
    def label(self) -> str:
        """Text shown for the cell: the marker, or the participant label."""
        if self.is_overflow_marker:
            return self.overflow_marker
        return self.participant.label
