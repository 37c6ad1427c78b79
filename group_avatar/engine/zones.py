"""
Zone selection for two-participant avatars.

A zone is a curated cluster of palette indices whose hues sit well next to
each other. The group digest picks the zone, each participant's own digest
picks a color inside it, and a collision is pushed to the next index so the
two cells never share a color.
"""

from enum import Enum
from typing import Dict, NamedTuple, Tuple, Union

from group_avatar.engine.hasher import digest, group_digest, resolve_label
from group_avatar.engine.palette import palette
from group_avatar.models.color import Color
from group_avatar.models.participant import Participant
from group_avatar.models.theme import Theme


class Zone(NamedTuple):
    """Named subset of palette indices."""
    name: str
    indices: Tuple[int, ...]


LIGHT_ZONES: Tuple[Zone, ...] = (
    Zone("warm", (0, 4, 6)),
    Zone("ocean", (1, 5, 2)),
    Zone("violet", (3, 7, 6)),
    Zone("contrast", (7, 4)),
)

DARK_ZONES: Tuple[Zone, ...] = (
    Zone("berry", (0, 1, 2)),
    Zone("ocean", (3, 4, 5, 6)),
    Zone("meadow", (7, 8, 9)),
    Zone("ember", (10, 11, 0)),
)

_ZONES: Dict[Theme, Tuple[Zone, ...]] = {
    Theme.LIGHT: LIGHT_ZONES,
    Theme.DARK: DARK_ZONES,
}


class Orientation(Enum):
    """How a two-cell avatar is split."""
    HORIZONTAL = "horizontal"  # top / bottom
    VERTICAL = "vertical"      # left / right


def zones(theme: Union[Theme, str]) -> Tuple[Zone, ...]:
    """Return the zone set for `theme`."""
    return _ZONES[Theme.coerce(theme)]


def select_zone(group_hash: int, theme: Union[Theme, str]) -> Zone:
    theme_zones = zones(theme)
    return theme_zones[group_hash % len(theme_zones)]


def orientation_for(group_hash: int) -> Orientation:
    """Even group digests split top/bottom, odd ones left/right."""
    return Orientation.HORIZONTAL if group_hash % 2 == 0 else Orientation.VERTICAL


def zone_indices(label_a: str, label_b: str, zone_size: int) -> Tuple[int, int]:
    """Positions inside a zone for the two participants; never equal."""
    i0 = digest(label_a) % zone_size
    i1 = digest(label_b) % zone_size
    if i1 == i0:
        i1 = (i0 + 1) % zone_size
    return i0, i1


def pair_colors(
    first: Union[Participant, str],
    second: Union[Participant, str],
    theme: Union[Theme, str]
) -> Tuple[Color, Color]:
    """
    Colors for a two-participant avatar, in input order.

    Args:
        first: Participant placed in the first cell
        second: Participant placed in the second cell
        theme: Theme whose palette and zones are used

    Returns:
        Two distinct colors from one zone of the theme palette
    """
    zone = select_zone(group_digest((first, second)), theme)
    i0, i1 = zone_indices(resolve_label(first), resolve_label(second), len(zone.indices))
    colors = palette(theme)
    return colors[zone.indices[i0]], colors[zone.indices[i1]]
