"""
SVG composition of resolved avatar cells.
"""

import xml.etree.ElementTree as ET
from typing import Sequence, Union

from group_avatar.engine.palette import BACKDROP
from group_avatar.models.color import get_contrast_color
from group_avatar.models.layout import ResolvedAssignment
from group_avatar.models.theme import Theme
from group_avatar.utils.logger import get_logger
from group_avatar.utils.text import first_initial

logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Reference metrics on a 54px avatar; everything scales with the size
REFERENCE_SIZE = 54.0
LIGHT_CORNER_RADIUS = 11.0
INITIAL_FONT_SIZE = 12.0
MARKER_FONT_SIZE = 20.0
FONT_WEIGHT = "800"
FONT_FAMILY = "Helvetica, Arial, sans-serif"
COORD_PRECISION = 3


def _fmt(value: float) -> str:
    text = f"{value:.{COORD_PRECISION}f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


class SVGAvatarRenderer:
    """
    Renders resolved assignments as a standalone SVG document.

    Dark theme avatars are clipped to a circle, light theme avatars to a
    rounded square.
    """

    def __init__(self, size: float = REFERENCE_SIZE, element_id: str = "avatar"):
        """
        Initialize the renderer.

        Args:
            size: Side of the avatar in user units (pixels)
            element_id: Prefix for ids inside the document, so several
                avatars can be inlined into one page
        """
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self.size = float(size)
        self.element_id = element_id

    def corner_radius(self, theme: Union[Theme, str]) -> float:
        """Clip radius: a full circle in dark theme, a rounded square in light."""
        if Theme.coerce(theme) is Theme.DARK:
            return self.size / 2
        return LIGHT_CORNER_RADIUS * self.size / REFERENCE_SIZE

    def to_svg_element(self, assignments: Sequence[ResolvedAssignment], theme: Union[Theme, str]) -> ET.Element:
        """
        Build the SVG element tree.

        Args:
            assignments: Cells from AvatarEngine.partition
            theme: Theme used for the clip shape and backdrop

        Returns:
            Root <svg> element
        """
        theme = Theme.coerce(theme)
        size = _fmt(self.size)
        radius = _fmt(self.corner_radius(theme))
        clip_id = f"{self.element_id}-clip"

        svg = ET.Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "width": size,
            "height": size,
            "viewBox": f"0 0 {size} {size}",
        })

        defs = ET.SubElement(svg, "defs")
        clip = ET.SubElement(defs, "clipPath", {"id": clip_id})
        ET.SubElement(clip, "rect", {"x": "0", "y": "0", "width": size, "height": size, "rx": radius, "ry": radius})

        group = ET.SubElement(svg, "g", {"clip-path": f"url(#{clip_id})"})
        ET.SubElement(group, "rect", {
            "x": "0", "y": "0", "width": size, "height": size,
            "fill": BACKDROP[theme].to_svg_string(),
        })

        for assignment in assignments:
            self._add_cell(group, assignment)

        return svg

    def render(self, assignments: Sequence[ResolvedAssignment], theme: Union[Theme, str]) -> str:
        """Render the avatar to SVG markup."""
        svg = self.to_svg_element(assignments, theme)
        return ET.tostring(svg, encoding="unicode")

    def _add_cell(self, parent: ET.Element, assignment: ResolvedAssignment) -> None:
        rect = assignment.slot.rect.scaled(self.size)
        fill = assignment.color

        ET.SubElement(parent, "rect", {
            "x": _fmt(rect.x),
            "y": _fmt(rect.y),
            "width": _fmt(rect.width),
            "height": _fmt(rect.height),
            "fill": fill.to_svg_string(),
        })

        if assignment.is_overflow_marker:
            glyph = assignment.overflow_marker
            font_size = MARKER_FONT_SIZE
        else:
            glyph = first_initial(assignment.participant.label)
            font_size = INITIAL_FONT_SIZE

        if not glyph:
            return

        text = ET.SubElement(parent, "text", {
            "x": _fmt(rect.x + rect.width / 2),
            "y": _fmt(rect.y + rect.height / 2),
            "text-anchor": "middle",
            "dominant-baseline": "central",
            "font-family": FONT_FAMILY,
            "font-size": _fmt(font_size * self.size / REFERENCE_SIZE),
            "font-weight": FONT_WEIGHT,
            "letter-spacing": "-0.5",
            "fill": get_contrast_color(fill).to_svg_string(),
        })
        text.text = glyph
