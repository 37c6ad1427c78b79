"""
Rendering of resolved avatars.

The rasterizer is not imported here: it needs cairosvg and the native cairo
library, which the SVG renderer does not.
"""

from group_avatar.rendering.svg_renderer import SVGAvatarRenderer

__all__ = [
    "SVGAvatarRenderer",
]
