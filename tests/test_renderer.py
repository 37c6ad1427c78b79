"""
Tests for SVG rendering and rasterization.
"""

import os
import tempfile
import unittest
import xml.etree.ElementTree as ET

from group_avatar.engine.partition import AvatarEngine
from group_avatar.models.participant import Participant
from group_avatar.rendering.svg_renderer import SVG_NAMESPACE, SVGAvatarRenderer

NS = f"{{{SVG_NAMESPACE}}}"

try:
    import cairosvg  # noqa: F401
    HAVE_CAIRO = True
except (ImportError, OSError):
    HAVE_CAIRO = False


def _parse(svg_code):
    return ET.fromstring(svg_code)


class TestSVGAvatarRenderer(unittest.TestCase):
    """Tests for the SVGAvatarRenderer class."""

    def setUp(self):
        """Set up test fixtures."""
        self.engine = AvatarEngine()
        self.renderer = SVGAvatarRenderer(size=54)
        self.group = [
            Participant("ann@x.com", "ann"),
            Participant("bob@x.com", "Bob"),
            Participant("cid@x.com", "Cid"),
        ]

    def test_dark_theme_is_circular(self):
        """Test dark avatars clip to a circle."""
        root = _parse(self.renderer.render(self.engine.partition(self.group, "dark"), "dark"))
        clip_rect = root.find(f"{NS}defs/{NS}clipPath/{NS}rect")
        self.assertEqual(clip_rect.get("rx"), "27")

    def test_light_theme_is_rounded_square(self):
        """Test light avatars clip to a rounded square scaled with the size."""
        root = _parse(self.renderer.render(self.engine.partition(self.group, "light"), "light"))
        self.assertEqual(root.find(f"{NS}defs/{NS}clipPath/{NS}rect").get("rx"), "11")

        large = SVGAvatarRenderer(size=108)
        root = _parse(large.render(self.engine.partition(self.group, "light"), "light"))
        self.assertEqual(root.find(f"{NS}defs/{NS}clipPath/{NS}rect").get("rx"), "22")
        self.assertEqual(root.get("viewBox"), "0 0 108 108")

    def test_cells_and_initials(self):
        """Test each cell is a filled rect with its uppercase initial."""
        assignments = self.engine.partition(self.group, "light")
        root = _parse(self.renderer.render(assignments, "light"))
        group = root.find(f"{NS}g")
        rects = group.findall(f"{NS}rect")

        # backdrop + one rect per cell
        self.assertEqual(len(rects), 1 + len(assignments))
        self.assertEqual([r.get("fill") for r in rects[1:]], [a.color.hex for a in assignments])
        self.assertEqual([t.text for t in group.findall(f"{NS}text")], ["A", "B", "C"])

    def test_overflow_marker_drawn(self):
        """Test the overflow cell shows the marker in a larger font."""
        group = self.group + [Participant(f"p{i}@x.com", f"P{i}") for i in range(3)]
        assignments = self.engine.partition(group, "dark")
        root = _parse(self.renderer.render(assignments, "dark"))
        texts = root.findall(f".//{NS}text")
        markers = [t for t in texts if t.text == "*"]
        self.assertEqual(len(markers), 1)
        self.assertEqual(markers[0].get("font-size"), "20")

    def test_empty_label_has_no_text(self):
        """Test an empty participant renders a plain cell."""
        root = _parse(self.renderer.render(self.engine.partition([], "light"), "light"))
        self.assertEqual(root.findall(f".//{NS}text"), [])

    def test_invalid_size(self):
        """Test the size must be positive."""
        with self.assertRaises(ValueError):
            SVGAvatarRenderer(size=0)


@unittest.skipUnless(HAVE_CAIRO, "cairosvg/cairo not available")
class TestAvatarRasterizer(unittest.TestCase):
    """Tests for the AvatarRasterizer class."""

    def setUp(self):
        """Set up test fixtures."""
        from group_avatar.rendering.rasterizer import AvatarRasterizer
        self.rasterizer = AvatarRasterizer(default_size=64)
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up after tests."""
        for file in os.listdir(self.temp_dir):
            os.remove(os.path.join(self.temp_dir, file))
        os.rmdir(self.temp_dir)

    def test_rasterize_and_save(self):
        """Test SVG markup becomes an image file of the requested size."""
        assignments = AvatarEngine().partition([Participant("ann@x.com", "Ann")], "light")
        svg_code = SVGAvatarRenderer().render(assignments, "light")
        path = os.path.join(self.temp_dir, "ann.png")

        image = self.rasterizer.rasterize(svg_code, output_path=path)

        self.assertEqual(image.size, (64, 64))
        self.assertTrue(os.path.exists(path))

    def test_bad_markup_gives_blank_image(self):
        """Test unparseable markup yields a blank image."""
        image = self.rasterizer.rasterize("<svg", size=32)
        self.assertEqual(image.size, (32, 32))


if __name__ == "__main__":
    unittest.main()
