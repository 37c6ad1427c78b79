"""
Rasterization of avatar SVG markup to PIL images.
"""
import io
import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

logger = logging.getLogger(__name__)


class AvatarRasterizer:
    """
    Converts avatar SVG markup to PIL Images via cairosvg.
    """

    def __init__(self, default_size: int = 108):
        """
        Initialize the rasterizer.

        Args:
            default_size: Default side in pixels of rendered images
        """
        self.default_size = default_size
        self._check_dependencies()

    def _check_dependencies(self) -> None:
        """Import cairosvg, which needs the native cairo library."""
        try:
            import cairosvg
        except (ImportError, OSError) as e:
            logger.error(f"cairosvg is not usable: {e}")
            raise ImportError(
                "Rasterizing avatars requires cairosvg and the cairo library"
            ) from e
        self.cairosvg = cairosvg

    def rasterize(
        self,
        svg_code: str,
        output_path: Optional[Union[str, Path]] = None,
        size: Optional[int] = None
    ) -> Image.Image:
        """
        Convert SVG markup to a PIL Image.

        Args:
            svg_code: SVG markup
            output_path: Optional path to save the image (format from suffix)
            size: Optional side in pixels

        Returns:
            RGBA image of the avatar; a blank image if rendering fails
        """
        side = size or self.default_size
        try:
            png_data = self.cairosvg.svg2png(
                bytestring=svg_code.encode('utf-8'),
                output_width=side,
                output_height=side
            )
            image = Image.open(io.BytesIO(png_data))
            image.load()
        except Exception as e:
            logger.error(f"Error rasterizing avatar SVG: {e}")
            logger.debug(f"Problematic SVG code: {svg_code[:100]}...")
            image = Image.new('RGBA', (side, side), (0, 0, 0, 0))

        if output_path:
            output_path = Path(output_path)
            output_path.parent.mkdir(exist_ok=True, parents=True)
            image.save(output_path)
            logger.info(f"Avatar image saved to {output_path}")

        return image
