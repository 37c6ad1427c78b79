"""
Contact-sheet previews of rendered avatars.
"""
import logging
import math
from pathlib import Path
from typing import Sequence, Tuple, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from PIL import Image

logger = logging.getLogger(__name__)


def create_contact_sheet(
    avatars: Sequence[Tuple[str, Image.Image]],
    output_path: Union[str, Path],
    columns: int = 6,
    title: str = "Avatar preview"
) -> Path:
    """
    Lay out captioned avatar images in a grid and save it as an image.

    Args:
        avatars: (caption, image) pairs
        output_path: Where to write the sheet
        columns: Maximum avatars per row
        title: Figure title

    Returns:
        Path of the saved sheet
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)

    count = max(1, len(avatars))
    cols = max(1, min(columns, count))
    rows = math.ceil(count / cols)

    fig, axes = plt.subplots(rows, cols, figsize=(cols * 1.6, rows * 1.9 + 0.4), squeeze=False)
    fig.suptitle(title, fontsize=12, weight='bold')

    for ax in axes.flat:
        ax.axis('off')

    for ax, (caption, image) in zip(axes.flat, avatars):
        ax.imshow(image)
        ax.set_title(caption, fontsize=7)

    plt.tight_layout()
    try:
        fig.savefig(output_path, dpi=100)
    finally:
        plt.close(fig)

    logger.info(f"Contact sheet with {len(avatars)} avatar(s) saved to {output_path}")
    return output_path
