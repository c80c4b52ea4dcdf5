from pathlib import Path

import numpy as np
from PIL import Image

from asciiraster.errors import EncodeError
from asciiraster.model import GrayGrid, PixelGrid, freeze
from asciiraster.output import write_png

# Luminosity method: green weighted highest. Sums to 1.0.
LUMA_WEIGHTS = (0.21, 0.72, 0.07)


def to_grayscale(pixels: PixelGrid) -> GrayGrid:
    """Collapse RGB to one luminance byte per pixel, truncating the weighted sum."""
    rgb = np.asarray(pixels, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    luma = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]
    return freeze(np.clip(np.trunc(luma), 0, 255).astype(np.uint8))


def save_grayscale(gray: GrayGrid, path: str | Path) -> None:
    height, width = gray.shape
    if width == 0 or height == 0:
        raise EncodeError(f"invalid image size: {width}x{height}", "grayscale")
    write_png(Image.fromarray(np.array(gray, dtype=np.uint8)), path, "grayscale")
