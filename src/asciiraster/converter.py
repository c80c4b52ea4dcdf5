from pathlib import Path

import numpy as np
from PIL import Image

from asciiraster.charsets import DENSITY_RAMP
from asciiraster.grayscale import to_grayscale
from asciiraster.model import GrayGrid
from asciiraster.pixels import extract_pixels, load_image

# Character cells are roughly twice as tall as wide
ASPECT_RATIO = 2.0


def ramp_index(gray, ramp_length: int):
    """Map luminance (0-255) to a ramp position, darker to earlier."""
    return (np.asarray(gray, dtype=np.float64) / 255.0 * (ramp_length - 1)).astype(np.intp)


def grayscale_to_ascii(
    gray: GrayGrid,
    ramp: str = DENSITY_RAMP,
    aspect_ratio: float = ASPECT_RATIO,
) -> list[str]:
    """Downsample a grayscale grid vertically by ``aspect_ratio`` and map it onto ``ramp``.

    Every column is kept; rows are picked at a fixed stride. Returns one string
    per output row, or an empty list when the grid is too short to sample.
    """
    height, width = gray.shape
    sample_width = width
    sample_height = int(height / aspect_ratio)
    if sample_height == 0 or sample_width == 0:
        return []

    step_x = width / sample_width
    step_y = height / sample_height

    # Clamp guards against float overshoot on the last row/column
    ys = np.minimum((np.arange(sample_height) * step_y).astype(np.intp), height - 1)
    xs = np.minimum((np.arange(sample_width) * step_x).astype(np.intp), width - 1)
    sampled = np.asarray(gray)[np.ix_(ys, xs)]

    char_arr = np.array(list(ramp))
    indices = ramp_index(sampled, len(ramp))
    return ["".join(char_arr[row]) for row in indices]


def image_to_ascii(
    image: Image.Image | str | Path,
    ramp: str = DENSITY_RAMP,
    aspect_ratio: float = ASPECT_RATIO,
) -> list[str]:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    gray = to_grayscale(extract_pixels(image))
    return grayscale_to_ascii(gray, ramp=ramp, aspect_ratio=aspect_ratio)
