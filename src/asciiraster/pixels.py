from pathlib import Path

import numpy as np
from PIL import Image

from asciiraster.errors import DecodeError
from asciiraster.model import PixelGrid, empty_pixel_grid, freeze

# Single-channel modes holding 16 bits per sample. Pillow opens 16-bit
# grayscale PNGs as "I" or "I;16" depending on version.
WIDE_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}
WIDE_MAX = 0xFFFF
BYTE_MAX = 0xFF


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file, closing the file before returning."""
    path = Path(path)
    try:
        with path.open("rb") as f:
            image = Image.open(f)
            image.load()
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"unable to decode {path}: {exc}") from exc
    return image


def normalize_channel(values, max_value: int) -> np.ndarray:
    """Rescale channel values from [0, max_value] onto [0, 255], truncating."""
    values = np.clip(np.asarray(values, dtype=np.int64), 0, max_value)
    return (values * BYTE_MAX // max_value).astype(np.uint8)


def extract_pixels(image: Image.Image) -> PixelGrid:
    """Read an image into a (height, width, 3) grid of 8-bit RGB values.

    Alpha is dropped without premultiplying. Wide single-channel images are
    rescaled to 8 bits and copied into all three channels.
    """
    width, height = image.size
    if width == 0 or height == 0:
        return empty_pixel_grid(width, height)

    if image.mode in WIDE_MODES:
        gray = normalize_channel(np.asarray(image), WIDE_MAX)
        pixels = np.repeat(gray[:, :, np.newaxis], 3, axis=2)
    else:
        pixels = np.array(image.convert("RGB"), dtype=np.uint8)
    return freeze(pixels)
