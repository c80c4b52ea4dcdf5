import numpy as np

# (height, width, 3) uint8, channels R, G, B
PixelGrid = np.ndarray
# (height, width) uint8 luminance
GrayGrid = np.ndarray


def freeze(grid: np.ndarray) -> np.ndarray:
    """Mark a freshly built grid read-only and return it."""
    grid.flags.writeable = False
    return grid


def empty_pixel_grid(width: int, height: int) -> PixelGrid:
    return freeze(np.zeros((height, width, 3), dtype=np.uint8))
