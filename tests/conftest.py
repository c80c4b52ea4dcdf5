import numpy as np
import pytest
from PIL import Image

from asciiraster.glyph_atlas import find_monospace_font

FONT_PATH = find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


@pytest.fixture
def gradient_png(tmp_path):
    """A 20x10 RGB PNG, dark on the left and bright on the right."""
    row = np.linspace(0, 255, 20).astype(np.uint8)
    arr = np.stack([np.tile(row, (10, 1))] * 3, axis=-1)
    path = tmp_path / "gradient.png"
    Image.fromarray(arr).save(path)
    return path
