import shutil
import subprocess
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from asciiraster.errors import DecodeError

# Fits a 7x13 cell for the usual monospace faces
FONT_SIZE = 11

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "C:/Windows/Fonts/consola.ttf",
]


def find_monospace_font() -> str | None:
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if Path(path).exists():
            return path
    if shutil.which("fc-match"):
        result = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
    return None


def load_font(path: str | Path | None = None, size: int = FONT_SIZE) -> ImageFont.FreeTypeFont:
    """Open the font at ``path``, or the system monospace font, or Pillow's bundled default."""
    if path is not None:
        try:
            return ImageFont.truetype(str(path), size)
        except OSError as exc:
            raise DecodeError(f"unable to load font {path}: {exc}", stage="font") from exc

    found = find_monospace_font()
    if found is not None:
        try:
            return ImageFont.truetype(found, size)
        except OSError:
            # fc-match may return a bitmap-only face
            pass
    return ImageFont.load_default(size=size)


def build_atlas(
    characters: str,
    font: ImageFont.FreeTypeFont,
    cell_width: int,
    cell_height: int,
    baseline: int,
) -> tuple[list[str], np.ndarray]:
    """Pre-render characters as coverage masks, one glyph cell each.

    Glyphs are centred horizontally with their baseline ``baseline`` pixels
    below the top of the cell. Ink falling outside the cell is clipped, and
    whitespace renders blank.

    Returns:
        char_list: distinct characters in first-seen order
        masks: float32 array of shape (num_chars, cell_height, cell_width), values 0-1
    """
    char_list = list(dict.fromkeys(characters))
    masks = np.zeros((len(char_list), cell_height, cell_width), dtype=np.float32)

    for i, char in enumerate(char_list):
        if char.isspace():
            continue
        img = Image.new("L", (cell_width, cell_height), 0)
        draw = ImageDraw.Draw(img)
        x_offset = (cell_width - font.getlength(char)) / 2
        draw.text((x_offset, baseline), char, fill=255, font=font, anchor="ls")
        masks[i] = np.asarray(img, dtype=np.float32) / 255.0

    return char_list, masks
