from pathlib import Path

import numpy as np
from PIL import Image, ImageFont

from asciiraster.glyph_atlas import build_atlas, load_font
from asciiraster.output import write_png

# Glyph cell in pixels, and the distance from cell top to baseline
GLYPH_WIDTH = 7
GLYPH_HEIGHT = 13
GLYPH_ASCENT = 11
PADDING = 10
TEXT_COLOUR = (255, 255, 255)


def canvas_size(lines: list[str]) -> tuple[int, int]:
    """Pixel (width, height) needed for ``lines`` plus padding on every side."""
    max_line_length = max((len(line) for line in lines), default=0)
    width = GLYPH_WIDTH * max_line_length + 2 * PADDING
    height = GLYPH_HEIGHT * len(lines) + 2 * PADDING
    return width, height


def _coverage(lines: list[str], font: ImageFont.FreeTypeFont) -> np.ndarray:
    """Stamp each character's atlas mask into its cell. Shape (rows*H, cols*W)."""
    rows = len(lines)
    cols = max(len(line) for line in lines)
    char_list, masks = build_atlas("".join(lines), font, GLYPH_WIDTH, GLYPH_HEIGHT, GLYPH_ASCENT)

    # Extra blank mask fills cells past the end of short lines
    blank = len(char_list)
    masks = np.concatenate([masks, np.zeros((1, GLYPH_HEIGHT, GLYPH_WIDTH), dtype=np.float32)])
    lookup = {char: i for i, char in enumerate(char_list)}

    indices = np.full((rows, cols), blank, dtype=np.intp)
    for r, line in enumerate(lines):
        indices[r, : len(line)] = [lookup[char] for char in line]

    # (rows, cols, H, W) -> (rows, H, cols, W) -> one block
    cells = masks[indices].transpose(0, 2, 1, 3)
    return cells.reshape(rows * GLYPH_HEIGHT, cols * GLYPH_WIDTH)


def render_ascii(lines: list[str], font: ImageFont.FreeTypeFont | None = None) -> Image.Image:
    """Draw ``lines`` in white on a transparent RGBA canvas.

    Line ``i`` sits on the baseline ``PADDING + (i + 1) * GLYPH_HEIGHT`` and
    starts at ``x = PADDING``; every character takes one glyph cell.
    """
    width, height = canvas_size(lines)
    alpha = np.zeros((height, width), dtype=np.float32)

    if any(lines):
        if font is None:
            font = load_font()
        block = _coverage(lines, font)
        top = PADDING + GLYPH_HEIGHT - GLYPH_ASCENT
        block = block[: max(height - top, 0)]
        alpha[top : top + block.shape[0], PADDING : PADDING + block.shape[1]] = block

    coverage = np.rint(alpha * 255).astype(np.uint8)
    rgba = np.zeros((height, width, 4), dtype=np.uint8)
    rgba[coverage > 0, :3] = TEXT_COLOUR
    rgba[..., 3] = coverage
    return Image.fromarray(rgba)


def save_ascii_art(lines: list[str], path: str | Path, font: ImageFont.FreeTypeFont | None = None) -> None:
    write_png(render_ascii(lines, font), path, "ascii")
