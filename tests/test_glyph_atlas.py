import numpy as np
import pytest
from PIL import ImageFont

from asciiraster.errors import DecodeError
from asciiraster.glyph_atlas import build_atlas, load_font
from tests.conftest import FONT_PATH, needs_font


def test_atlas_shape():
    char_list, masks = build_atlas(" #@", load_font(), 7, 13, 11)
    assert char_list == [" ", "#", "@"]
    assert masks.shape == (3, 13, 7)
    assert masks.dtype == np.float32


def test_atlas_values_in_range():
    _, masks = build_atlas(".:-=+*#%@", load_font(), 7, 13, 11)
    assert masks.min() >= 0.0
    assert masks.max() <= 1.0


def test_space_is_blank():
    char_list, masks = build_atlas(" #@", load_font(), 7, 13, 11)
    assert masks[char_list.index(" ")].sum() == 0.0


def test_dense_char_has_ink():
    char_list, masks = build_atlas(".@", load_font(), 7, 13, 11)
    assert masks[char_list.index("@")].sum() > masks[char_list.index(".")].sum() > 0.0


def test_duplicates_collapse_in_first_seen_order():
    char_list, masks = build_atlas("@.@..", load_font(), 7, 13, 11)
    assert char_list == ["@", "."]
    assert masks.shape[0] == 2


@needs_font
def test_load_system_font():
    font = load_font(FONT_PATH)
    assert isinstance(font, ImageFont.FreeTypeFont)


def test_load_missing_font(tmp_path):
    with pytest.raises(DecodeError, match="unable to load font") as excinfo:
        load_font(tmp_path / "missing.ttf")
    assert excinfo.value.stage == "font"
