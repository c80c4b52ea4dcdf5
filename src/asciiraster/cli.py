import argparse
import sys
from pathlib import Path

from asciiraster.converter import grayscale_to_ascii
from asciiraster.errors import ConversionError
from asciiraster.glyph_atlas import load_font
from asciiraster.grayscale import save_grayscale, to_grayscale
from asciiraster.pixels import extract_pixels, load_image
from asciiraster.render import save_ascii_art

INPUT_PATH = Path("assets/input.png")
GRAY_OUTPUT_PATH = Path("outputs/grayImages/output.png")
ASCII_OUTPUT_PATH = Path("outputs/asciiImages/output.png")


def _report(exc: ConversionError) -> None:
    print(f"{exc.stage} stage failed: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art and save grayscale and ASCII PNGs")
    parser.add_argument(
        "image", nargs="?", type=Path, default=INPUT_PATH, help=f"Path to input image (default: {INPUT_PATH})"
    )
    parser.add_argument(
        "--gray-output",
        type=Path,
        default=GRAY_OUTPUT_PATH,
        help=f"Where to write the grayscale PNG (default: {GRAY_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--ascii-output",
        type=Path,
        default=ASCII_OUTPUT_PATH,
        help=f"Where to write the ASCII art PNG (default: {ASCII_OUTPUT_PATH})",
    )
    parser.add_argument("--font", type=Path, default=None, help="TrueType font for the glyphs (default: system monospace)")
    parser.add_argument("--print", dest="echo", action="store_true", default=False, help="Also print the ASCII art")
    args = parser.parse_args(argv)

    try:
        image = load_image(args.image)
    except ConversionError as exc:
        _report(exc)
        return 1

    gray = to_grayscale(extract_pixels(image))
    failed = False

    try:
        save_grayscale(gray, args.gray_output)
    except ConversionError as exc:
        _report(exc)
        failed = True
    else:
        print(f"Grayscale image saved: {args.gray_output}")

    lines = grayscale_to_ascii(gray)
    if args.echo:
        print("\n".join(lines))

    try:
        font = load_font(args.font)
        save_ascii_art(lines, args.ascii_output, font)
    except ConversionError as exc:
        _report(exc)
        failed = True
    else:
        print(f"ASCII art saved as image: {args.ascii_output}")

    return 1 if failed else 0
