from pathlib import Path

from PIL import Image

from asciiraster.errors import EncodeError, OutputError


def write_png(image: Image.Image, path: str | Path, stage: str) -> None:
    """Encode ``image`` as PNG into a newly created file at ``path``."""
    path = Path(path)
    try:
        f = path.open("wb")
    except OSError as exc:
        raise OutputError(f"failed to create output file {path}: {exc}", stage) from exc
    with f:
        try:
            image.save(f, format="PNG")
        except (OSError, ValueError) as exc:
            raise EncodeError(f"failed to encode image: {exc}", stage) from exc
