"""Convert a PNG or JPEG image into a JPEG image."""

from __future__ import annotations

import io
import sys
from typing import BinaryIO, TextIO

from PIL import Image, UnidentifiedImageError

_KNOWN_FORMATS = ("png", "jpeg")


def to_jpeg(src: BinaryIO, dst: BinaryIO, log: TextIO | None = None) -> None:
    """Decode the image in src and write it to dst as a quality-95 JPEG.

    The input format is reported on log. Raises ValueError for input that is
    not a recognised image.
    """
    log = sys.stderr if log is None else log
    data = src.read()
    try:
        img = Image.open(io.BytesIO(data))
    except UnidentifiedImageError:
        raise ValueError("image: unknown format") from None
    kind = (img.format or "").lower()
    if kind not in _KNOWN_FORMATS:
        raise ValueError("image: unknown format")
    img.load()
    print("Input format =", kind, file=log)
    if img.mode not in ("L", "RGB"):
        img = img.convert("RGB")
    img.save(dst, format="JPEG", quality=95)


def main(argv: list[str] | None = None) -> int:
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer, sys.stderr)
    except (OSError, ValueError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0