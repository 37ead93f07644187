"""Convert an image read from standard input to JPEG."""

from __future__ import annotations

import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError


def to_jpeg(infile: BinaryIO, outfile: BinaryIO) -> str:
    """Decode the image in ``infile`` and write it to ``outfile`` as JPEG.

    Returns the name of the input format. Raises ``ValueError`` when the
    input is not a recognised image.
    """
    try:
        img = Image.open(infile)
        img.load()
    except UnidentifiedImageError as exc:
        raise ValueError("image: unknown format") from exc
    kind = (img.format or "").lower()
    print("Input format =", kind, file=sys.stderr)
    if img.mode not in ("L", "RGB", "CMYK"):
        img = img.convert("RGB")
    img.save(outfile, format="JPEG", quality=95)
    return kind


def main(argv: list[str] | None = None) -> int:
    """Read an image from standard input and write it as JPEG to standard output."""
    infile = sys.stdin.buffer
    sys.stdout.flush()
    stdout = sys.stdout.buffer
    try:
        to_jpeg(infile, stdout)
    except (ValueError, OSError) as exc:
        print(f"jpeg: {exc}", file=sys.stderr)
        return 1
    stdout.flush()
    return 0