"""Image utilities - asset resolution and decoding with Pillow."""

from __future__ import annotations
import io
import os
from typing import Optional

from PIL import Image, ImageDraw

from .config import (
    IMG_EXTS,
    PLACEHOLDER_SIZE, PLACEHOLDER_FILL, PLACEHOLDER_GRID, PLACEHOLDER_GRID_STEP,
)


def resolve_asset(image_ref: str, assets_dir: str) -> Optional[str]:
    """Map an image reference to an existing file under assets_dir.

    A ref without an extension is tried with every supported extension.
    Returns None when nothing matches.
    """
    base = os.path.join(assets_dir, image_ref)
    if os.path.splitext(image_ref)[1].lower() in IMG_EXTS:
        return base if os.path.isfile(base) else None
    for ext in sorted(IMG_EXTS):
        candidate = base + ext
        if os.path.isfile(candidate):
            return candidate
    return None


def decode_to_rgba(path: str) -> Image.Image:
    """Open any Pillow-readable image as RGBA (first frame for animations)."""
    with Image.open(path) as im:
        im.seek(0)
        return im.convert("RGBA")


def make_placeholder() -> Image.Image:
    """Green grid tile used when an artwork's asset is unavailable."""
    w, h = PLACEHOLDER_SIZE
    im = Image.new("RGBA", (w, h), PLACEHOLDER_FILL + (255,))
    draw = ImageDraw.Draw(im)
    for x in range(0, w, PLACEHOLDER_GRID_STEP):
        draw.line([(x, 0), (x, h - 1)], fill=PLACEHOLDER_GRID + (255,))
    for y in range(0, h, PLACEHOLDER_GRID_STEP):
        draw.line([(0, y), (w - 1, y)], fill=PLACEHOLDER_GRID + (255,))
    return im


def encode_png(im: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buf = io.BytesIO()
    im.save(buf, format="PNG")
    return buf.getvalue()
