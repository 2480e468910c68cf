"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations

from .types import Rect


def compute_fill_scale(img_w: int, img_h: int, box_w: float, box_h: float) -> float:
    """Compute scale that covers the whole box (may overflow one axis).

    Callers guarantee non-zero image dimensions.
    """
    return max(box_w / img_w, box_h / img_h)


def crop_source_rect(img_w: int, img_h: int, box_w: float, box_h: float) -> Rect:
    """Centered source rectangle with the box's aspect ratio.

    Drawing this part of the image stretched over the box gives a
    crop-to-fill result without distortion.

    Args:
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        box_w: Destination width.
        box_h: Destination height.

    Returns:
        Rect in image pixel coordinates.
    """
    if img_w <= 0 or img_h <= 0 or box_w <= 0 or box_h <= 0:
        return Rect(0.0, 0.0, float(max(img_w, 0)), float(max(img_h, 0)))
    scale = compute_fill_scale(img_w, img_h, box_w, box_h)
    src_w = min(img_w, box_w / scale)
    src_h = min(img_h, box_h / scale)
    return Rect((img_w - src_w) / 2.0, (img_h - src_h) / 2.0, src_w, src_h)
