from __future__ import annotations

import pytest

from artspace.view_math import compute_fill_scale, crop_source_rect


@pytest.mark.parametrize(
    ("img", "box"),
    [((1000, 500), (300, 300)), ((500, 1000), (400, 300)), ((108, 108), (448, 300)), ((640, 480), (640, 480))],
)
def test_crop_source_keeps_box_aspect_and_is_centered(img, box) -> None:
    iw, ih = img
    bw, bh = box
    src = crop_source_rect(iw, ih, bw, bh)
    assert src.w / src.h == pytest.approx(bw / bh)
    assert src.w <= iw and src.h <= ih
    assert src.x == pytest.approx((iw - src.w) / 2)
    assert src.y == pytest.approx((ih - src.h) / 2)
    assert src.w == pytest.approx(iw) or src.h == pytest.approx(ih)


def test_crop_source_degenerate_box_uses_whole_image() -> None:
    src = crop_source_rect(200, 100, 0, 50)
    assert (src.x, src.y, src.w, src.h) == (0.0, 0.0, 200.0, 100.0)


def test_compute_fill_scale() -> None:
    assert compute_fill_scale(1000, 500, 300, 300) == pytest.approx(0.6)
