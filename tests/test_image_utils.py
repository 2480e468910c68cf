from __future__ import annotations

from pathlib import Path

from PIL import Image

from artspace.config import PLACEHOLDER_FILL, PLACEHOLDER_SIZE
from artspace.image_utils import decode_to_rgba, encode_png, make_placeholder, resolve_asset


def test_resolve_asset_with_extension(tmp_path: Path) -> None:
    (tmp_path / "art.png").write_bytes(b"x")
    assert resolve_asset("art.png", str(tmp_path)) == str(tmp_path / "art.png")
    assert resolve_asset("missing.png", str(tmp_path)) is None


def test_resolve_asset_without_extension(tmp_path: Path) -> None:
    (tmp_path / "art.jpg").write_bytes(b"x")
    assert resolve_asset("art", str(tmp_path)) == str(tmp_path / "art.jpg")
    assert resolve_asset("other", str(tmp_path)) is None


def test_decode_to_rgba(tmp_path: Path) -> None:
    path = tmp_path / "rgb.jpg"
    Image.new("RGB", (40, 20), (10, 20, 30)).save(path)
    im = decode_to_rgba(str(path))
    assert im.mode == "RGBA"
    assert im.size == (40, 20)


def test_placeholder_is_green_grid() -> None:
    im = make_placeholder()
    assert im.size == PLACEHOLDER_SIZE
    assert im.getpixel((5, 5))[:3] == PLACEHOLDER_FILL
    assert im.getpixel((0, 5))[:3] != PLACEHOLDER_FILL


def test_encode_png_writes_png_signature() -> None:
    data = encode_png(make_placeholder())
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
