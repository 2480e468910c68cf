"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
from typing import Any, Tuple

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


def _to_c_string(text: str) -> bytes:
    return text.encode('utf-8')


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle compatible with the current binding."""
    if hasattr(rl, 'Rectangle'):
        return rl.Rectangle(float(x), float(y), float(w), float(h))
    r = rl.ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2 compatible with the current binding."""
    if hasattr(rl, 'Vector2'):
        return rl.Vector2(float(x), float(y))
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(rgba: Tuple[int, int, int, int], alpha: float = 1.0) -> Any:
    """Create a raylib Color, scaling the alpha channel by alpha (0..1)."""
    r, g, b, a = rgba
    a = int(max(0.0, min(1.0, alpha)) * a)
    if hasattr(rl, 'Color'):
        return rl.Color(int(r), int(g), int(b), a)
    c = rl.ffi.new("Color *")
    c[0].r, c[0].g, c[0].b, c[0].a = int(r), int(g), int(b), a
    return c[0]


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding fallback."""
    try:
        rl.DrawText(text, int(x), int(y), size, color)
    except TypeError:
        rl.DrawText(_to_c_string(text), int(x), int(y), size, color)


def measure_text(text: str, size: int) -> int:
    """Measure text width with encoding fallback."""
    try:
        return rl.MeasureText(text, size)
    except TypeError:
        return rl.MeasureText(_to_c_string(text), size)


def init_window(w: int, h: int, title: str) -> None:
    """Open the window with encoding fallback for the title."""
    try:
        rl.InitWindow(w, h, title)
    except TypeError:
        rl.InitWindow(w, h, _to_c_string(title))


def load_texture_from_png(data: bytes) -> Any:
    """Upload PNG-encoded bytes as a texture."""
    try:
        img = rl.LoadImageFromMemory(".png", data, len(data))
    except TypeError:
        img = rl.LoadImageFromMemory(b".png", data, len(data))
    try:
        return rl.LoadTextureFromImage(img)
    finally:
        rl.UnloadImage(img)


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'make_color',
    'draw_text',
    'measure_text',
    'init_window',
    'load_texture_from_png',
    'get_texture_id',
    'is_texture_valid',
]
