"""Texture store - artwork image refs to GPU textures."""

from __future__ import annotations
from typing import Dict, Optional

from PIL import UnidentifiedImageError

from .config import ASSETS_DIR
from .image_utils import resolve_asset, decode_to_rgba, make_placeholder, encode_png
from .logging import channel
from .rl_compat import rl, load_texture_from_png, is_texture_valid
from .types import TextureInfo

_log = channel("TEX")


class TextureStore:
    """Loads each image ref once and keeps the texture until unload_all()."""

    def __init__(self, assets_dir: str = ASSETS_DIR):
        self.assets_dir = assets_dir
        self._cache: Dict[str, TextureInfo] = {}
        self._placeholder: Optional[TextureInfo] = None

    def get(self, image_ref: str) -> TextureInfo:
        """Texture for image_ref, falling back to the placeholder."""
        ti = self._cache.get(image_ref)
        if ti is None:
            ti = self._load(image_ref)
            self._cache[image_ref] = ti
        return ti

    def _load(self, image_ref: str) -> TextureInfo:
        path = resolve_asset(image_ref, self.assets_dir)
        if path is None:
            _log(f"No asset for '{image_ref}', using placeholder")
            return self._get_placeholder()
        try:
            im = decode_to_rgba(path)
        except (OSError, UnidentifiedImageError) as e:
            _log.err(f"Failed to decode {path}: {e!r}")
            return self._get_placeholder()
        tex = load_texture_from_png(encode_png(im))
        if not is_texture_valid(tex):
            _log.err(f"Upload failed for {path}")
            return self._get_placeholder()
        _log(f"Loaded {path} ({im.width}x{im.height})")
        return TextureInfo(tex=tex, w=im.width, h=im.height, path=path)

    def _get_placeholder(self) -> TextureInfo:
        if self._placeholder is None:
            im = make_placeholder()
            tex = load_texture_from_png(encode_png(im))
            self._placeholder = TextureInfo(tex=tex, w=im.width, h=im.height, placeholder=True)
        return self._placeholder

    def unload_all(self) -> None:
        """Release every texture, placeholder included."""
        seen = set()
        textures = list(self._cache.values())
        if self._placeholder is not None:
            textures.append(self._placeholder)
        for ti in textures:
            if id(ti) in seen or not is_texture_valid(ti.tex):
                continue
            seen.add(id(ti))
            rl.UnloadTexture(ti.tex)
        _log(f"Unloaded {len(seen)} textures")
        self._cache.clear()
        self._placeholder = None
