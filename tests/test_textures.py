from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any, List

import pytest
from PIL import Image

import artspace.textures as textures
from artspace.textures import TextureStore


class FakeGpu:
    """Stands in for texture upload and unload."""

    def __init__(self) -> None:
        self.uploads: List[bytes] = []
        self.unloaded: List[Any] = []

    def upload(self, data: bytes) -> Any:
        self.uploads.append(data)
        return SimpleNamespace(id=len(self.uploads))

    def unload(self, tex: Any) -> None:
        self.unloaded.append(tex)


@pytest.fixture
def gpu(monkeypatch: pytest.MonkeyPatch) -> FakeGpu:
    fake = FakeGpu()
    monkeypatch.setattr(textures, "load_texture_from_png", fake.upload)
    monkeypatch.setattr(textures, "rl", SimpleNamespace(UnloadTexture=fake.unload))
    return fake


def _write_image(path: Path, size=(30, 20)) -> None:
    Image.new("RGB", size, (200, 10, 10)).save(path)


def test_missing_asset_uses_placeholder(tmp_path: Path, gpu: FakeGpu) -> None:
    store = TextureStore(str(tmp_path))
    ti = store.get("nowhere.png")
    assert ti.placeholder
    assert len(gpu.uploads) == 1


def test_corrupt_asset_uses_placeholder_and_logs_error(
    tmp_path: Path, gpu: FakeGpu, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "broken.png").write_bytes(b"not an image")
    store = TextureStore(str(tmp_path))
    ti = store.get("broken.png")
    assert ti.placeholder
    assert "[TEX][ERR]" in capsys.readouterr().out


def test_loaded_asset_is_cached(tmp_path: Path, gpu: FakeGpu) -> None:
    _write_image(tmp_path / "art.png")
    store = TextureStore(str(tmp_path))
    first = store.get("art.png")
    second = store.get("art.png")
    assert first is second
    assert not first.placeholder
    assert (first.w, first.h) == (30, 20)
    assert len(gpu.uploads) == 1


def test_unload_all_releases_shared_placeholder_once(tmp_path: Path, gpu: FakeGpu) -> None:
    _write_image(tmp_path / "art.png")
    store = TextureStore(str(tmp_path))
    real = store.get("art.png")
    placeholder = store.get("missing_one.png")
    assert store.get("missing_two.png") is placeholder

    store.unload_all()

    assert len(gpu.unloaded) == 2
    assert real.tex in gpu.unloaded
    assert placeholder.tex in gpu.unloaded
    # Cache is empty afterwards; the next get uploads again
    store.get("art.png")
    assert len(gpu.uploads) == 3
