"""Artwork catalog - the fixed, ordered collection shown by the screen."""

from __future__ import annotations
from typing import Iterable, Iterator, Tuple, overload

from .types import Artwork


class EmptyCatalogError(ValueError):
    """Raised when a catalog is built from no artworks."""


class Catalog:
    """
    Immutable, non-empty sequence of artworks.

    Non-emptiness is checked once here; navigation arithmetic relies on it
    and never checks again.
    """

    __slots__ = ("_items",)

    def __init__(self, artworks: Iterable[Artwork]):
        items = tuple(artworks)
        if not items:
            raise EmptyCatalogError("catalog needs at least one artwork")
        for a in items:
            if not isinstance(a, Artwork):
                raise TypeError(f"catalog entries must be Artwork, got {type(a).__name__}")
        self._items: Tuple[Artwork, ...] = items

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, idx: int) -> Artwork: ...

    @overload
    def __getitem__(self, idx: slice) -> Tuple[Artwork, ...]: ...

    def __getitem__(self, idx):
        return self._items[idx]

    def __iter__(self) -> Iterator[Artwork]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Catalog({len(self._items)} artworks)"

    @property
    def items(self) -> Tuple[Artwork, ...]:
        return self._items


DEFAULT_CATALOG = Catalog([
    Artwork("sailing_under_the_bridge.png", "Sailing Under the Bridge", artist="Kat Kuan", year=2017),
    Artwork("misty_mountains.png", "Misty Mountains", artist="John Doe", year=2020),
    Artwork("golden_sunrise.png", "Golden Sunrise", artist="Jane Smith", year=2019),
])
