"""Core data types for Art Space."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Any
from enum import Enum


class Orientation(Enum):
    """Screen orientation; picks the layout composition."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class NavRole(Enum):
    """Which way a navigation button moves the cursor."""
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class Artwork:
    """A single catalog entry. Immutable once constructed."""
    image_ref: str
    title: str
    description: str = ""
    artist: str = ""
    year: Optional[int] = None

    @property
    def caption(self) -> str:
        """Artist and year, e.g. 'Kat Kuan, 2017'."""
        parts = [p for p in (self.artist, str(self.year) if self.year is not None else "") if p]
        return ", ".join(parts)

    @property
    def display_text(self) -> str:
        """Text shown under the title: description, else caption."""
        return self.description or self.caption


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in window pixels."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self):
        return (self.x + self.w / 2.0, self.y + self.h / 2.0)

    def contains(self, px: float, py: float) -> bool:
        """Check if point lies inside (edges inclusive)."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def inset(self, d: float) -> Rect:
        """Shrink by d on every side, never below zero size."""
        return Rect(self.x + d, self.y + d, max(0.0, self.w - 2 * d), max(0.0, self.h - 2 * d))


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    path: str = ""
    placeholder: bool = False
