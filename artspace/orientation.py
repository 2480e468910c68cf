"""Orientation selector - window shape to layout choice."""

from __future__ import annotations

from .types import Orientation


def select_layout(width: int, height: int) -> Orientation:
    """Landscape when wider than tall; portrait otherwise (square included)."""
    if width > height:
        return Orientation.LANDSCAPE
    return Orientation.PORTRAIT


def is_landscape(orientation: Orientation) -> bool:
    return orientation is Orientation.LANDSCAPE
