"""Window state - screen dimensions."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import WINDOW_W, WINDOW_H


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = WINDOW_W
    screen_h: int = WINDOW_H

    @property
    def size(self) -> Tuple[int, int]:
        """Get window size as tuple."""
        return (self.screen_w, self.screen_h)

    def resize(self, w: int, h: int) -> bool:
        """Update dimensions. Returns True if they changed."""
        if (w, h) == (self.screen_w, self.screen_h):
            return False
        self.screen_w, self.screen_h = w, h
        return True

    def rotated_size(self) -> Tuple[int, int]:
        """Dimensions after a quarter turn."""
        return (self.screen_h, self.screen_w)
