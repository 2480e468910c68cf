"""UI state - hover feedback and HUD toggle."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..types import NavRole


@dataclass
class UIState:
    """State for UI elements."""
    show_hud: bool = False
    hover_role: Optional[NavRole] = None
    pressed_role: Optional[NavRole] = None

    def toggle_hud(self) -> None:
        """Toggle HUD visibility."""
        self.show_hud = not self.show_hud
