"""Input Handler - maps raylib input events to commands.

Polls input each frame, hit-tests the current render tree and returns a
list of commands to execute.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import rl
from .commands import Command, PressButton, RotateWindow, ToggleHUD, CloseApp
from .config import (
    KEY_NEXT, KEY_NEXT_ALT, KEY_PREV, KEY_PREV_ALT,
    KEY_ROTATE, KEY_TOGGLE_HUD, KEY_CLOSE,
)
from .types import NavRole
from .view_tree import ScreenNode, find_button_at


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False


@dataclass
class InputHandler:
    """Handles input polling and command generation."""

    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT, KEY_NEXT_ALT])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV, KEY_PREV_ALT])
    key_rotate: int = KEY_ROTATE
    key_toggle_hud: int = KEY_TOGGLE_HUD
    key_close: int = KEY_CLOSE

    def poll_mouse(self) -> MouseState:
        """Get current mouse state."""
        pos = rl.GetMousePosition()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
        )

    def _any_pressed(self, keys: List[int]) -> bool:
        return any(rl.IsKeyPressed(k) for k in keys)

    def poll(self, state: "AppState", tree: ScreenNode) -> List[Command]:
        """Poll all inputs and return list of commands to execute."""
        commands: List[Command] = []
        mouse = self.poll_mouse()

        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp())
            return commands

        # Hover feedback for the renderer
        hovered = find_button_at(tree, mouse.x, mouse.y)
        state.ui.hover_role = hovered.role if hovered else None

        if rl.IsKeyPressed(self.key_toggle_hud):
            commands.append(ToggleHUD())

        if rl.IsKeyPressed(self.key_rotate):
            commands.append(RotateWindow())
            # The tree is stale after a rotation; skip this frame's presses
            return commands

        role: Optional[NavRole] = None
        if mouse.left_pressed and hovered is not None:
            role = hovered.role
        elif self._any_pressed(self.key_next):
            role = NavRole.NEXT
        elif self._any_pressed(self.key_prev):
            role = NavRole.PREVIOUS

        if role is not None:
            commands.append(PressButton(role=role, tree=tree))

        return commands
