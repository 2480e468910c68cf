"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import AppState
    from .view_tree import ScreenNode

from .animation import create_crossfade_animation
from .config import ANIM_CROSSFADE_MS
from .types import NavRole
from .logging import channel

_log = channel("CMD")


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SelectArtwork(Command):
    """Move the cursor to target_index and cross-fade to it."""
    target_index: int
    animate: bool = True
    duration_ms: int = ANIM_CROSSFADE_MS
    start_time: Optional[float] = None

    def can_execute(self, state: "AppState") -> bool:
        return self.target_index != state.index

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        old_index = state.index
        outgoing = state.current_artwork
        state.navigation.select(self.target_index)
        if self.animate and self.duration_ms > 0:
            state.anim.start(create_crossfade_animation(
                self.duration_ms, outgoing, start_time=self.start_time,
            ))
        _log(f"SelectArtwork: {old_index} -> {self.target_index}")
        return True


@dataclass
class PressButton(Command):
    """Activate the button with the given role in the current tree."""
    role: NavRole
    tree: "ScreenNode"

    def can_execute(self, state: "AppState") -> bool:
        return self.tree.find_button(self.role) is not None

    def execute(self, state: "AppState") -> bool:
        button = self.tree.find_button(self.role)
        if button is None:
            return False
        _log(f"PressButton: {button.label}")
        state.ui.pressed_role = self.role
        button.activate()
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Window Commands
# ═══════════════════════════════════════════════════════════════════════════

class RotateWindow(Command):
    """Swap window width and height, like turning the device."""

    def execute(self, state: "AppState") -> bool:
        old = state.orientation
        w, h = state.window.rotated_size()
        state.window.resize(w, h)
        _log(f"RotateWindow: {old.value} -> {state.orientation.value} ({w}x{h})")
        return True


class ToggleHUD(Command):
    """Toggle HUD display."""

    def execute(self, state: "AppState") -> bool:
        state.ui.toggle_hud()
        _log(f"ToggleHUD: now={state.ui.show_hud}")
        return True


class CloseApp(Command):
    """Request application close."""

    def execute(self, state: "AppState") -> bool:
        _log("CloseApp")
        return True
