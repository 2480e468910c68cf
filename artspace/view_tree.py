"""Render tree - immutable description of one frame.

Layout functions build these nodes; the renderer draws them and the input
handler hit-tests them. Nothing here touches raylib.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .types import Artwork, NavRole, Orientation, Rect


@dataclass(frozen=True)
class ArtworkPanelNode:
    """Card showing one artwork: image box, title line, caption line."""
    rect: Rect
    card: Rect
    artwork: Artwork
    image: Rect
    title_pos: Tuple[float, float]
    caption_pos: Tuple[float, float]
    text_width: float


@dataclass(frozen=True)
class ButtonNode:
    """A clickable button. on_activate takes no arguments."""
    role: NavRole
    label: str
    rect: Rect
    on_activate: Callable[[], None] = field(compare=False, repr=False)

    def activate(self) -> None:
        self.on_activate()


@dataclass(frozen=True)
class ControlsNode:
    """Row of navigation buttons."""
    rect: Rect
    buttons: Tuple[ButtonNode, ...]


@dataclass(frozen=True)
class TransitionNode:
    """Outgoing panel of a running cross-fade."""
    outgoing: ArtworkPanelNode
    progress: float  # incoming alpha, 0..1


@dataclass(frozen=True)
class ScreenNode:
    """Root of the tree: one layout composition."""
    orientation: Orientation
    bounds: Rect
    panel: ArtworkPanelNode
    controls: ControlsNode
    transition: Optional[TransitionNode] = None

    @property
    def buttons(self) -> Tuple[ButtonNode, ...]:
        return self.controls.buttons

    def find_button(self, role: NavRole) -> Optional[ButtonNode]:
        """Get the button with the given role or None."""
        for b in self.controls.buttons:
            if b.role is role:
                return b
        return None


def find_button_at(tree: ScreenNode, x: float, y: float) -> Optional[ButtonNode]:
    """Hit-test the tree's buttons at a window point."""
    for b in tree.buttons:
        if b.rect.contains(x, y):
            return b
    return None
