"""Composite AppState - everything the screen owns."""

from __future__ import annotations
from dataclasses import dataclass, field

from .window import WindowState
from .navigation import NavigationState
from .ui import UIState
from ..animation import AnimationController
from ..catalog import Catalog, DEFAULT_CATALOG
from ..orientation import select_layout
from ..types import Artwork, Orientation


@dataclass
class AppState:
    """
    Screen state.

    A fresh AppState is a fresh screen mount: the cursor starts at 0 and
    nothing carries over from a previous instance.
    """
    catalog: Catalog = DEFAULT_CATALOG
    window: WindowState = field(default_factory=WindowState)
    navigation: NavigationState = field(init=False)
    ui: UIState = field(default_factory=UIState)
    anim: AnimationController = field(default_factory=AnimationController)

    def __post_init__(self) -> None:
        self.navigation = NavigationState(count=len(self.catalog))

    @property
    def index(self) -> int:
        return self.navigation.current_index

    @property
    def current_artwork(self) -> Artwork:
        return self.catalog[self.navigation.current_index]

    @property
    def orientation(self) -> Orientation:
        """Derived from the window shape on every access; never stored."""
        return select_layout(self.window.screen_w, self.window.screen_h)
