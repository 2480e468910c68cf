"""State management submodules for Art Space."""

from .window import WindowState
from .navigation import NavigationState, advance_index, retreat_index
from .ui import UIState
from .app_state import AppState

__all__ = [
    'WindowState',
    'NavigationState',
    'advance_index',
    'retreat_index',
    'UIState',
    'AppState',
]
