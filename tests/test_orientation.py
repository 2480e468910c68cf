from __future__ import annotations

import pytest

from artspace.orientation import is_landscape, select_layout
from artspace.state import AppState
from artspace.types import Orientation


@pytest.mark.parametrize(
    ("width", "height", "expected"),
    [
        (480, 800, Orientation.PORTRAIT),
        (800, 480, Orientation.LANDSCAPE),
        (600, 600, Orientation.PORTRAIT),
        (601, 600, Orientation.LANDSCAPE),
        (0, 0, Orientation.PORTRAIT),
    ],
)
def test_select_layout(width: int, height: int, expected: Orientation) -> None:
    assert select_layout(width, height) is expected


def test_is_landscape() -> None:
    assert is_landscape(Orientation.LANDSCAPE)
    assert not is_landscape(Orientation.PORTRAIT)


def test_state_orientation_follows_window_size() -> None:
    state = AppState()
    state.window.resize(480, 800)
    assert state.orientation is Orientation.PORTRAIT
    state.window.resize(800, 480)
    assert state.orientation is Orientation.LANDSCAPE


def test_orientation_change_never_moves_cursor() -> None:
    state = AppState()
    state.navigation.select(2)
    for size in [(800, 480), (480, 800), (1024, 768), (300, 300)]:
        state.window.resize(*size)
        assert state.index == 2


def test_fresh_state_starts_at_zero() -> None:
    first = AppState()
    first.navigation.advance()
    assert AppState().index == 0
