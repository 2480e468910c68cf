from __future__ import annotations

from typing import List

import pytest

from artspace.catalog import Catalog
from artspace.layout import (
    artwork_panel,
    compose_screen,
    landscape_layout,
    navigation_controls,
    portrait_layout,
    screen_bounds,
)
from artspace.types import Artwork, NavRole, Orientation, Rect
from artspace.view_tree import find_button_at

A = Artwork("a.png", "A")
B = Artwork("b.png", "B")
C = Artwork("c.png", "C")
CATALOG = Catalog([A, B, C])


class Recorder:
    def __init__(self) -> None:
        self.calls: List[int] = []

    def __call__(self, index: int) -> None:
        self.calls.append(index)


def test_portrait_stacks_panel_above_controls() -> None:
    tree = portrait_layout(CATALOG, 0, Recorder(), screen_bounds(480, 800))
    panel, controls = tree.panel.rect, tree.controls.rect
    assert tree.orientation is Orientation.PORTRAIT
    assert controls.y >= panel.bottom
    assert panel.h > controls.h
    assert panel.w == controls.w


def test_landscape_places_panel_and_controls_side_by_side() -> None:
    tree = landscape_layout(CATALOG, 0, Recorder(), screen_bounds(800, 480))
    panel, controls = tree.panel.rect, tree.controls.rect
    assert tree.orientation is Orientation.LANDSCAPE
    assert controls.x == pytest.approx(panel.right)
    assert panel.w == pytest.approx(controls.w)
    assert panel.w + controls.w == pytest.approx(tree.bounds.w)


@pytest.mark.parametrize("layout", [portrait_layout, landscape_layout])
@pytest.mark.parametrize(
    ("index", "expected_prev", "expected_next"),
    [(0, 2, 1), (1, 0, 2), (2, 1, 0)],
)
def test_layouts_forward_requested_index_unchanged(layout, index, expected_prev, expected_next) -> None:
    rec = Recorder()
    tree = layout(CATALOG, index, rec, screen_bounds(640, 640))
    tree.find_button(NavRole.PREVIOUS).activate()
    tree.find_button(NavRole.NEXT).activate()
    assert rec.calls == [expected_prev, expected_next]


def test_layout_shows_artwork_at_cursor() -> None:
    tree = portrait_layout(CATALOG, 1, Recorder(), screen_bounds(480, 800))
    assert tree.panel.artwork is B


def test_buttons_are_labeled_and_ordered() -> None:
    controls = navigation_controls(0, 3, Recorder(), Rect(0, 0, 400, 100))
    assert [b.label for b in controls.buttons] == ["Previous", "Next"]
    prev_btn, next_btn = controls.buttons
    assert prev_btn.rect.right < next_btn.rect.x
    assert controls.rect.contains(*prev_btn.rect.center)
    assert controls.rect.contains(*next_btn.rect.center)


def test_single_artwork_controls_request_index_zero() -> None:
    rec = Recorder()
    controls = navigation_controls(0, 1, rec, Rect(0, 0, 400, 100))
    for b in controls.buttons:
        b.activate()
    assert rec.calls == [0, 0]


def test_panel_places_title_under_image() -> None:
    node = artwork_panel(C, Rect(0, 0, 400, 600))
    assert node.artwork is C
    assert node.card.w < node.rect.w
    assert node.image.h == 300
    assert node.title_pos[1] > node.image.bottom
    assert node.caption_pos[1] > node.title_pos[1]
    assert node.title_pos[0] == node.image.x


def test_panel_shrinks_image_in_short_space() -> None:
    node = artwork_panel(A, Rect(0, 0, 400, 200))
    assert 0 <= node.image.h < 300
    assert node.caption_pos[1] <= node.card.bottom


def test_compose_screen_dispatches_on_orientation() -> None:
    rec = Recorder()
    p = compose_screen(Orientation.PORTRAIT, CATALOG, 0, rec, 800, 480)
    l = compose_screen(Orientation.LANDSCAPE, CATALOG, 0, rec, 800, 480)
    assert p.orientation is Orientation.PORTRAIT
    assert l.orientation is Orientation.LANDSCAPE
    assert p.transition is None and l.transition is None


def test_compose_screen_adds_transition_while_fading() -> None:
    tree = compose_screen(Orientation.PORTRAIT, CATALOG, 1, Recorder(), 480, 800, outgoing=A, fade=0.25)
    assert tree.transition is not None
    assert tree.transition.outgoing.artwork is A
    assert tree.transition.outgoing.rect == tree.panel.rect
    assert tree.transition.progress == pytest.approx(0.25)
    assert tree.panel.artwork is B


def test_compose_screen_drops_finished_transition() -> None:
    tree = compose_screen(Orientation.PORTRAIT, CATALOG, 1, Recorder(), 480, 800, outgoing=A, fade=1.0)
    assert tree.transition is None


def test_find_button_at_hits_and_misses() -> None:
    tree = portrait_layout(CATALOG, 0, Recorder(), screen_bounds(480, 800))
    nxt = tree.find_button(NavRole.NEXT)
    cx, cy = nxt.rect.center
    assert find_button_at(tree, cx, cy) is nxt
    assert find_button_at(tree, 1, 1) is None
