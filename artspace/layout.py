"""Layout renderers - pure functions from screen state to a render tree.

portrait_layout and landscape_layout arrange the same two regions (artwork
panel, navigation controls) differently. compose_screen is the one place
that picks between them.
"""

from __future__ import annotations
from dataclasses import replace
from functools import partial
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .state import AppState

from .animation import AnimationType, CrossFadeAnimation
from .catalog import Catalog
from .config import (
    SCREEN_PADDING, SECTION_SPACER,
    CARD_MARGIN, CARD_PADDING,
    IMAGE_BOX_HEIGHT, IMAGE_TEXT_GAP, TITLE_CAPTION_GAP,
    TITLE_FONT_SIZE, CAPTION_FONT_SIZE,
    PORTRAIT_PANEL_WEIGHT, PORTRAIT_CONTROLS_WEIGHT,
    LANDSCAPE_PANEL_WEIGHT, LANDSCAPE_CONTROLS_WEIGHT,
    BUTTON_W, BUTTON_H, CONTROLS_PADDING,
    LABEL_PREVIOUS, LABEL_NEXT,
)
from .logging import now
from .math_utils import split_by_weights
from .state.navigation import advance_index, retreat_index
from .types import Artwork, NavRole, Orientation, Rect
from .view_tree import ArtworkPanelNode, ButtonNode, ControlsNode, ScreenNode, TransitionNode

IndexChangeCallback = Callable[[int], None]


def screen_bounds(screen_w: float, screen_h: float) -> Rect:
    """Window area minus the outer padding."""
    return Rect(0.0, 0.0, float(screen_w), float(screen_h)).inset(SCREEN_PADDING)


# ═══════════════════════════════════════════════════════════════════════════
# Leaf components
# ═══════════════════════════════════════════════════════════════════════════

def artwork_panel(artwork: Artwork, rect: Rect) -> ArtworkPanelNode:
    """Place one artwork's image, title and caption inside rect.

    Only the resolved artwork is passed in; which artwork is selected is
    decided elsewhere.
    """
    card = rect.inset(CARD_MARGIN)
    inner = card.inset(CARD_PADDING)
    text_h = TITLE_FONT_SIZE + TITLE_CAPTION_GAP + CAPTION_FONT_SIZE
    image_h = min(float(IMAGE_BOX_HEIGHT), max(0.0, inner.h - IMAGE_TEXT_GAP - text_h))
    image = Rect(inner.x, inner.y, inner.w, image_h)
    title_y = image.bottom + IMAGE_TEXT_GAP
    caption_y = title_y + TITLE_FONT_SIZE + TITLE_CAPTION_GAP
    return ArtworkPanelNode(
        rect=rect,
        card=card,
        artwork=artwork,
        image=image,
        title_pos=(inner.x, title_y),
        caption_pos=(inner.x, caption_y),
        text_width=inner.w,
    )


def navigation_controls(
    current_index: int,
    count: int,
    on_index_change: IndexChangeCallback,
    rect: Rect,
) -> ControlsNode:
    """'Previous' and 'Next' buttons spaced evenly across rect.

    Each button forwards the retreat/advance result for current_index to
    on_index_change.
    """
    inner_w = max(0.0, rect.w - 2 * CONTROLS_PADDING)
    bw = min(float(BUTTON_W), inner_w / 2.0)
    gap = (inner_w - 2 * bw) / 3.0
    bh = min(float(BUTTON_H), max(0.0, rect.h - 2 * CONTROLS_PADDING))
    by = rect.y + (rect.h - bh) / 2.0
    x0 = rect.x + CONTROLS_PADDING + gap

    prev_btn = ButtonNode(
        role=NavRole.PREVIOUS,
        label=LABEL_PREVIOUS,
        rect=Rect(x0, by, bw, bh),
        on_activate=partial(on_index_change, retreat_index(current_index, count)),
    )
    next_btn = ButtonNode(
        role=NavRole.NEXT,
        label=LABEL_NEXT,
        rect=Rect(x0 + bw + gap, by, bw, bh),
        on_activate=partial(on_index_change, advance_index(current_index, count)),
    )
    return ControlsNode(rect=rect, buttons=(prev_btn, next_btn))


# ═══════════════════════════════════════════════════════════════════════════
# Layout renderers
# ═══════════════════════════════════════════════════════════════════════════

def portrait_layout(
    catalog: Catalog,
    current_index: int,
    on_index_change: IndexChangeCallback,
    bounds: Rect,
) -> ScreenNode:
    """Column: panel on top taking most of the height, controls below."""
    avail = max(0.0, bounds.h - SECTION_SPACER)
    panel_h, controls_h = split_by_weights(avail, (PORTRAIT_PANEL_WEIGHT, PORTRAIT_CONTROLS_WEIGHT))
    panel_rect = Rect(bounds.x, bounds.y, bounds.w, panel_h)
    controls_rect = Rect(bounds.x, panel_rect.bottom + SECTION_SPACER, bounds.w, controls_h)
    return ScreenNode(
        orientation=Orientation.PORTRAIT,
        bounds=bounds,
        panel=artwork_panel(catalog[current_index], panel_rect),
        controls=navigation_controls(current_index, len(catalog), on_index_change, controls_rect),
    )


def landscape_layout(
    catalog: Catalog,
    current_index: int,
    on_index_change: IndexChangeCallback,
    bounds: Rect,
) -> ScreenNode:
    """Row: panel and controls side by side, half the width each."""
    panel_w, controls_w = split_by_weights(bounds.w, (LANDSCAPE_PANEL_WEIGHT, LANDSCAPE_CONTROLS_WEIGHT))
    panel_rect = Rect(bounds.x, bounds.y, panel_w, bounds.h)
    controls_h = min(bounds.h, BUTTON_H + 2.0 * CONTROLS_PADDING)
    controls_rect = Rect(
        panel_rect.right,
        bounds.y + (bounds.h - controls_h) / 2.0,
        controls_w,
        controls_h,
    )
    return ScreenNode(
        orientation=Orientation.LANDSCAPE,
        bounds=bounds,
        panel=artwork_panel(catalog[current_index], panel_rect),
        controls=navigation_controls(current_index, len(catalog), on_index_change, controls_rect),
    )


def compose_screen(
    orientation: Orientation,
    catalog: Catalog,
    current_index: int,
    on_index_change: IndexChangeCallback,
    screen_w: float,
    screen_h: float,
    outgoing: Optional[Artwork] = None,
    fade: float = 1.0,
) -> ScreenNode:
    """Build the tree for the given orientation.

    When outgoing is set and fade < 1, the tree carries a transition whose
    outgoing panel sits exactly where the current panel is.
    """
    bounds = screen_bounds(screen_w, screen_h)
    if orientation is Orientation.LANDSCAPE:
        screen = landscape_layout(catalog, current_index, on_index_change, bounds)
    else:
        screen = portrait_layout(catalog, current_index, on_index_change, bounds)

    if outgoing is not None and fade < 1.0:
        transition = TransitionNode(
            outgoing=artwork_panel(outgoing, screen.panel.rect),
            progress=max(0.0, fade),
        )
        screen = replace(screen, transition=transition)
    return screen


def compose_from_state(
    state: "AppState",
    on_index_change: IndexChangeCallback,
    t: Optional[float] = None,
) -> ScreenNode:
    """Compose the tree for the screen's current state at time t."""
    t = now() if t is None else t
    outgoing = None
    fade = 1.0
    anim = state.anim.get_animation(AnimationType.CROSSFADE)
    if isinstance(anim, CrossFadeAnimation) and not anim.is_complete_at(t):
        outgoing = anim.outgoing
        fade = anim.eased_at(t)
    return compose_screen(
        state.orientation,
        state.catalog,
        state.index,
        on_index_change,
        state.window.screen_w,
        state.window.screen_h,
        outgoing=outgoing,
        fade=fade,
    )
