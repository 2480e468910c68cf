"""Renderer - handles all drawing operations.

The Renderer is a pure drawing layer: it reads the render tree and the
state, and draws to screen. It does not modify state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl, RL_VERSION,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text as RL_MeasureText,
    is_texture_valid,
)
from .logging import get_frame, error_count
from .textures import TextureStore
from .view_math import crop_source_rect
from .view_tree import ArtworkPanelNode, ButtonNode, ScreenNode
from .config import (
    CARD_CORNER_RADIUS, CARD_SHADOW_OFFSET,
    TITLE_FONT_SIZE, CAPTION_FONT_SIZE, BUTTON_FONT_SIZE, HUD_FONT_SIZE,
    COLOR_BACKGROUND, COLOR_CARD, COLOR_SHADOW, COLOR_TITLE, COLOR_CAPTION,
    COLOR_BUTTON, COLOR_BUTTON_HOVER, COLOR_BUTTON_TEXT, COLOR_HUD,
)


def _roundness(w: float, h: float, radius: float) -> float:
    """Convert a corner radius to raylib's 0..1 roundness."""
    short = min(w, h)
    if short <= 0:
        return 0.0
    return min(1.0, 2.0 * radius / short)


def ellipsize(text: str, max_width: float, size: int) -> str:
    """Trim text with '...' so it fits max_width at the given font size."""
    if RL_MeasureText(text, size) <= max_width:
        return text
    while text and RL_MeasureText(text + "...", size) > max_width:
        text = text[:-1]
    return text + "..." if text else ""


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer(textures)
        renderer.draw_frame(state, tree)
    """

    textures: TextureStore = field(default_factory=TextureStore)

    def begin_frame(self) -> None:
        """Begin a new frame."""
        rl.BeginDrawing()

    def end_frame(self) -> None:
        """End the current frame."""
        rl.EndDrawing()

    def draw_background(self) -> None:
        rl.ClearBackground(RL_Color(COLOR_BACKGROUND))

    # ═══════════════════════════════════════════════════════════════════════
    # Artwork panel
    # ═══════════════════════════════════════════════════════════════════════

    def draw_panel(self, node: ArtworkPanelNode, alpha: float = 1.0) -> None:
        """Draw card, image and text for one artwork."""
        if alpha <= 0.01:
            return
        card = node.card
        if card.w <= 0 or card.h <= 0:
            return
        roundness = _roundness(card.w, card.h, CARD_CORNER_RADIUS)

        rl.DrawRectangleRounded(
            RL_Rect(card.x + CARD_SHADOW_OFFSET / 2, card.y + CARD_SHADOW_OFFSET, card.w, card.h),
            roundness, 8, RL_Color(COLOR_SHADOW, alpha))
        rl.DrawRectangleRounded(
            RL_Rect(card.x, card.y, card.w, card.h),
            roundness, 8, RL_Color(COLOR_CARD, alpha))

        self._draw_artwork_image(node, alpha)

        tx, ty = node.title_pos
        RL_DrawText(ellipsize(node.artwork.title, node.text_width, TITLE_FONT_SIZE),
                    tx, ty, TITLE_FONT_SIZE, RL_Color(COLOR_TITLE, alpha))
        cx, cy = node.caption_pos
        RL_DrawText(ellipsize(node.artwork.display_text, node.text_width, CAPTION_FONT_SIZE),
                    cx, cy, CAPTION_FONT_SIZE, RL_Color(COLOR_CAPTION, alpha))

    def _draw_artwork_image(self, node: ArtworkPanelNode, alpha: float) -> None:
        """Draw the image cropped to fill its box."""
        box = node.image
        if box.w <= 0 or box.h <= 0:
            return
        ti = self.textures.get(node.artwork.image_ref)
        if not is_texture_valid(ti.tex):
            return
        src = crop_source_rect(ti.w, ti.h, box.w, box.h)
        rl.DrawTexturePro(
            ti.tex,
            RL_Rect(src.x, src.y, src.w, src.h),
            RL_Rect(box.x, box.y, box.w, box.h),
            RL_V2(0, 0), 0.0, RL_Color((255, 255, 255, 255), alpha)
        )

    # ═══════════════════════════════════════════════════════════════════════
    # Navigation controls
    # ═══════════════════════════════════════════════════════════════════════

    def draw_button(self, button: ButtonNode, hovered: bool) -> None:
        r = button.rect
        if r.w <= 0 or r.h <= 0:
            return
        color = COLOR_BUTTON_HOVER if hovered else COLOR_BUTTON
        rl.DrawRectangleRounded(RL_Rect(r.x, r.y, r.w, r.h), 1.0, 16, RL_Color(color))
        label = ellipsize(button.label, r.w - 8, BUTTON_FONT_SIZE)
        tw = RL_MeasureText(label, BUTTON_FONT_SIZE)
        RL_DrawText(label, r.x + (r.w - tw) / 2, r.y + (r.h - BUTTON_FONT_SIZE) / 2,
                    BUTTON_FONT_SIZE, RL_Color(COLOR_BUTTON_TEXT))

    def draw_controls(self, tree: ScreenNode, state: "AppState") -> None:
        for button in tree.buttons:
            self.draw_button(button, hovered=(state.ui.hover_role is button.role))

    # ═══════════════════════════════════════════════════════════════════════
    # HUD
    # ═══════════════════════════════════════════════════════════════════════

    def hud_lines(self, state: "AppState", tree: ScreenNode) -> List[str]:
        lines = [
            f"RL={RL_VERSION}",
            f"idx={state.index + 1}/{len(state.catalog)} {tree.orientation.value}",
            f"window={state.window.screen_w}x{state.window.screen_h} frame={get_frame()}",
        ]
        if state.ui.pressed_role is not None:
            lines.append(f"last={state.ui.pressed_role.value}")
        if error_count():
            lines.append(f"errors={error_count()}")
        if tree.transition is not None:
            lines.append(f"fade={tree.transition.progress:.2f}")
        return lines

    def draw_hud(self, state: "AppState", tree: ScreenNode) -> None:
        """Draw debug HUD."""
        if not state.ui.show_hud:
            return
        lines = self.hud_lines(state, tree)
        y = state.window.screen_h - 8 - (HUD_FONT_SIZE + 4) * len(lines)
        for line in lines:
            RL_DrawText(line, 8, y, HUD_FONT_SIZE, RL_Color(COLOR_HUD))
            y += HUD_FONT_SIZE + 4

    # ═══════════════════════════════════════════════════════════════════════
    # Frame
    # ═══════════════════════════════════════════════════════════════════════

    def draw_all(self, state: "AppState", tree: ScreenNode) -> None:
        """Draw the whole tree (call between begin_frame/end_frame)."""
        self.draw_background()
        if tree.transition is not None:
            t = tree.transition.progress
            self.draw_panel(tree.transition.outgoing, alpha=1.0 - t)
            self.draw_panel(tree.panel, alpha=t)
        else:
            self.draw_panel(tree.panel)
        self.draw_controls(tree, state)
        self.draw_hud(state, tree)

    def draw_frame(self, state: "AppState", tree: ScreenNode) -> None:
        """Complete frame."""
        self.begin_frame()
        try:
            self.draw_all(state, tree)
        finally:
            self.end_frame()
