"""Application configuration constants."""

from __future__ import annotations

import os

# Window
WINDOW_TITLE = "Art Space"
WINDOW_W = 480
WINDOW_H = 800
TARGET_FPS = 60

# Assets
ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")

# Layout (pixels)
SCREEN_PADDING = 16
SECTION_SPACER = 16
CARD_MARGIN = 16
CARD_PADDING = 16
CARD_CORNER_RADIUS = 8
CARD_SHADOW_OFFSET = 6
IMAGE_BOX_HEIGHT = 300
IMAGE_TEXT_GAP = 16
TITLE_CAPTION_GAP = 6

# Portrait column weights (panel : controls)
PORTRAIT_PANEL_WEIGHT = 1.0
PORTRAIT_CONTROLS_WEIGHT = 0.3

# Landscape row weights (panel : controls)
LANDSCAPE_PANEL_WEIGHT = 1.0
LANDSCAPE_CONTROLS_WEIGHT = 1.0

# Navigation buttons
BUTTON_W = 140
BUTTON_H = 48
CONTROLS_PADDING = 16
LABEL_PREVIOUS = "Previous"
LABEL_NEXT = "Next"

# Font sizes
TITLE_FONT_SIZE = 24
CAPTION_FONT_SIZE = 16
BUTTON_FONT_SIZE = 20
HUD_FONT_SIZE = 16

# Animation durations (milliseconds)
ANIM_CROSSFADE_MS = 300

# Colors (RGBA)
COLOR_BACKGROUND = (255, 251, 254, 255)
COLOR_CARD = (243, 237, 247, 255)
COLOR_SHADOW = (0, 0, 0, 40)
COLOR_TITLE = (28, 27, 31, 255)
COLOR_CAPTION = (128, 128, 128, 255)
COLOR_BUTTON = (103, 80, 164, 255)
COLOR_BUTTON_HOVER = (127, 103, 190, 255)
COLOR_BUTTON_TEXT = (255, 255, 255, 255)
COLOR_HUD = (120, 120, 120, 255)

# Placeholder image (launcher background grid)
PLACEHOLDER_SIZE = (108, 108)
PLACEHOLDER_FILL = (61, 220, 132)
PLACEHOLDER_GRID = (90, 228, 150)
PLACEHOLDER_GRID_STEP = 10

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT = 262              # KEY_RIGHT
KEY_NEXT_ALT = 68           # KEY_D
KEY_PREV = 263              # KEY_LEFT
KEY_PREV_ALT = 65           # KEY_A
KEY_ROTATE = 82             # KEY_R
KEY_TOGGLE_HUD = 73         # KEY_I
KEY_CLOSE = 256             # KEY_ESCAPE

# Supported image extensions
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"})
