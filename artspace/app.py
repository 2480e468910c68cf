"""Application - main loop orchestrator.

The Application owns the screen state and runs the frame loop:
- Window size sync (resize / rotation)
- Input handling (via InputHandler) -> commands
- Command execution (the only place state changes)
- Animation updates
- Composition of a fresh render tree and drawing it (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import traceback

from .state import AppState
from .catalog import Catalog, DEFAULT_CATALOG
from .renderer import Renderer
from .input_handler import InputHandler
from .textures import TextureStore
from .commands import Command, CloseApp, RotateWindow, SelectArtwork
from .layout import compose_from_state
from .view_tree import ScreenNode
from .rl_compat import rl, RL_VERSION, init_window
from .config import ASSETS_DIR, TARGET_FPS, WINDOW_TITLE
from .logging import channel, increment_frame

_log = channel("APP")
_init_log = channel("INIT")
_cleanup_log = channel("CLEANUP")


@dataclass
class Application:
    """
    Screen controller.

    Usage:
        app = Application()
        app.initialize()
        app.run()
    """

    state: AppState = field(default_factory=AppState)
    assets_dir: str = ASSETS_DIR
    renderer: Optional[Renderer] = None
    input_handler: InputHandler = field(default_factory=InputHandler)
    running: bool = False

    def initialize(self) -> None:
        """Open the window and set up drawing."""
        w, h = self.state.window.size
        _init_log(f"Creating window: {w}x{h}")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE | rl.FLAG_MSAA_4X_HINT)
        init_window(w, h, WINDOW_TITLE)
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)
        if self.renderer is None:
            self.renderer = Renderer(textures=TextureStore(self.assets_dir))
        self.state.window.resize(rl.GetScreenWidth(), rl.GetScreenHeight())
        _init_log(f"RL={RL_VERSION} window={self.state.window.screen_w}x{self.state.window.screen_h} "
            f"artworks={len(self.state.catalog)} orientation={self.state.orientation.value}")

    def on_index_change(self, new_index: int) -> None:
        """Callback wired into the navigation buttons."""
        self.execute(SelectArtwork(new_index))

    def compose(self) -> ScreenNode:
        return compose_from_state(self.state, self.on_index_change)

    def run(self) -> None:
        """Run the main loop until the window closes."""
        self.running = True
        _log("Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            _log.critical(f"Unhandled exception: {e!r}\nTraceback:\n{traceback.format_exc()}")
            raise
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.running = False
            return

        # 1. Pick up window resizes (orientation is derived from the size)
        if self.state.window.resize(rl.GetScreenWidth(), rl.GetScreenHeight()):
            _log(f"Window resized to {self.state.window.screen_w}x{self.state.window.screen_h} "
                f"({self.state.orientation.value})")

        # 2. Poll input against the tree the user is looking at
        tree = self.compose()
        for cmd in self.input_handler.poll(self.state, tree):
            self.execute(cmd)
            if not self.running:
                return

        # 3. Update animations
        self.state.anim.update()

        # 4. Render a fresh tree
        self.renderer.draw_frame(self.state, self.compose())

        increment_frame()

    def execute(self, cmd: Command) -> bool:
        """Execute a single command against the screen state."""
        if isinstance(cmd, CloseApp):
            cmd.execute(self.state)
            self.running = False
            return True

        if not cmd.can_execute(self.state):
            return False
        done = cmd.execute(self.state)

        if done and isinstance(cmd, RotateWindow) and rl.IsWindowReady():
            rl.SetWindowSize(*self.state.window.size)
        return done

    def _cleanup(self) -> None:
        """Clean up resources."""
        _cleanup_log("Starting cleanup")
        self.state.anim.cancel_all()
        if self.renderer is not None:
            self.renderer.textures.unload_all()
        if rl.IsWindowReady():
            _cleanup_log("Closing window")
            rl.CloseWindow()
        _cleanup_log("Cleanup complete")


def create_app(catalog: Catalog = DEFAULT_CATALOG, assets_dir: str = ASSETS_DIR) -> Application:
    """Create an application for a fresh screen mount."""
    return Application(state=AppState(catalog=catalog), assets_dir=assets_dir)


def main() -> int:
    """Run Art Space."""
    app = create_app()
    app.initialize()
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
