"""Window surface - raylib window, fullscreen modes, title and key events."""

from __future__ import annotations
from typing import Dict, List

from .config import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from .errors import WindowError
from .logging import log
from .rl_compat import rl, c_str, RL_VERSION
from .state.window import WindowState
from .surfaces import WindowSurface
from .types import (
    FullscreenMode,
    KEY_ESC, KEY_LEFT, KEY_RIGHT, KEY_UP, KEY_DOWN, KEY_SPACE, KEY_ENTER, KEY_QUIT, KEY_CTRL_C,
)

# raylib key codes -> key symbols shared with the terminal decoder
WINDOW_KEYS: Dict[int, str] = {
    rl.KEY_ESCAPE: KEY_ESC,
    rl.KEY_RIGHT: KEY_RIGHT,
    rl.KEY_LEFT: KEY_LEFT,
    rl.KEY_UP: KEY_UP,
    rl.KEY_DOWN: KEY_DOWN,
    rl.KEY_SPACE: KEY_SPACE,
    rl.KEY_ENTER: KEY_ENTER,
    rl.KEY_Q: "q",
    rl.KEY_F: "f",
    rl.KEY_R: "r",
    rl.KEY_Z: "z",
    rl.KEY_P: "p",
}


class RaylibWindow(WindowSurface):
    """A resizable raylib window.

    Usage:
        window = RaylibWindow()
        window.open(800, 600)
        ...
        window.close()
    """

    def __init__(self):
        self.state = WindowState()

    def open(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT,
             title: str = WINDOW_TITLE) -> None:
        log(f"[INIT] Creating window: {width}x{height} ({RL_VERSION})")
        rl.SetTraceLogLevel(rl.LOG_WARNING)
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
        rl.InitWindow(width, height, c_str(title))
        if not rl.IsWindowReady():
            raise WindowError("raylib could not create a window")
        # Escape is handled as a key symbol, not as raylib's exit key.
        rl.SetExitKey(rl.KEY_NULL)
        self.state.is_open = True
        self.state.title = title
        self.state.screen_w, self.state.screen_h = rl.GetScreenWidth(), rl.GetScreenHeight()
        log(f"[INIT] Window created {self.state.screen_w}x{self.state.screen_h}")

    def set_title(self, text: str) -> None:
        if not self.state.is_open:
            raise WindowError("window is not open")
        if text == self.state.title:
            return
        rl.SetWindowTitle(c_str(text))
        self.state.title = text

    def set_fullscreen(self, mode: FullscreenMode) -> None:
        if not self.state.is_open:
            raise WindowError("window is not open")
        if mode == self.state.fullscreen:
            return
        try:
            self._toggle(self.state.fullscreen)  # leave current mode
            self.state.fullscreen = FullscreenMode.OFF
            self._toggle(mode)
        except AttributeError as e:
            raise WindowError(f"fullscreen mode {mode.value} unsupported by {RL_VERSION}: {e}") from e
        self.state.fullscreen = mode
        self.state.screen_w, self.state.screen_h = rl.GetScreenWidth(), rl.GetScreenHeight()

    def _toggle(self, mode: FullscreenMode) -> None:
        if mode == FullscreenMode.TRUE:
            rl.ToggleFullscreen()
        elif mode == FullscreenMode.DESKTOP:
            rl.ToggleBorderlessWindowed()

    def poll_symbols(self) -> List[str]:
        """Drain raylib's key queue. Events are collected at the end of each drawn frame."""
        symbols: List[str] = []
        if not self.state.is_open:
            return symbols
        if rl.WindowShouldClose():
            symbols.append(KEY_QUIT)
        ctrl = rl.IsKeyDown(rl.KEY_LEFT_CONTROL) or rl.IsKeyDown(rl.KEY_RIGHT_CONTROL)
        while True:
            key = rl.GetKeyPressed()
            if not key:
                break
            if ctrl and key == rl.KEY_C:
                symbols.append(KEY_CTRL_C)
                continue
            symbol = WINDOW_KEYS.get(key)
            if symbol is None:
                log(f"[KEY][WIN] unbound key code={key}")
                continue
            symbols.append(symbol)
        return symbols

    def close(self) -> None:
        if not self.state.is_open:
            return
        log("[CLEANUP] Closing window")
        rl.CloseWindow()
        self.state.is_open = False
