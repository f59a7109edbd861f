"""Window state - screen dimensions, title, applied fullscreen mode."""

from __future__ import annotations
from dataclasses import dataclass

from ..types import FullscreenMode


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0
    title: str = ""
    fullscreen: FullscreenMode = FullscreenMode.OFF
    is_open: bool = False
