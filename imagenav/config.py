"""Application configuration constants."""

from __future__ import annotations
from dataclasses import dataclass

# Loop timing
TICK_MS = 5
JOIN_TIMEOUT_S = 0.5

# Pageant (automatic advance)
PAGEANT_INTERVAL_S = 3.0

# View steps
ROTATE_STEP = 1.0           # quarter turns per press
ZOOM_STEP = 0.5
ROTATION_UNIT_DEG = -90.0   # one rotation unit on screen
MIN_DRAW_ZOOM = 0.05

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "imagenav"
BG_COLOR = (0, 0, 0)

# Terminal input
ESC_SEQUENCE_TIMEOUT_MS = 25

# Supported image extensions (only used with --images-only)
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".tga", ".gif", ".qoi", ".psd", ".hdr"})


@dataclass
class ViewerConfig:
    """Per-run settings; defaults come from the module constants."""
    tick_ms: int = TICK_MS
    pageant_interval_s: float = PAGEANT_INTERVAL_S
    rotate_step: float = ROTATE_STEP
    zoom_step: float = ZOOM_STEP
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    start_pageant: bool = False
    start_fullscreen: bool = False
    images_only: bool = False
    use_terminal: bool = True

    @property
    def tick_seconds(self) -> float:
        return max(0, self.tick_ms) / 1000.0
