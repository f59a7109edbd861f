"""Input Handler - maps key symbols from either source to commands.

Terminal keys and window keys are normalised to the same symbol
vocabulary before they reach this module, so both sources drive identical
transitions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from .commands import (
    Command, CloseApp, NavigateNext, NavigatePrev,
    Rotate, Zoom, ToggleFullscreen, TogglePageant,
)
from .config import ROTATE_STEP, ZOOM_STEP
from .types import KEY_ESC, KEY_CTRL_C, KEY_QUIT, KEY_LEFT, KEY_RIGHT, KEY_SPACE


def default_bindings(rotate_step: float = ROTATE_STEP,
                     zoom_step: float = ZOOM_STEP) -> Dict[str, Callable[[], Command]]:
    """Symbol -> command factory table."""
    return {
        "q": CloseApp,
        KEY_CTRL_C: CloseApp,
        KEY_ESC: CloseApp,
        KEY_QUIT: CloseApp,
        "f": ToggleFullscreen,
        "r": lambda: Rotate(rotate_step),
        "z": lambda: Zoom(zoom_step),
        KEY_RIGHT: NavigateNext,
        KEY_LEFT: NavigatePrev,
        "p": TogglePageant,
        KEY_SPACE: TogglePageant,
    }


@dataclass
class InputHandler:
    """Translates key symbols into commands."""
    rotate_step: float = ROTATE_STEP
    zoom_step: float = ZOOM_STEP
    bindings: Dict[str, Callable[[], Command]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.bindings:
            self.bindings = default_bindings(self.rotate_step, self.zoom_step)

    def command_for(self, symbol: str) -> Optional[Command]:
        """Command bound to `symbol`, or None if unbound."""
        factory = self.bindings.get(symbol)
        return factory() if factory is not None else None
