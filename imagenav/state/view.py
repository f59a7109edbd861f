"""View state - rotation, zoom, fullscreen, pageant timer, current entry."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..types import Entry, FullscreenMode


# Transition table for the fullscreen toggle. TRUE is only reachable by
# setting it directly; toggling never enters it.
FULLSCREEN_TOGGLE = {
    FullscreenMode.OFF: FullscreenMode.DESKTOP,
    FullscreenMode.DESKTOP: FullscreenMode.OFF,
    FullscreenMode.TRUE: FullscreenMode.OFF,
}


@dataclass
class ViewState:
    """Transient view parameters owned by a Navigator."""
    rotation: float = 0.0
    zoom: float = 1.0
    fullscreen: FullscreenMode = FullscreenMode.OFF
    pageant_mode: bool = False
    pageant_elapsed: float = 0.0  # seconds counted toward the next automatic advance
    current: Optional[Entry] = None

    def next_fullscreen(self) -> FullscreenMode:
        return FULLSCREEN_TOGGLE[self.fullscreen]
