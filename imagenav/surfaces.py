"""Collaborator interfaces consumed by the Navigator and the EventLoop.

Concrete raylib implementations live in `renderer.py` and `window.py`;
tests substitute in-memory fakes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from .types import Entry, FullscreenMode


class Renderer(ABC):
    """Decides displayability and draws entries."""

    @abstractmethod
    def can_display(self, entry: Entry) -> bool:
        """Return True if the entry can be decoded and drawn."""

    @abstractmethod
    def draw(self, entry: Entry, rotation: float, zoom: float) -> None:
        """Draw one frame of `entry`. Raises RenderError on failure."""

    def close(self) -> None:
        """Release any resources held by the renderer."""


class WindowSurface(ABC):
    """Window management plus the window's own key event queue."""

    @abstractmethod
    def set_fullscreen(self, mode: FullscreenMode) -> None:
        """Apply a fullscreen mode. Raises WindowError on failure."""

    @abstractmethod
    def set_title(self, text: str) -> None:
        """Set the window title. Raises WindowError on failure."""

    @abstractmethod
    def poll_symbols(self) -> List[str]:
        """Drain pending window events as key symbols (never blocks)."""

    def close(self) -> None:
        """Close the window."""
