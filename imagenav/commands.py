"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by either input source
(terminal or window). Each command has an execute() method that applies it
to a Navigator; CloseApp is handled by the event loop itself.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .navigator import Navigator

from .config import ROTATE_STEP, ZOOM_STEP


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, nav: "Navigator") -> None:
        """Apply the command. Navigation/render errors propagate to the caller."""


class CloseApp(Command):
    """Request application exit."""

    def execute(self, nav: "Navigator") -> None:
        pass


class NavigateNext(Command):
    """Advance to the next displayable entry."""

    def execute(self, nav: "Navigator") -> None:
        nav.advance()


class NavigatePrev(Command):
    """Retreat to the previous displayable entry."""

    def execute(self, nav: "Navigator") -> None:
        nav.retreat()


@dataclass
class Rotate(Command):
    """Rotate by a signed number of quarter turns."""
    delta: float = ROTATE_STEP

    def execute(self, nav: "Navigator") -> None:
        nav.rotate(self.delta)


@dataclass
class Zoom(Command):
    """Change the zoom factor by a signed increment."""
    delta: float = ZOOM_STEP

    def execute(self, nav: "Navigator") -> None:
        nav.zoom(self.delta)


class ToggleFullscreen(Command):
    """Cycle the fullscreen mode."""

    def execute(self, nav: "Navigator") -> None:
        nav.toggle_fullscreen()


class TogglePageant(Command):
    """Switch automatic advance on or off."""

    def execute(self, nav: "Navigator") -> None:
        nav.toggle_pageant()
