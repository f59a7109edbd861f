"""Exception hierarchy for imagenav."""

from __future__ import annotations


class ImagenavError(Exception):
    """Base class for all viewer errors."""


class StartupError(ImagenavError):
    """The image directory could not be used (unreadable, empty, nothing displayable)."""


class NavigationError(ImagenavError):
    """A navigation operation could not be completed."""


class EmptyCollection(NavigationError):
    """The navigation ring has no entries left."""

    def __init__(self, message: str = "no entries left to navigate"):
        super().__init__(message)


class NoDisplayableEntries(NavigationError):
    """A validated move rejected every remaining entry."""

    def __init__(self, attempts: int):
        super().__init__(f"no displayable entries after {attempts} attempt(s)")
        self.attempts = attempts


class RenderError(ImagenavError):
    """The renderer failed to load or draw an entry."""


class WindowError(ImagenavError):
    """The window surface rejected a fullscreen or title change."""


class InputThreadError(ImagenavError):
    """The terminal input thread died from a read failure."""
