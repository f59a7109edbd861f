"""State management submodules for imagenav."""

from .view import ViewState, FULLSCREEN_TOGGLE
from .window import WindowState

__all__ = [
    'ViewState',
    'FULLSCREEN_TOGGLE',
    'WindowState',
]
