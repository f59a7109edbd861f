"""Core data types for imagenav."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class Entry:
    """A displayable-resource handle held in the navigation ring."""
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return str(self.path)


class FullscreenMode(Enum):
    """Window fullscreen modes.

    TRUE is exclusive fullscreen; DESKTOP is borderless at desktop size.
    """
    OFF = "off"
    TRUE = "true"
    DESKTOP = "desktop"


@dataclass(frozen=True)
class ImageInfo:
    """Header metadata for an image file."""
    format: Optional[str]
    size: Tuple[int, int]

    @property
    def dimensions(self) -> str:
        return f"{self.size[0]}x{self.size[1]}"


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: object  # raylib Texture2D
    w: int
    h: int
    path: str = ""


@dataclass(frozen=True)
class DrawParams:
    """Destination rectangle, origin and rotation for one textured draw."""
    dest_x: float
    dest_y: float
    dest_w: float
    dest_h: float
    origin_x: float
    origin_y: float
    angle_deg: float


# Key symbols shared by the terminal decoder and the window.
KEY_ESC = "ESC"
KEY_CTRL_C = "CTRL_C"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_SPACE = "SPACE"
KEY_ENTER = "ENTER"
KEY_QUIT = "QUIT"  # window close request
