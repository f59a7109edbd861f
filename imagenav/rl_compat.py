"""Raylib helpers - struct construction and string marshalling for python-raylib."""

from __future__ import annotations
from typing import Any, Union
from pathlib import Path

import raylib as rl

RL_VERSION = getattr(rl, "__version__", "python-raylib")


def c_str(text: Union[str, Path]) -> bytes:
    """Encode text for raylib's `const char *` parameters."""
    return str(text).encode('utf-8')


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle."""
    r = rl.ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2."""
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color."""
    c = rl.ffi.new("Color *")
    c[0].r = int(r)
    c[0].g = int(g)
    c[0].b = int(b)
    c[0].a = int(a)
    return c[0]


def load_image(path: Union[str, Path]) -> Any:
    """Load an image into CPU memory (may return an empty image)."""
    return rl.LoadImage(c_str(path))


def is_image_valid(img: Any) -> bool:
    """Check that LoadImage produced pixel data."""
    return img.data != rl.ffi.NULL and img.width > 0 and img.height > 0


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


__all__ = [
    'rl',
    'RL_VERSION',
    'c_str',
    'make_rect',
    'make_vec2',
    'make_color',
    'load_image',
    'is_image_valid',
    'get_texture_id',
    'is_texture_valid',
]
