"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math
from typing import Tuple


def rotated_extent(w: float, h: float, angle_deg: float) -> Tuple[float, float]:
    """Width and height of the axis-aligned box around a w x h rect rotated by angle_deg."""
    rad = math.radians(angle_deg)
    c = abs(math.cos(rad))
    s = abs(math.sin(rad))
    return (w * c + h * s, w * s + h * c)
