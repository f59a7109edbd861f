"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations

from .config import MIN_DRAW_ZOOM, ROTATION_UNIT_DEG
from .math_utils import rotated_extent
from .types import DrawParams


def compute_fit_scale(
    img_w: float,
    img_h: float,
    screen_w: int,
    screen_h: int,
    frac: float = 1.0
) -> float:
    """Compute scale to fit image within screen bounds.

    Args:
        img_w: Image width in pixels (after rotation).
        img_h: Image height in pixels (after rotation).
        screen_w: Screen width in pixels.
        screen_h: Screen height in pixels.
        frac: Fraction of screen to use (0.0-1.0).

    Returns:
        Scale factor to fit image.
    """
    if img_w <= 0 or img_h <= 0:
        return 1.0
    return min(screen_w * frac / img_w, screen_h * frac / img_h)


def effective_zoom(zoom: float) -> float:
    """Zoom factor actually used for drawing.

    The view state accumulates zoom without validation; zero and negative
    values are clamped here to MIN_DRAW_ZOOM.
    """
    return zoom if zoom > MIN_DRAW_ZOOM else MIN_DRAW_ZOOM


def rotation_degrees(rotation: float) -> float:
    """On-screen angle for a rotation expressed in quarter-turn units."""
    return rotation * ROTATION_UNIT_DEG


def compute_draw_params(
    img_w: int,
    img_h: int,
    screen_w: int,
    screen_h: int,
    rotation: float,
    zoom: float
) -> DrawParams:
    """Destination rectangle for drawing an image centred and rotated about its centre.

    The fit scale is computed against the rotated bounding box so a
    quarter-turned portrait image still fits the window.
    """
    angle = rotation_degrees(rotation)
    box_w, box_h = rotated_extent(img_w, img_h, angle)
    scale = compute_fit_scale(box_w, box_h, screen_w, screen_h) * effective_zoom(zoom)
    dest_w = img_w * scale
    dest_h = img_h * scale
    # With the origin at the rectangle centre, dest x/y name the centre point.
    return DrawParams(
        dest_x=screen_w / 2.0,
        dest_y=screen_h / 2.0,
        dest_w=dest_w,
        dest_h=dest_h,
        origin_x=dest_w / 2.0,
        origin_y=dest_h / 2.0,
        angle_deg=angle,
    )
