from __future__ import annotations

import unittest

from imagenav.config import MIN_DRAW_ZOOM
from imagenav.view_math import (
    compute_draw_params, compute_fit_scale, effective_zoom, rotation_degrees,
)


class FitScaleTests(unittest.TestCase):
    def test_scale_limited_by_tighter_axis(self) -> None:
        self.assertAlmostEqual(compute_fit_scale(400, 100, 800, 600), 2.0)
        self.assertAlmostEqual(compute_fit_scale(100, 300, 800, 600), 2.0)

    def test_degenerate_image_scale_is_one(self) -> None:
        self.assertEqual(compute_fit_scale(0, 10, 800, 600), 1.0)


class ZoomAndRotationTests(unittest.TestCase):
    def test_effective_zoom_clamps_non_positive(self) -> None:
        self.assertEqual(effective_zoom(1.5), 1.5)
        self.assertEqual(effective_zoom(0.0), MIN_DRAW_ZOOM)
        self.assertEqual(effective_zoom(-3.0), MIN_DRAW_ZOOM)

    def test_rotation_unit_is_a_quarter_turn(self) -> None:
        self.assertEqual(rotation_degrees(1.0), -90.0)
        self.assertEqual(rotation_degrees(-2.0), 180.0)


class DrawParamsTests(unittest.TestCase):
    def test_unrotated_image_is_centred_and_fitted(self) -> None:
        p = compute_draw_params(400, 300, 800, 600, rotation=0.0, zoom=1.0)
        self.assertAlmostEqual(p.dest_x, 400.0)
        self.assertAlmostEqual(p.dest_y, 300.0)
        self.assertAlmostEqual(p.dest_w, 800.0)
        self.assertAlmostEqual(p.dest_h, 600.0)
        self.assertAlmostEqual(p.origin_x, 400.0)
        self.assertAlmostEqual(p.origin_y, 300.0)
        self.assertEqual(p.angle_deg, 0.0)

    def test_quarter_turn_fits_rotated_box(self) -> None:
        p = compute_draw_params(400, 200, 800, 600, rotation=1.0, zoom=1.0)
        # Rotated box is 200x400, limited by height: scale 1.5.
        self.assertAlmostEqual(p.dest_w, 600.0)
        self.assertAlmostEqual(p.dest_h, 300.0)
        self.assertEqual(p.angle_deg, -90.0)

    def test_zoom_multiplies_fit_scale(self) -> None:
        base = compute_draw_params(400, 300, 800, 600, rotation=0.0, zoom=1.0)
        zoomed = compute_draw_params(400, 300, 800, 600, rotation=0.0, zoom=1.5)
        self.assertAlmostEqual(zoomed.dest_w, base.dest_w * 1.5)
        self.assertAlmostEqual(zoomed.dest_x, base.dest_x)

    def test_negative_zoom_still_draws(self) -> None:
        p = compute_draw_params(400, 300, 800, 600, rotation=0.0, zoom=-1.0)
        self.assertGreater(p.dest_w, 0.0)
        self.assertAlmostEqual(p.dest_w, 800.0 * MIN_DRAW_ZOOM)


if __name__ == "__main__":
    unittest.main()
