"""Unit tests for geometry helpers and domain value objects.

Tests the pure functions in juststrokes.utils.geometry:
    - round_half_away / round_point: ties away from zero
    - subtract, norm_squared, distance_squared, point_distance
    - path_length: polyline length
and the BBox value object in juststrokes.domain.geometry.
"""

import math
import unittest

import numpy as np

from juststrokes.domain.geometry import TARGET_BBOX, BBox
from juststrokes.utils.geometry import (
    distance_squared,
    norm_squared,
    path_length,
    point_distance,
    round_half_away,
    round_point,
    subtract,
)


class TestRoundHalfAway(unittest.TestCase):
    """Tests for round_half_away function."""

    def test_positive_half_rounds_up(self):
        """2.5 rounds to 3, unlike builtin round()."""
        self.assertEqual(round_half_away(2.5), 3.0)
        self.assertEqual(round_half_away(0.5), 1.0)

    def test_negative_half_rounds_down(self):
        """-2.5 rounds to -3."""
        self.assertEqual(round_half_away(-2.5), -3.0)
        self.assertEqual(round_half_away(-0.5), -1.0)

    def test_non_ties(self):
        self.assertEqual(round_half_away(2.4), 2.0)
        self.assertEqual(round_half_away(2.6), 3.0)
        self.assertEqual(round_half_away(-2.4), -2.0)

    def test_just_below_half(self):
        """The largest double below 0.5 rounds to 0, not 1."""
        below_half = 0.49999999999999994
        self.assertEqual(round_half_away(below_half), 0.0)
        self.assertEqual(round_half_away(-below_half), 0.0)

    def test_large_odd_integers_unchanged(self):
        """Above 2**52 every double is an integer; x + 0.5 would round up."""
        self.assertEqual(round_half_away(4503599627370497.0), 4503599627370497.0)

    def test_integers_unchanged(self):
        self.assertEqual(round_half_away(7.0), 7.0)
        self.assertEqual(round_half_away(0.0), 0.0)

    def test_round_point(self):
        self.assertEqual(round_point((3.7, 4.2)), (4.0, 4.0))
        self.assertEqual(round_point((127.5, -127.5)), (128.0, -128.0))


class TestVectorFunctions(unittest.TestCase):
    """Tests for subtract, norm_squared and distance functions."""

    def test_subtract(self):
        self.assertEqual(subtract((3.0, 4.0), (0.0, 0.0)), (3.0, 4.0))
        self.assertEqual(subtract((1.0, 1.0), (3.0, 5.0)), (-2.0, -4.0))

    def test_norm_squared(self):
        self.assertEqual(norm_squared((3.0, 4.0)), 25.0)

    def test_distance_squared(self):
        """Squared distance along diagonal (3-4-5 triangle)."""
        self.assertEqual(distance_squared((0.0, 0.0), (3.0, 4.0)), 25.0)

    def test_point_distance(self):
        self.assertEqual(point_distance((0.0, 0.0), (3.0, 4.0)), 5.0)

    def test_distance_symmetry(self):
        p1, p2 = (1.0, 2.0), (4.0, 6.0)
        self.assertEqual(point_distance(p1, p2), point_distance(p2, p1))

    def test_accepts_numpy_rows(self):
        """Rows of an Nx2 array work as points."""
        pts = np.array([[0.0, 0.0], [3.0, 4.0]])
        self.assertAlmostEqual(point_distance(pts[0], pts[1]), 5.0)


class TestPathLength(unittest.TestCase):
    """Tests for path_length function."""

    def test_single_point(self):
        self.assertEqual(path_length([(5.0, 5.0)]), 0.0)

    def test_empty(self):
        self.assertEqual(path_length([]), 0.0)

    def test_polyline(self):
        self.assertEqual(path_length([(0, 0), (30, 0), (30, 40)]), 70.0)

    def test_coincident_points(self):
        self.assertEqual(path_length([(1, 1), (1, 1), (1, 1)]), 0.0)

    def test_diagonal(self):
        self.assertAlmostEqual(path_length([(0, 0), (1, 1)]), math.sqrt(2), places=10)


class TestBBox(unittest.TestCase):
    """Tests for the BBox value object."""

    def test_dimensions(self):
        box = BBox(0, 10, 40, 30)
        self.assertEqual(box.width, 40)
        self.assertEqual(box.height, 20)
        self.assertEqual(box.min_corner, (0, 10))
        self.assertEqual(box.max_corner, (40, 30))

    def test_from_points(self):
        box = BBox.from_points([(5, 5), (0, 0), (15, 20), (10, 10)])
        self.assertEqual(box, BBox(0, 0, 15, 20))

    def test_from_points_numpy(self):
        box = BBox.from_points(np.array([[1.5, 2.0], [-1.0, 4.0]]))
        self.assertEqual(box, BBox(-1.0, 2.0, 1.5, 4.0))

    def test_expanded(self):
        self.assertEqual(BBox(0, 0, 10, 10).expanded(dx=2), BBox(-2, 0, 12, 10))
        self.assertEqual(BBox(0, 0, 10, 10).expanded(dy=3), BBox(0, -3, 10, 13))

    def test_is_valid(self):
        self.assertTrue(BBox(0, 0, 0, 0).is_valid)
        self.assertFalse(BBox(5, 0, 0, 5).is_valid)

    def test_frozen(self):
        box = BBox(0, 0, 1, 1)
        with self.assertRaises(AttributeError):
            box.x_min = 5

    def test_target_bbox(self):
        self.assertEqual(TARGET_BBOX.to_tuple(), (0.0, 0.0, 255.0, 255.0))


if __name__ == '__main__':
    unittest.main()
