"""Geometric utility functions.

This module provides the point arithmetic used by the preprocessing
pipeline. Points are plain (x, y) tuples, so every helper is a free
function with no instance state.

The module provides the following functions:
    round_half_away: Round a scalar half away from zero.
    round_point: Round both coordinates of a point.
    subtract: Vector difference p0 - p1.
    norm_squared: Squared length of a vector.
    distance_squared: Squared Euclidean distance between two points.
    point_distance: Euclidean distance between two points.
    path_length: Total length of a polyline.

Example usage::

    from juststrokes.utils.geometry import distance_squared, round_point

    distance_squared((0, 0), (3, 4))  # 25.0
    round_point((3.7, 4.5))           # (4.0, 5.0)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..domain.geometry import Point


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Python's round() uses banker's rounding (2.5 -> 2). Every rounding
    step in the encoder must send 2.5 to 3 and -2.5 to -3 so encoded
    databases stay reproducible.

    Args:
        value: Value to round.

    Returns:
        The rounded value as a float.

    Example:
        >>> round_half_away(2.5), round_half_away(-2.5), round_half_away(2.4)
        (3.0, -3.0, 2.0)
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact; magnitude + 0.5 is not
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def round_point(p: Point) -> Point:
    """Round both coordinates half away from zero."""
    return (round_half_away(p[0]), round_half_away(p[1]))


def subtract(p0: Point, p1: Point) -> Point:
    """Vector difference p0 - p1."""
    return (p0[0] - p1[0], p0[1] - p1[1])


def norm_squared(p: Point) -> float:
    """Squared magnitude x^2 + y^2."""
    return p[0] * p[0] + p[1] * p[1]


def distance_squared(p0: Point, p1: Point) -> float:
    """Compute squared Euclidean distance between two points.

    Using squared distance avoids the sqrt computation, which is useful
    when comparing distances (the ordering is preserved).
    """
    return norm_squared(subtract(p0, p1))


def point_distance(p0: Point, p1: Point) -> float:
    """Compute Euclidean distance between two points."""
    return math.sqrt(distance_squared(p0, p1))


def path_length(points: Sequence[Point]) -> float:
    """Total arc length of a polyline.

    Args:
        points: Ordered points; fewer than two points give 0.0.

    Returns:
        Sum of consecutive point distances.
    """
    total = 0.0
    for i in range(len(points) - 1):
        total += point_distance(points[i], points[i + 1])
    return total
