"""Utility functions for stroke matching.

Geometry utilities:
    round_half_away, round_point: Half-away-from-zero rounding.
    subtract, norm_squared, distance_squared, point_distance: Vector math.
    path_length: Total length of a polyline.
"""

from .geometry import (
    distance_squared,
    norm_squared,
    path_length,
    point_distance,
    round_half_away,
    round_point,
    subtract,
)

__all__ = [
    'round_half_away', 'round_point', 'subtract', 'norm_squared',
    'distance_squared', 'point_distance', 'path_length',
]
