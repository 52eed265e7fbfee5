"""Arc-length resampling of strokes.

A stroke of any point count is reduced to a fixed number of points
spaced evenly along its length. The walk keeps a small cursor (segment
index, current interpolation point, distance travelled) between sample
targets, so the polyline is traversed once.

Degenerate strokes:
    - A single point, or all points coincident: the total length is zero,
      every target is 0, and the output repeats the first point followed
      by the last point.
    - Zero-length segments inside a longer stroke are stepped over.
    - If floating-point drift would carry the walk past the last vertex,
      the walk stops on that vertex.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import NUM_ENCODED_POINTS
from ..domain.geometry import Point, Stroke
from ..errors import InvalidStrokeError
from ..utils.geometry import path_length, point_distance, round_point


@dataclass
class _WalkState:
    """Cursor carried across sample targets."""
    segment: int
    point: Point
    travelled: float = 0.0


def _advance(state: _WalkState, stroke: Stroke, target: float) -> None:
    """Move the cursor forward along the stroke until it reaches target."""
    last = len(stroke) - 1
    while target > state.travelled and state.segment < last:
        next_vertex = stroke[state.segment + 1]
        remaining = point_distance(state.point, next_vertex)
        if target > state.travelled + remaining:
            # Target lies beyond this segment
            state.segment += 1
            state.point = (float(next_vertex[0]), float(next_vertex[1]))
            state.travelled += remaining
        else:
            f = (target - state.travelled) / remaining
            state.point = (
                (1.0 - f) * state.point[0] + f * next_vertex[0],
                (1.0 - f) * state.point[1] + f * next_vertex[1],
            )
            state.travelled = target


def resample_stroke(stroke: Stroke, num_points: int = NUM_ENCODED_POINTS) -> list[Point]:
    """Resample a stroke to ``num_points`` points evenly spaced by arc length.

    Sample ``i`` (for ``i < num_points - 1``) sits at distance
    ``i * L / (num_points - 1)`` from the start and is rounded to integer
    coordinates. The last sample is the stroke's last point, unrounded.

    Args:
        stroke: Non-empty sequence of (x, y) points.
        num_points: Number of output points, at least 2.

    Returns:
        List of exactly ``num_points`` (x, y) tuples.

    Raises:
        InvalidStrokeError: If the stroke is empty.
        ValueError: If num_points is less than 2.

    Example:
        >>> resample_stroke([(0, 0), (30, 0)], num_points=4)
        [(0.0, 0.0), (10.0, 0.0), (20.0, 0.0), (30.0, 0.0)]
    """
    if len(stroke) == 0:
        raise InvalidStrokeError("Cannot resample an empty stroke")
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    total = path_length(stroke)
    first = stroke[0]
    state = _WalkState(segment=0, point=(float(first[0]), float(first[1])))

    result: list[Point] = []
    for i in range(num_points - 1):
        _advance(state, stroke, (i * total) / (num_points - 1))
        result.append(round_point(state.point))

    last = stroke[-1]
    result.append((float(last[0]), float(last[1])))
    return result
