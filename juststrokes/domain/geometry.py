"""Geometric value objects for stroke matching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Tuple

# A point is a plain (x, y) pair. Strokes are ordered point sequences in
# draw order; a character is an ordered sequence of strokes.
Point = Tuple[float, float]
Stroke = Sequence[Point]


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def min_corner(self) -> Point:
        return (self.x_min, self.y_min)

    @property
    def max_corner(self) -> Point:
        return (self.x_max, self.y_max)

    @property
    def is_valid(self) -> bool:
        """True when min <= max on both axes."""
        return self.x_min <= self.x_max and self.y_min <= self.y_max

    def expanded(self, dx: float = 0.0, dy: float = 0.0) -> BBox:
        """Return a copy grown symmetrically by dx on x and dy on y per side."""
        return BBox(self.x_min - dx, self.y_min - dy,
                    self.x_max + dx, self.y_max + dy)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_corners(cls, p_min: Point, p_max: Point) -> BBox:
        """Create from a (min corner, max corner) pair."""
        return cls(p_min[0], p_min[1], p_max[0], p_max[1])

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BBox:
        """Create the bounding box containing all points.

        The caller guarantees at least one point; an empty iterable gives
        an inverted box (infinite min, negative infinite max).
        """
        x_min = y_min = float('inf')
        x_max = y_max = float('-inf')
        for p in points:
            x, y = float(p[0]), float(p[1])
            x_min = min(x_min, x)
            y_min = min(y_min, y)
            x_max = max(x_max, x)
            y_max = max(y_max, y)
        return cls(x_min, y_min, x_max, y_max)


# Normalized coordinate space all strokes are projected into.
TARGET_BBOX = BBox(0.0, 0.0, 255.0, 255.0)
