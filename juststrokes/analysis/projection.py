"""Affine projection between bounding boxes."""

from __future__ import annotations

from collections.abc import Callable

from ..domain.geometry import BBox, Point
from ..utils.geometry import round_half_away


def make_projector(source: BBox, target: BBox) -> Callable[[Point], Point]:
    """Build a per-axis scale-and-translate mapping from source to target.

    Each axis is mapped independently with
    ``round(scale * (v - source_min) + target_min)`` where
    ``scale = target_extent / source_extent``. The source must have
    non-zero extents; boxes from normalize_bbox() always do.

    Args:
        source: Box the input points live in.
        target: Box to map them into.

    Returns:
        A function taking an (x, y) point and returning the rounded
        projected point.

    Example:
        >>> project = make_projector(BBox(0, 0, 10, 10), BBox(0, 0, 255, 255))
        >>> project((5, 10))
        (128.0, 255.0)
    """
    scale_x = target.width / source.width
    scale_y = target.height / source.height
    src_x, src_y = source.x_min, source.y_min
    dst_x, dst_y = target.x_min, target.y_min

    def project(point: Point) -> Point:
        return (
            round_half_away(scale_x * (point[0] - src_x) + dst_x),
            round_half_away(scale_y * (point[1] - src_y) + dst_y),
        )

    return project
