"""Bounding-box computation and normalization.

Before strokes are projected into the 0-255 feature space, the box that
encloses them is adjusted so that:

    - no axis is narrower than ``min_width`` (the projector divides by
      each extent, so a straight horizontal stroke must not produce a
      zero-height box);
    - the box is not more elongated than ``max_ratio`` (a tall thin
      character keeps its proportions instead of being stretched to
      fill the square).

Both passes expand symmetrically around the original box, working in
whole units on a box whose corners were rounded once up front.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..domain.geometry import BBox, Stroke
from ..errors import InvalidBBoxError, InvalidStrokeError
from ..utils.geometry import round_point


def compute_bbox(strokes: Sequence[Stroke]) -> BBox:
    """Compute the axis-aligned box enclosing every point of every stroke.

    Args:
        strokes: Non-empty sequence of non-empty strokes.

    Returns:
        Componentwise min/max box over all points.

    Raises:
        InvalidStrokeError: If there are no strokes or any stroke is empty.
    """
    if len(strokes) == 0:
        raise InvalidStrokeError("Invalid stroke data: no strokes given")
    if any(len(stroke) == 0 for stroke in strokes):
        raise InvalidStrokeError("Invalid stroke data: empty strokes not allowed")
    return BBox.from_points(p for stroke in strokes for p in stroke)


def normalize_bbox(bbox: BBox, max_ratio: float, min_width: float) -> BBox:
    """Expand a box to satisfy minimum-size and aspect-ratio constraints.

    The corners are rounded first. Then, in order:

    1. Each axis whose extent is below ``min_width`` grows by
       ``ceil((min_width - extent) / 2)`` on both sides.
    2. If ``max_ratio > 0`` and one extent is smaller than the other
       divided by ``max_ratio``, that axis grows by
       ``ceil((other / max_ratio - extent) / 2)`` on both sides. At most
       one axis is widened.

    Args:
        bbox: Raw bounding box.
        max_ratio: Maximum allowed aspect ratio; <= 0 disables pass 2.
        min_width: Minimum extent per axis.

    Returns:
        The normalized box.

    Raises:
        InvalidBBoxError: If the rounded box has a negative extent.

    Example:
        >>> normalize_bbox(BBox(0, 0, 2, 2), max_ratio=1.0, min_width=8.0)
        BBox(x_min=-3.0, y_min=-3.0, x_max=5.0, y_max=5.0)
    """
    box = BBox.from_corners(round_point(bbox.min_corner), round_point(bbox.max_corner))
    if box.width < 0 or box.height < 0:
        raise InvalidBBoxError(f"Invalid bounding box: {box.to_tuple()}")

    if box.width < min_width:
        box = box.expanded(dx=math.ceil((min_width - box.width) / 2.0))
    if box.height < min_width:
        box = box.expanded(dy=math.ceil((min_width - box.height) / 2.0))

    if max_ratio > 0.0:
        width, height = box.width, box.height
        if width < height / max_ratio:
            # Too tall, widen
            box = box.expanded(dx=math.ceil((height / max_ratio - width) / 2.0))
        elif height < width / max_ratio:
            # Too wide, heighten
            box = box.expanded(dy=math.ceil((width / max_ratio - height) / 2.0))

    return box
