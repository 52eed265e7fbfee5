"""Feature encoding of raw strokes.

This module turns a character's raw strokes into the fixed-size feature
vectors the matcher compares. The pipeline is:

    1. Compute the box enclosing all strokes (compute_bbox).
    2. Normalize it for minimum size and aspect ratio (normalize_bbox).
    3. Project every point into the 0-255 square (make_projector).
    4. Resample each stroke to NUM_ENCODED_POINTS points (resample_stroke).
    5. Encode the first-to-last span of the resampled stroke as an angle
       code and a length code.

Each stroke becomes 10 values::

    x0, y0, x1, y1, x2, y2, x3, y3, angle_code, length_code

The whole character shares one box, so relative stroke positions and
sizes are preserved.

Example usage::

    from juststrokes.analysis.features import encode_strokes

    features = encode_strokes([[(0, 0), (100, 0)], [(50, -50), (50, 50)]])
    features[0][8]   # angle code of the first stroke
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..config import NUM_ENCODED_POINTS, NUM_ENCODED_VALUES, MatcherOptions
from ..domain.character import FeatureVector
from ..domain.geometry import TARGET_BBOX, Point, Stroke
from ..errors import InvalidStrokeError
from ..utils.geometry import norm_squared, round_half_away, subtract
from .bbox import compute_bbox, normalize_bbox
from .projection import make_projector
from .resample import resample_stroke


def encode_angle(span: Point) -> int:
    """Encode a direction vector as an integer in [0, 256).

    The atan2 range (-pi, pi] is shifted to (0, 2pi] and scaled to 256
    steps; the result wraps at 256 so pointing left from either side of
    the discontinuity lands on neighbouring codes.

    Args:
        span: Vector from the first to the last resampled point.

    Returns:
        Angle code. A zero vector encodes as 128.

    Example:
        >>> encode_angle((1, 0)), encode_angle((0, 1)), encode_angle((-1, 0))
        (128, 192, 0)
    """
    angle = math.atan2(span[1], span[0])
    code = round_half_away(((angle + math.pi) * NUM_ENCODED_VALUES) / (2.0 * math.pi))
    return int(code) % NUM_ENCODED_VALUES


def encode_length(span: Point) -> int:
    """Encode a span length as ``round(sqrt(|span|^2 / 2))``.

    Not clamped. A full diagonal of the 0-255 square encodes as 255.
    """
    return int(round_half_away(math.sqrt(norm_squared(span) / 2.0)))


def encode_stroke(resampled: Sequence[Point]) -> FeatureVector:
    """Flatten resampled points and append the angle and length codes."""
    span = subtract(resampled[-1], resampled[0])
    values: list[float] = []
    for x, y in resampled:
        values.append(float(x))
        values.append(float(y))
    values.append(float(encode_angle(span)))
    values.append(float(encode_length(span)))
    return tuple(values)


def encode_strokes(strokes: Sequence[Stroke],
                   options: MatcherOptions | None = None) -> list[FeatureVector]:
    """Encode a character's strokes into comparable feature vectors.

    Args:
        strokes: Non-empty sequence of non-empty strokes, each an ordered
            sequence of (x, y) points in any coordinate space.
        options: Box normalization knobs; defaults to MatcherOptions().

    Returns:
        One 10-value feature vector per stroke, in input order.

    Raises:
        InvalidStrokeError: If there are no strokes or any stroke is empty.
    """
    if options is None:
        options = MatcherOptions()
    if len(strokes) == 0 or any(len(stroke) == 0 for stroke in strokes):
        raise InvalidStrokeError("Invalid stroke data: empty strokes not allowed")

    box = normalize_bbox(compute_bbox(strokes), options.max_ratio, options.min_width)
    project = make_projector(box, TARGET_BBOX)

    features = []
    for stroke in strokes:
        projected = [project(p) for p in stroke]
        features.append(encode_stroke(resample_stroke(projected, NUM_ENCODED_POINTS)))
    return features
