"""Stroke preprocessing pipeline.

This package turns raw pen/touch strokes into the 10-value feature
vectors used for matching.

Components:
    compute_bbox, normalize_bbox: Enclosing box and its normalization.
    make_projector: Box-to-box affine mapping with rounding.
    resample_stroke: Fixed-count arc-length resampling.
    encode_strokes: Full pipeline from raw strokes to feature vectors.
    encode_angle, encode_length: Span encodings.

Example usage::

    from juststrokes.analysis import encode_strokes

    features = encode_strokes([[(10, 10), (90, 12)]])
"""

from .bbox import compute_bbox, normalize_bbox
from .features import encode_angle, encode_length, encode_stroke, encode_strokes
from .projection import make_projector
from .resample import resample_stroke

__all__ = [
    'compute_bbox', 'normalize_bbox',
    'make_projector',
    'resample_stroke',
    'encode_angle', 'encode_length', 'encode_stroke', 'encode_strokes',
]
