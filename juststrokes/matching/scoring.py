"""Similarity scoring between encoded characters.

The score is a sum of penalties, so 0 is a perfect match and more
negative is worse. It is not a metric; only the ranking it induces
matters. Per stroke pair (stroke i against stroke i, never reordered):

    - L1 distance over the 8 sampled coordinates;
    - the circular angle distance ``min(c, 256 - c)`` weighted by
      ``PER_STROKE_WEIGHT * NUM_ENCODED_POINTS * (len_a + len_b) / 256``,
      so direction errors on long strokes cost more than on short ones.

score_similarity() compares one pair. score_batch() scores a query
against a stacked array of references with the same per-stroke
accumulation order, so both produce identical values.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..config import (
    ANGLE_INDEX,
    LENGTH_INDEX,
    NUM_ENCODED_POINTS,
    NUM_ENCODED_VALUES,
    PER_STROKE_WEIGHT,
)
from ..domain.character import FeatureVector

_COORDS = 2 * NUM_ENCODED_POINTS


def angle_distance(a: float, b: float) -> float:
    """Circular distance between two angle codes.

    Example:
        >>> angle_distance(0, 255), angle_distance(10, 74)
        (1, 64)
    """
    c = abs(a - b)
    return min(c, NUM_ENCODED_VALUES - c)


def _angle_penalty(angle_similarity: float, length_weight: float) -> float:
    return PER_STROKE_WEIGHT * NUM_ENCODED_POINTS * length_weight * angle_similarity


def score_similarity(input_features: Sequence[FeatureVector],
                     reference: Sequence[FeatureVector]) -> float:
    """Score two equal-length feature sequences; higher is more similar.

    Args:
        input_features: Encoded query strokes.
        reference: Encoded reference strokes, same count and order.

    Returns:
        Non-positive score; 0.0 for identical inputs.

    Raises:
        ValueError: If the stroke counts differ.
    """
    if len(input_features) != len(reference):
        raise ValueError(
            f"Stroke count mismatch: {len(input_features)} vs {len(reference)}")

    score = 0.0
    for a, b in zip(input_features, reference):
        coord_penalty = 0.0
        for idx in range(_COORDS):
            coord_penalty += abs(a[idx] - b[idx])
        angle_similarity = angle_distance(a[ANGLE_INDEX], b[ANGLE_INDEX])
        length_weight = (a[LENGTH_INDEX] + b[LENGTH_INDEX]) / NUM_ENCODED_VALUES
        score -= coord_penalty
        score -= _angle_penalty(angle_similarity, length_weight)
    return score


def score_batch(input_features: Sequence[FeatureVector], references: np.ndarray) -> np.ndarray:
    """Score one query against many references with the same stroke count.

    Args:
        input_features: Encoded query strokes, ``s`` vectors.
        references: Array of shape ``(n, s, 10)``.

    Returns:
        Array of ``n`` scores in reference order.
    """
    query = np.asarray(input_features, dtype=np.float64)
    if references.ndim != 3 or references.shape[1:] != query.shape:
        raise ValueError(
            f"Reference shape {references.shape} does not match query {query.shape}")

    scores = np.zeros(references.shape[0], dtype=np.float64)
    for i in range(query.shape[0]):
        ref = references[:, i, :]
        coord_penalty = np.zeros(references.shape[0], dtype=np.float64)
        for idx in range(_COORDS):
            coord_penalty += np.abs(query[i, idx] - ref[:, idx])
        c = np.abs(query[i, ANGLE_INDEX] - ref[:, ANGLE_INDEX])
        angle_similarity = np.minimum(c, NUM_ENCODED_VALUES - c)
        length_weight = (query[i, LENGTH_INDEX] + ref[:, LENGTH_INDEX]) / NUM_ENCODED_VALUES
        scores -= coord_penalty
        scores -= _angle_penalty(angle_similarity, length_weight)
    return scores
