"""Domain objects for stroke matching.

This module provides the value objects shared by the preprocessing
pipeline, the matcher and the database loaders.

Geometry:
    Point: (x, y) tuple alias.
    Stroke: Ordered point sequence alias.
    BBox: Immutable axis-aligned bounding box.
    TARGET_BBOX: The normalized 0-255 coordinate space.

Database records:
    FeatureVector: 10-value encoded stroke.
    CharacterEntry: (character, feature vectors) database row.

Example usage::

    from juststrokes.domain import BBox, CharacterEntry

    box = BBox.from_points([(0, 0), (10, 20)])
    entry = CharacterEntry.from_features('一', [[0, 128, 85, 128, 170, 128, 255, 128, 128, 180]])
"""

from .character import CharacterEntry, FeatureVector
from .geometry import TARGET_BBOX, BBox, Point, Stroke

__all__ = [
    'Point', 'Stroke', 'BBox', 'TARGET_BBOX',
    'FeatureVector', 'CharacterEntry',
]
