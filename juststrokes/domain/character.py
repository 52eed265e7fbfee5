"""Reference database records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Tuple

# x0, y0, x1, y1, x2, y2, x3, y3, angle code, length code
FeatureVector = Tuple[float, ...]


@dataclass(frozen=True)
class CharacterEntry:
    """One rendering of a character in the reference database.

    A logical character may appear in several entries, e.g. for stroke
    count variants or visually distinct forms.

    Attributes:
        character: Short text label identifying the character variant.
        features: Encoded strokes in draw order, 10 values each.
    """
    character: str
    features: Tuple[FeatureVector, ...]

    @property
    def stroke_count(self) -> int:
        return len(self.features)

    def to_list(self) -> list:
        """Convert to the [character, [[...], ...]] JSON layout."""
        return [self.character, [list(f) for f in self.features]]

    @classmethod
    def from_features(cls, character: str,
                      features: Sequence[Sequence[float]]) -> CharacterEntry:
        """Create from any nested sequence of numbers."""
        return cls(character, tuple(tuple(float(v) for v in f) for f in features))
