"""Nearest-neighbour matching of handwritten strokes.

The Matcher owns an immutable reference database and answers top-K
queries against it. Entries are grouped by stroke count when the matcher
is built: a query with N strokes is only ever scored against the N-stroke
bucket, and every bucket is kept as one ``(entries, N, 10)`` numpy array
so the whole bucket is scored in a single vectorized pass. Within a
bucket, entries stay in database order, which is the tie-break order of
the ranking.

A Matcher holds no per-call state. One instance can serve any number of
threads concurrently.

Example usage::

    from juststrokes.data import load_database
    from juststrokes.matching import Matcher

    matcher = Matcher(load_database('graphics.csv'))
    matcher.match([[(10, 10), (200, 12)]], 5)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from ..analysis.features import encode_strokes
from ..config import FEATURE_LENGTH, MatcherOptions
from ..domain.character import CharacterEntry, FeatureVector
from ..domain.geometry import Stroke
from .ranking import TopK
from .scoring import score_batch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Bucket:
    """All entries sharing one stroke count, in database order."""
    characters: tuple[str, ...]
    features: np.ndarray


def _coerce_entry(entry) -> CharacterEntry:
    if isinstance(entry, CharacterEntry):
        return entry
    character, features = entry
    return CharacterEntry.from_features(character, features)


class Matcher:
    """Top-K matcher over a reference character database.

    Attributes:
        options: Box normalization knobs used to encode queries.
    """

    def __init__(self, entries: Iterable[CharacterEntry | tuple[str, Sequence]],
                 options: MatcherOptions | None = None):
        """Build the matcher.

        Args:
            entries: Database rows as CharacterEntry objects or
                (character, feature vectors) pairs. Every feature vector
                must hold exactly 10 values; loaders validate this.
            options: Normalization knobs; defaults to MatcherOptions().
        """
        self.options = options if options is not None else MatcherOptions()
        self._entries = tuple(_coerce_entry(e) for e in entries)

        grouped: dict[int, list[CharacterEntry]] = {}
        for entry in self._entries:
            # A stroke-less entry can never share a count with a query
            if entry.stroke_count:
                grouped.setdefault(entry.stroke_count, []).append(entry)

        self._buckets: dict[int, _Bucket] = {}
        for count, members in grouped.items():
            array = np.asarray([e.features for e in members], dtype=np.float64)
            if array.shape != (len(members), count, FEATURE_LENGTH):
                raise ValueError(
                    f"Malformed feature vectors in {count}-stroke entries: shape {array.shape}")
            self._buckets[count] = _Bucket(tuple(e.character for e in members), array)

        logger.info("Matcher ready: %d entries in %d stroke-count groups",
                    len(self._entries), len(self._buckets))

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[CharacterEntry, ...]:
        return self._entries

    def stroke_counts(self) -> dict[int, int]:
        """Number of entries per stroke count, sorted by stroke count."""
        return {count: len(self._buckets[count].characters) for count in sorted(self._buckets)}

    def preprocess(self, strokes: Sequence[Stroke]) -> list[FeatureVector]:
        """Encode raw query strokes with this matcher's options."""
        return encode_strokes(strokes, self.options)

    def match(self, strokes: Sequence[Stroke], how_many: int) -> list[str]:
        """Return the best-matching characters for raw strokes.

        Args:
            strokes: Query strokes in draw order. Each stroke must be
                non-empty; an empty stroke list is allowed.
            how_many: Maximum number of candidates.

        Returns:
            Character labels, best first. Empty for an empty query or when
            no entry has the query's stroke count.

        Raises:
            InvalidStrokeError: If any stroke is empty.
        """
        if len(strokes) == 0:
            return []
        return self.match_preprocessed(self.preprocess(strokes), how_many)

    def match_preprocessed(self, features: Sequence[FeatureVector], how_many: int) -> list[str]:
        """Return the best-matching characters for already encoded strokes."""
        return [character for character, _ in self.match_scored(features, how_many)]

    def match_scored(self, features: Sequence[FeatureVector],
                     how_many: int) -> list[tuple[str, float]]:
        """Like match_preprocessed() but keep the scores, best first."""
        if len(features) == 0 or how_many <= 0:
            return []

        bucket = self._buckets.get(len(features))
        if bucket is None:
            logger.debug("No %d-stroke entries in database", len(features))
            return []

        scores = score_batch(features, bucket.features)
        ranked: TopK[str] = TopK(how_many)
        for character, score in zip(bucket.characters, scores.tolist()):
            ranked.push(character, score)
        return ranked.pairs()
