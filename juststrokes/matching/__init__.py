"""Scoring and ranking of encoded characters.

Components:
    score_similarity, score_batch, angle_distance: Similarity scoring.
    TopK: Bounded best-first candidate list.
    Matcher: Reference database with top-K queries.
    check_self_identity, benchmark: Whole-database regression and timing.
"""

from .evaluation import BenchmarkResult, SelfIdentityReport, benchmark, check_self_identity
from .matcher import Matcher
from .ranking import TopK
from .scoring import angle_distance, score_batch, score_similarity

__all__ = [
    'angle_distance', 'score_similarity', 'score_batch',
    'TopK', 'Matcher',
    'check_self_identity', 'benchmark', 'SelfIdentityReport', 'BenchmarkResult',
]
