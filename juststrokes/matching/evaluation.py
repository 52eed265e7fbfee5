"""Regression check and benchmark over a reference database.

Every entry of a well-formed database must match itself first when its
own feature vectors are used as the query. check_self_identity() runs
that over a whole database and reports the failures; benchmark() times
the same loop to measure throughput.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..domain.character import CharacterEntry
from .matcher import Matcher

logger = logging.getLogger(__name__)


@dataclass
class SelfIdentityReport:
    """Outcome of matching every entry against the database.

    Attributes:
        tested: Number of entries queried.
        passed: Entries whose own label came first.
        failures: (expected label, candidates returned) per failing entry.
    """
    tested: int = 0
    passed: int = 0
    failures: list[tuple[str, list[str]]] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.tested - self.passed

    @property
    def success_rate(self) -> float:
        return self.passed / self.tested if self.tested else 1.0


@dataclass
class BenchmarkResult:
    """Timings of repeated self-identity passes."""
    entries: int
    durations: list[float]

    @property
    def average_ms(self) -> float:
        return 1000.0 * sum(self.durations) / len(self.durations)

    @property
    def min_ms(self) -> float:
        return 1000.0 * min(self.durations)

    @property
    def max_ms(self) -> float:
        return 1000.0 * max(self.durations)

    @property
    def throughput(self) -> float:
        """Queries per second at the average duration."""
        avg = self.average_ms / 1000.0
        return self.entries / avg if avg > 0 else float('inf')


def check_self_identity(matcher: Matcher, entries: Sequence[CharacterEntry] | None = None,
                        how_many: int = 5) -> SelfIdentityReport:
    """Query each entry's features and check its label ranks first.

    Args:
        matcher: Matcher to query.
        entries: Entries to test; defaults to the matcher's own database.
        how_many: Candidates requested per query.

    Returns:
        SelfIdentityReport with counts and failures.
    """
    if entries is None:
        entries = matcher.entries

    report = SelfIdentityReport()
    for entry in entries:
        candidates = matcher.match_preprocessed(entry.features, how_many)
        report.tested += 1
        if candidates and candidates[0] == entry.character:
            report.passed += 1
        else:
            report.failures.append((entry.character, candidates))
            logger.debug("Self-identity failure: expected %r, got %r",
                         entry.character, candidates)

    logger.info("Self-identity: %d/%d passed", report.passed, report.tested)
    return report


def benchmark(matcher: Matcher, runs: int = 3, how_many: int = 5) -> BenchmarkResult:
    """Time ``runs`` full self-identity passes over the matcher's database."""
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    durations = []
    for run in range(1, runs + 1):
        start = time.perf_counter()
        for entry in matcher.entries:
            matcher.match_preprocessed(entry.features, how_many)
        elapsed = time.perf_counter() - start
        durations.append(elapsed)
        logger.info("Benchmark run %d/%d: %.2f ms", run, runs, elapsed * 1000.0)

    return BenchmarkResult(entries=len(matcher), durations=durations)
