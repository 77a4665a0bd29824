"""Ranker - orders scored candidates for display.

Comparison keys, in order, each falling through on a tie:

1. popular before non-popular (when ``prefer_popular_first``)
2. higher match score, unless the scores are within the tolerance band
3. nearer to the user, when both distances are known
4. more known venues (missing counts as 0)

Python's sort is stable, so candidates that tie on every key keep
their store order.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Tuple

from ..config import SCORE_TOLERANCE
from ..domain.models import LocationRecord, ScoredCandidate, SearchOptions
from .matcher import QueryMatcher, user_distance


@dataclass(frozen=True)
class Ranker:
    """Multi-key ranking of search candidates.

    Attributes:
        score_tolerance: Score gap at or below which two scores tie
    """

    score_tolerance: int = SCORE_TOLERANCE

    def compare(
        self, a: ScoredCandidate, b: ScoredCandidate, options: SearchOptions
    ) -> int:
        """Return a negative number when ``a`` ranks before ``b``."""
        if options.prefer_popular_first and a.record.is_popular != b.record.is_popular:
            return -1 if a.record.is_popular else 1

        if abs(a.match_score - b.match_score) > self.score_tolerance:
            return b.match_score - a.match_score

        if a.distance_km is not None and b.distance_km is not None:
            if a.distance_km != b.distance_km:
                return -1 if a.distance_km < b.distance_km else 1
            return 0

        return b.record.venue_count - a.record.venue_count

    def rank(
        self, candidates: Iterable[ScoredCandidate], options: SearchOptions
    ) -> Tuple[ScoredCandidate, ...]:
        """Sort candidates and truncate to ``options.result_limit``."""
        ordered = sorted(
            candidates,
            key=cmp_to_key(lambda a, b: self.compare(a, b, options)),
        )
        return tuple(ordered[: options.result_limit])

    @staticmethod
    def browse(
        records: Iterable[LocationRecord], options: SearchOptions
    ) -> Tuple[ScoredCandidate, ...]:
        """Popular records by venue count, used for too-short queries.

        Kind and country filters still apply. No string matching runs,
        so every candidate carries a match score of 0.
        """
        popular = [
            r for r in records
            if r.is_popular and QueryMatcher.passes_filters(r, options)
        ]
        popular.sort(key=lambda r: r.venue_count, reverse=True)
        return tuple(
            ScoredCandidate(
                record=r,
                match_score=0,
                distance_km=user_distance(r, options),
            )
            for r in popular[: options.result_limit]
        )
