"""Query matcher - scores one location record against a query.

A record is scored on every name it is known by: local and English
names, city, airport code and each keyword. The best alias wins, so
records with many aliases are not penalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..config import MIN_MATCH_SCORE
from ..domain.models import LocationRecord, ScoredCandidate, SearchOptions
from ..matching.geo import distance_between
from ..matching.similarity import EXACT_SCORE, similarity


def _searchable_fields(record: LocationRecord) -> Iterator[str]:
    yield record.name
    yield record.name_en
    yield record.city
    if record.airport_code:
        yield record.airport_code
    yield from record.keywords


@dataclass(frozen=True)
class QueryMatcher:
    """Scores records against a free-text query.

    Attributes:
        min_score: Records scoring below this are excluded
    """

    min_score: int = MIN_MATCH_SCORE

    def match_score(self, query: str, record: LocationRecord) -> Optional[int]:
        """Return the record's best field score, or None below min_score."""
        best = 0
        for value in _searchable_fields(record):
            if not value:
                continue
            best = max(best, similarity(query, value))
            if best == EXACT_SCORE:
                break
        return best if best >= self.min_score else None

    @staticmethod
    def passes_filters(record: LocationRecord, options: SearchOptions) -> bool:
        """Apply the kind and country filters from the options."""
        if options.kind_filter is not None and record.kind is not options.kind_filter:
            return False
        if options.country_filter is not None and record.country_code != options.country_filter:
            return False
        return True

    def score(
        self, query: str, record: LocationRecord, options: SearchOptions
    ) -> Optional[ScoredCandidate]:
        """Filter, score and attach the user distance for one record.

        Filtered-out records are rejected before any string scoring.
        """
        if not self.passes_filters(record, options):
            return None

        match_score = self.match_score(query, record)
        if match_score is None:
            return None

        return ScoredCandidate(
            record=record,
            match_score=match_score,
            distance_km=user_distance(record, options),
        )


def user_distance(record: LocationRecord, options: SearchOptions) -> Optional[float]:
    """Distance from the user, when both positions are known."""
    if options.user_coordinates is None or record.coordinates is None:
        return None
    return distance_between(options.user_coordinates, record.coordinates)
