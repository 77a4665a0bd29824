"""Location search service - the public entry point.

Combines the record store, the query matcher and the ranker. Every
operation is a pure read over the immutable store; arguments are
validated here, before any scoring runs, and rejected with a typed
error instead of being clamped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..config import SearchConfig, get_config
from ..domain.errors import InvalidSearchOptionsError
from ..domain.models import (
    GeoLocation,
    LocationRecord,
    NearbyLocation,
    ScoredCandidate,
    SearchOptions,
    TransferEstimate,
)
from ..matching.geo import distance_between
from ..matching.similarity import normalize_text
from ..ports.cache import SearchResultCachePort
from ..ports.store import LocationStorePort
from .matcher import QueryMatcher
from .ranker import Ranker


def _check_limit(limit: int, field_name: str = "limit") -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidSearchOptionsError(
            f"{field_name} must be a positive integer, got {limit!r}",
            field_name=field_name,
            value=limit,
        )


@dataclass
class LocationSearchService:
    """Fuzzy, geo-aware location autocomplete.

    Usage:
        store = LocationRecordStore.from_sources([world, gazetteer])
        service = LocationSearchService(store)
        service.search("antalya", SearchOptions(result_limit=5))

    Attributes:
        store: Merged, read-only location records
        cache: Optional cache for search results
        config: Matching and ranking configuration
    """

    store: LocationStorePort
    cache: Optional[SearchResultCachePort] = None
    config: SearchConfig = field(default_factory=lambda: get_config().search)

    _matcher: QueryMatcher = field(init=False, repr=False)
    _ranker: Ranker = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._matcher = QueryMatcher(min_score=self.config.min_match_score)
        self._ranker = Ranker(score_tolerance=self.config.score_tolerance)
        self._logger = logging.getLogger(__name__)

    def default_options(self) -> SearchOptions:
        """Search options using the configured default limit."""
        return SearchOptions(result_limit=self.config.default_result_limit)

    def search(
        self, query: str, options: Optional[SearchOptions] = None
    ) -> Tuple[ScoredCandidate, ...]:
        """Search locations matching a free-text query.

        Queries shorter than ``min_query_length`` skip matching and
        return popular locations instead. Length is counted after
        trimming and folding, so combining marks do not count.

        Args:
            query: Free-text query in any script.
            options: Filters, limit and user position.

        Returns:
            Ranked candidates, at most ``options.result_limit`` long.

        Raises:
            InvalidSearchOptionsError: If query is not a string.
        """
        if not isinstance(query, str):
            raise InvalidSearchOptionsError(
                f"Query must be a string, got {type(query).__name__}",
                field_name="query",
                value=query,
            )
        options = options or self.default_options()
        term = query.strip()
        folded_length = len(normalize_text(term).strip())

        if folded_length < self.config.min_query_length:
            results = self._ranker.browse(self.store, options)
            self._logger.debug(
                "Short query, browsing popular locations",
                extra={"query_length": folded_length, "results": len(results)},
            )
            return results

        if self.cache is None:
            return self._run_search(term, options)
        return self.cache.get_or_compute(
            (term, options), lambda: self._run_search(term, options)
        )

    def _run_search(
        self, term: str, options: SearchOptions
    ) -> Tuple[ScoredCandidate, ...]:
        candidates = []
        for record in self.store:
            candidate = self._matcher.score(term, record, options)
            if candidate is not None:
                candidates.append(candidate)

        results = self._ranker.rank(candidates, options)
        self._logger.debug(
            "Search completed",
            extra={
                "query": term,
                "matched": len(candidates),
                "returned": len(results),
            },
        )
        return results

    def popular_locations(
        self, country_filter: Optional[str] = None, limit: Optional[int] = None
    ) -> Tuple[LocationRecord, ...]:
        """Popular locations, most venues first.

        Args:
            country_filter: Optional ISO-2 country code.
            limit: Maximum number of records (defaults to config).

        Returns:
            Popular records sorted by known venue count, descending.
        """
        limit = self.config.default_result_limit if limit is None else limit
        _check_limit(limit)
        options = SearchOptions(country_filter=country_filter, result_limit=limit)
        return tuple(c.record for c in self._ranker.browse(self.store, options))

    def lookup_by_id(self, location_id: str) -> Optional[LocationRecord]:
        """Return the record with this id, or None if unknown."""
        return self.store.by_id(location_id)

    def nearby(
        self,
        lat: float,
        lon: float,
        radius_km: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> Tuple[NearbyLocation, ...]:
        """Locations within ``radius_km`` of a point, nearest first.

        Records without coordinates are skipped.

        Raises:
            InvalidCoordinatesError: If lat/lon are out of range.
            InvalidSearchOptionsError: If radius is not a non-negative number
                or limit is not positive.
        """
        origin = GeoLocation(lat, lon)
        radius_km = self.config.default_nearby_radius_km if radius_km is None else radius_km
        limit = self.config.default_result_limit if limit is None else limit
        if isinstance(radius_km, bool) or not isinstance(radius_km, (int, float)):
            raise InvalidSearchOptionsError(
                f"Radius must be a number, got {radius_km!r}",
                field_name="radius_km",
                value=radius_km,
            )
        # NaN fails the comparison too
        if not radius_km >= 0:
            raise InvalidSearchOptionsError(
                f"Radius must not be negative, got {radius_km}",
                field_name="radius_km",
                value=radius_km,
            )
        _check_limit(limit)

        found = []
        for record in self.store:
            if record.coordinates is None:
                continue
            distance = distance_between(origin, record.coordinates)
            if distance <= radius_km:
                found.append(NearbyLocation(record=record, distance_km=distance))

        found.sort(key=lambda n: n.distance_km)
        return tuple(found[:limit])

    def locations_by_region(self, region: str) -> Tuple[LocationRecord, ...]:
        """Records whose region matches exactly, in store order."""
        return tuple(self.store.by_region(region))

    def transfer_estimate(
        self, location_id: str, airport_code: str
    ) -> Optional[TransferEstimate]:
        """Airport transfer estimate for a location, if the data has one."""
        record = self.store.by_id(location_id)
        if record is None:
            return None
        return record.transfer_from(airport_code)
