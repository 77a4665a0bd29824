"""Top-level package for the location search engine.

Fuzzy, multi-script autocomplete over cities, airports and hotel
zones: edit-distance matching across every alias of a location,
geo-distance aware ranking, and popular/nearby browsing.

Typical start-up:

    from location_search import get_container, LocationSearchService

    service = get_container().resolve(LocationSearchService)
    service.search("antalya")
"""

from .container import Container, get_container, reset_container
from .domain import (
    GeoLocation,
    LocationKind,
    LocationRecord,
    NearbyLocation,
    ScoredCandidate,
    SearchOptions,
    TransferEstimate,
)
from .services import LocationSearchService

__version__ = "0.1.0"

__all__ = [
    "Container",
    "get_container",
    "reset_container",
    "GeoLocation",
    "LocationKind",
    "LocationRecord",
    "NearbyLocation",
    "ScoredCandidate",
    "SearchOptions",
    "TransferEstimate",
    "LocationSearchService",
]
