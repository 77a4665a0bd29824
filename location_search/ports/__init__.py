"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the search services and the
adapters that supply data and caching, so each piece can be swapped
in tests.
"""

from .cache import SearchResultCachePort, SearchResults
from .sources import LocationSourcePort
from .store import LocationStorePort

__all__ = [
    "LocationSourcePort",
    "LocationStorePort",
    "SearchResultCachePort",
    "SearchResults",
]
