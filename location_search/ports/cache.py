"""Result cache port - Injectable memoization of search results.

Autocomplete widgets send the same prefixes over and over. Because
the store never changes after start-up, a search result depends only
on the query and the options and can be reused safely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Hashable, Protocol, Tuple

if TYPE_CHECKING:
    from ..domain.models import ScoredCandidate

SearchResults = Tuple["ScoredCandidate", ...]


class SearchResultCachePort(Protocol):
    """Port for caching search results.

    Implementations:
    - adapters/cache/lru_cache.py (LRUResultCache) - Production
    - adapters/cache/null_cache.py (NullResultCache) - Testing
    """

    def get_or_compute(
        self, key: Hashable, compute_fn: Callable[[], SearchResults]
    ) -> SearchResults:
        """Return cached results for key, computing and storing on a miss.

        Args:
            key: Hashable cache key (normalized query + options).
            compute_fn: Function producing the results on a miss.

        Returns:
            The cached or freshly computed results.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of cached entries."""
        ...
