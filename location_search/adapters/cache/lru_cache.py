"""Thread-safe LRU cache for search results.

Keys are (normalized query, SearchOptions) pairs built by the search
service. Values are result tuples, which are immutable, so a cached
entry can be handed to several callers at once.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable

from ...ports.cache import SearchResults


@dataclass
class LRUResultCache:
    """Least-recently-used cache implementing SearchResultCachePort.

    Attributes:
        max_size: Maximum number of cached queries
        name: Cache name for logging

    Example:
        cache = LRUResultCache(max_size=128)
        results = cache.get_or_compute(key, lambda: run_search())
    """

    max_size: int = 256
    name: str = "search"

    _entries: "OrderedDict[Hashable, SearchResults]" = field(
        default_factory=OrderedDict, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get_or_compute(
        self, key: Hashable, compute_fn: Callable[[], SearchResults]
    ) -> SearchResults:
        """Return cached results, computing them on a miss.

        The computation runs outside the lock; two threads missing on
        the same key may both compute, and the later write wins.
        """
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self._hits += 1
                return self._entries[key]
            self._misses += 1

        results = compute_fn()

        with self._lock:
            self._entries[key] = results
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self._logger.debug("Cache evicted entry", extra={"key": repr(evicted)})
        return results

    def clear(self) -> int:
        """Clear all entries.

        Returns:
            Number of entries that were cleared.
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def stats(self) -> Dict[str, float]:
        """Hit/miss counters and hit rate."""
        with self._lock:
            total = self._hits + self._misses
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
                "hit_rate": self._hits / total if total else 0.0,
            }
