"""Null result cache.

Always misses, so every search runs the full matching path. Use it
in tests that count calls or when memory matters more than latency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable

from ...ports.cache import SearchResults


@dataclass
class NullResultCache:
    """No-op cache implementing SearchResultCachePort."""

    name: str = "null"

    def get_or_compute(
        self, key: Hashable, compute_fn: Callable[[], SearchResults]
    ) -> SearchResults:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0
