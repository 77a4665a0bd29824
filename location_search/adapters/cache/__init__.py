"""Cache adapters - Implementations of the SearchResultCachePort.

Available implementations:
- LRUResultCache: Thread-safe least-recently-used cache
- NullResultCache: No-op cache (always misses)
"""

from .lru_cache import LRUResultCache
from .null_cache import NullResultCache

__all__ = ["LRUResultCache", "NullResultCache"]
