"""Store adapters - Implementations of the LocationStorePort.

Available implementations:
- LocationRecordStore: Immutable in-memory store merged from sources
"""

from .memory_store import LocationRecordStore

__all__ = ["LocationRecordStore"]
