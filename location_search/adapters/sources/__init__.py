"""Source adapters - Implementations of the LocationSourcePort.

Available implementations:
- WorldLocationsCSVSource: Worldwide cities and airports (primary)
- GazetteerCSVSource: Antalya transfer gazetteer (secondary)
- InMemoryLocationSource: Pre-built records, mainly for tests
"""

from .csv_source import GazetteerCSVSource, WorldLocationsCSVSource
from .memory_source import InMemoryLocationSource

__all__ = ["WorldLocationsCSVSource", "GazetteerCSVSource", "InMemoryLocationSource"]
