"""Location source port - Abstraction over raw location lists.

Each source maps its own data shape into validated LocationRecord
values. The store merges several sources by priority, so a source
only has to answer "what records do you hold".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import LocationRecord


class LocationSourcePort(Protocol):
    """Port for location record sources.

    Implementations:
    - adapters/sources/csv_source.py (WorldLocationsCSVSource)
    - adapters/sources/csv_source.py (GazetteerCSVSource)
    - adapters/sources/memory_source.py (InMemoryLocationSource) - Testing
    """

    @property
    def name(self) -> str:
        """Short source name used in logs and errors."""
        ...

    def load(self) -> Sequence[LocationRecord]:
        """Load every record held by the source.

        Returns:
            Records in source order.

        Raises:
            DataSourceError: If the data cannot be read or is malformed.
        """
        ...
