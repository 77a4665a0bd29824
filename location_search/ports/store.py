"""Location store port - Read-only access to merged location records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import LocationRecord


class LocationStorePort(Protocol):
    """Port for the merged, de-duplicated record collection.

    Implementation: adapters/store/memory_store.py

    The store is built once and never mutated afterwards; every
    method is a pure read.
    """

    def all(self) -> Sequence[LocationRecord]:
        """Return every record in merge order."""
        ...

    def by_id(self, location_id: str) -> Optional[LocationRecord]:
        """Return the record with this id, or None if unknown."""
        ...

    def by_region(self, region: str) -> Sequence[LocationRecord]:
        """Return records whose region matches exactly."""
        ...

    def __iter__(self) -> Iterator[LocationRecord]:
        ...

    def __len__(self) -> int:
        ...
