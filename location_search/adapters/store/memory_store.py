"""In-memory location record store.

Merges several record lists into one de-duplicated, read-only
collection. Sources are given in priority order; when two sources
share an id the record seen first wins and the later one is dropped.
Rebuilding the store means merging again from scratch.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from ...domain.errors import DataSourceError, LocationSearchError
from ...domain.models import LocationRecord
from ...ports.sources import LocationSourcePort

logger = logging.getLogger(__name__)


class LocationRecordStore:
    """Immutable collection of location records keyed by id.

    Implements LocationStorePort. Build it with ``merge`` or
    ``from_sources`` rather than calling the constructor directly.

    Example:
        store = LocationRecordStore.merge([world_records, gazetteer_records])
        store.by_id("ayt-airport")
    """

    __slots__ = ("_records", "_index")

    def __init__(self, records: Iterable[LocationRecord] = ()) -> None:
        ordered: Tuple[LocationRecord, ...] = tuple(records)
        index: Dict[str, LocationRecord] = {}
        for record in ordered:
            if record.id in index:
                raise ValueError(f"Duplicate location id: {record.id}")
            index[record.id] = record
        self._records = ordered
        self._index: Mapping[str, LocationRecord] = MappingProxyType(index)

    @classmethod
    def merge(
        cls, sources: Sequence[Iterable[LocationRecord]]
    ) -> LocationRecordStore:
        """Merge record lists, highest priority first.

        Args:
            sources: Record lists in priority order.

        Returns:
            A store holding the first record seen for every id.
        """
        merged: Dict[str, LocationRecord] = {}
        dropped = 0
        for priority, records in enumerate(sources):
            for record in records:
                if record.id in merged:
                    dropped += 1
                    logger.debug(
                        "Dropped duplicate location",
                        extra={"location_id": record.id, "priority": priority},
                    )
                    continue
                merged[record.id] = record

        logger.info(
            "Location store merged",
            extra={
                "sources": len(sources),
                "records": len(merged),
                "duplicates_dropped": dropped,
            },
        )
        return cls(merged.values())

    @classmethod
    def from_sources(cls, sources: Sequence[LocationSourcePort]) -> LocationRecordStore:
        """Load every source and merge them by priority.

        Args:
            sources: Source adapters, highest priority first.

        Returns:
            The merged store.

        Raises:
            DataSourceError: If any source fails to load. The caller
                should treat this as fatal.
        """
        loaded = []
        for source in sources:
            try:
                records = source.load()
            except DataSourceError:
                raise
            except (LocationSearchError, OSError, ValueError) as e:
                raise DataSourceError(
                    f"Failed to load location source {source.name}",
                    source_name=source.name,
                    cause=e,
                )
            logger.debug(
                "Location source loaded",
                extra={"source": source.name, "records": len(records)},
            )
            loaded.append(records)
        return cls.merge(loaded)

    def all(self) -> Tuple[LocationRecord, ...]:
        """Return every record in merge order."""
        return self._records

    def by_id(self, location_id: str) -> Optional[LocationRecord]:
        """Return the record with this id, or None if unknown."""
        return self._index.get(location_id)

    def by_region(self, region: str) -> Tuple[LocationRecord, ...]:
        """Return records whose region matches exactly, in merge order."""
        return tuple(r for r in self._records if r.region == region)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._index

    def __repr__(self) -> str:
        return f"LocationRecordStore(records={len(self._records)})"
