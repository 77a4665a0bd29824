"""In-memory location source for tests and embedding.

Wraps records that are already built, e.g. fixtures or data
generated by the host application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ...domain.models import LocationRecord


@dataclass
class InMemoryLocationSource:
    """Source backed by a fixed sequence of records."""

    records: Iterable[LocationRecord] = field(default_factory=tuple)
    source_name: str = "memory"

    def __post_init__(self) -> None:
        self.records = tuple(self.records)

    @property
    def name(self) -> str:
        return self.source_name

    def load(self) -> Tuple[LocationRecord, ...]:
        return tuple(self.records)
