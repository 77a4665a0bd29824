"""CSV location source adapters.

Two CSV shapes feed the store:

- the world list (cities and airports worldwide), one column per
  LocationRecord field;
- the regional transfer gazetteer, which has no city or country
  columns but carries airport transfer distances and durations.

Each adapter maps its own shape into LocationRecord so the records
are validated at load time, not while searching. Keyword lists are
stored pipe-separated in a single column.
"""

from __future__ import annotations

import csv
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ...config import DataConfig, get_config
from ...domain.errors import DataSourceError, RecordValidationError
from ...domain.models import LocationRecord, TransferEstimate

KEYWORD_SEPARATOR = "|"

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"0", "false", "no", "n", ""}

# Gazetteer airports that have distance/duration columns
GAZETTEER_AIRPORTS = ("AYT", "GZP")


def _cell(row: Dict[str, Optional[str]], column: str) -> str:
    return (row.get(column) or "").strip()


def _optional(row: Dict[str, Optional[str]], column: str) -> Optional[str]:
    return _cell(row, column) or None


def _parse_bool(row: Dict[str, Optional[str]], column: str) -> bool:
    value = _cell(row, column).lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Column {column!r} is not a boolean: {value!r}")


def _optional_int(row: Dict[str, Optional[str]], column: str) -> Optional[int]:
    value = _cell(row, column)
    return int(value) if value else None


def _coordinates(row: Dict[str, Optional[str]]) -> Optional[Tuple[float, float]]:
    lat, lng = _cell(row, "lat"), _cell(row, "lng")
    if not lat and not lng:
        return None
    if not lat or not lng:
        raise ValueError("Both lat and lng are required when one is set")
    return float(lat), float(lng)


def _keywords(row: Dict[str, Optional[str]]) -> Tuple[str, ...]:
    raw = _cell(row, "keywords")
    return tuple(k.strip() for k in raw.split(KEYWORD_SEPARATOR) if k.strip())


@dataclass
class _CSVLocationSource(ABC):
    """Shared CSV reading and error wrapping for the concrete sources."""

    config: DataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Short source name used in logs and errors."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """CSV file to read."""

    @abstractmethod
    def _parse_row(self, row: Dict[str, Optional[str]]) -> LocationRecord:
        """Map one CSV row to a validated record."""

    def load(self) -> List[LocationRecord]:
        """Read and validate every row of the CSV file.

        Returns:
            Records in file order.

        Raises:
            DataSourceError: If the file cannot be read or a row is malformed.
        """
        self._logger.debug(
            "Loading location source",
            extra={"source": self.name, "path": str(self.path)},
        )

        records: List[LocationRecord] = []
        try:
            with self.path.open(encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    if not any(isinstance(v, str) and v.strip() for v in row.values()):
                        continue
                    try:
                        records.append(self._parse_row(row))
                    except (RecordValidationError, ValueError) as e:
                        raise DataSourceError(
                            f"Malformed row {reader.line_num} in {self.name} source",
                            source_name=self.name,
                            file_path=str(self.path),
                            cause=e,
                        )
        except (OSError, csv.Error) as e:
            raise DataSourceError(
                f"Failed to read {self.name} source",
                source_name=self.name,
                file_path=str(self.path),
                cause=e,
            )

        self._logger.info(
            "Location source loaded",
            extra={"source": self.name, "records": len(records)},
        )
        return records


@dataclass
class WorldLocationsCSVSource(_CSVLocationSource):
    """Primary source: cities and airports worldwide.

    Columns: id, name, name_en, city, region, country, country_code,
    type, code, lat, lng, popular, hotel_count, keywords.
    """

    @property
    def name(self) -> str:
        return "world"

    @property
    def path(self) -> Path:
        return self.config.world_locations_path

    def _parse_row(self, row: Dict[str, Optional[str]]) -> LocationRecord:
        return LocationRecord(
            id=_cell(row, "id"),
            name=_cell(row, "name"),
            name_en=_cell(row, "name_en"),
            city=_cell(row, "city"),
            region=_optional(row, "region"),
            country=_cell(row, "country"),
            country_code=_cell(row, "country_code"),
            kind=_cell(row, "type"),  # type: ignore[arg-type]
            airport_code=_optional(row, "code"),
            coordinates=_coordinates(row),  # type: ignore[arg-type]
            is_popular=_parse_bool(row, "popular"),
            known_venue_count=_optional_int(row, "hotel_count"),
            keywords=_keywords(row),
        )


@dataclass
class GazetteerCSVSource(_CSVLocationSource):
    """Secondary source: the Antalya airport transfer gazetteer.

    Columns: id, name, name_en, type, region, lat, lng, popular,
    hotel_count, keywords, plus distance_from_<airport> and
    duration_from_<airport> for each airport in GAZETTEER_AIRPORTS.

    The city is the location's own name and the country comes from
    configuration, since every row lies in the same country.
    """

    @property
    def name(self) -> str:
        return "gazetteer"

    @property
    def path(self) -> Path:
        return self.config.gazetteer_path

    def _transfers(self, row: Dict[str, Optional[str]]) -> Tuple[TransferEstimate, ...]:
        transfers = []
        for airport in GAZETTEER_AIRPORTS:
            distance = _cell(row, f"distance_from_{airport.lower()}")
            duration = _cell(row, f"duration_from_{airport.lower()}")
            if not distance or not duration:
                continue
            transfers.append(
                TransferEstimate(
                    airport_code=airport,
                    distance_km=float(distance),
                    duration_minutes=int(duration),
                )
            )
        return tuple(transfers)

    def _parse_row(self, row: Dict[str, Optional[str]]) -> LocationRecord:
        name = _cell(row, "name")
        return LocationRecord(
            id=_cell(row, "id"),
            name=name,
            name_en=_cell(row, "name_en"),
            city=name,
            region=_optional(row, "region"),
            country=self.config.gazetteer_country,
            country_code=self.config.gazetteer_country_code,
            kind=_cell(row, "type"),  # type: ignore[arg-type]
            coordinates=_coordinates(row),  # type: ignore[arg-type]
            is_popular=_parse_bool(row, "popular"),
            known_venue_count=_optional_int(row, "hotel_count"),
            keywords=_keywords(row),
            transfers=self._transfers(row),
        )
