"""Immutable domain models for the location search engine.

All models are frozen dataclasses with slots. Collections are stored
as tuples so a record built at start-up can be shared between threads
without copying or locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .errors import (
    InvalidCoordinatesError,
    InvalidSearchOptionsError,
    RecordValidationError,
)


class LocationKind(str, Enum):
    """Closed set of location types.

    The kind decides which optional fields of a LocationRecord are
    meaningful (``airport_code`` only exists for airports).
    """

    CITY = "city"
    AIRPORT = "airport"
    HOTEL = "hotel"
    REGION = "region"
    DISTRICT = "district"
    HOTEL_ZONE = "hotel_zone"
    TOWN = "town"

    @classmethod
    def parse(cls, value: Union[str, "LocationKind"]) -> "LocationKind":
        """Coerce a string such as ``"hotel_zone"`` into a LocationKind.

        Raises:
            ValueError: If the value is not a known kind.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        for name, bound in (("latitude", 90.0), ("longitude", 180.0)):
            value = getattr(self, name)
            try:
                number = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidCoordinatesError(
                    f"{name.capitalize()} must be a number, got {value!r}",
                    field_name=name,
                    value=value,
                    cause=e,
                )
            # NaN fails both comparisons and is rejected here too
            if not -bound <= number <= bound:
                raise InvalidCoordinatesError(
                    f"{name.capitalize()} must be between -{bound:g} and {bound:g}, got {value}",
                    field_name=name,
                    value=value,
                )
            object.__setattr__(self, name, number)

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True, slots=True)
class TransferEstimate:
    """Road transfer from an airport to a location.

    Attributes:
        airport_code: IATA code of the departure airport (e.g., 'AYT')
        distance_km: Road distance in kilometers
        duration_minutes: Typical transfer time in minutes
    """

    airport_code: str
    distance_km: float
    duration_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "airportCode": self.airport_code,
            "distanceKm": self.distance_km,
            "durationMinutes": self.duration_minutes,
        }


@dataclass(frozen=True, slots=True)
class LocationRecord:
    """A searchable place: city, airport, hotel zone, district...

    Attributes:
        id: Unique stable identifier (e.g., 'ayt-airport')
        name: Local display name (e.g., 'Antalya Havalimanı')
        name_en: English-like display name (e.g., 'Antalya Airport')
        city: City the location belongs to
        country: Country display name
        country_code: ISO-2 country code, stored upper-case
        kind: Location type
        region: Optional region or province
        airport_code: Three or four letter code, airports only
        coordinates: Optional GPS coordinates
        is_popular: Whether the location is promoted in rankings
        known_venue_count: Optional hotel count used as a tiebreaker
        keywords: Alternate spellings, scripts and synonyms
        transfers: Airport transfer estimates, gazetteer records only
    """

    id: str
    name: str
    name_en: str
    city: str
    country: str
    country_code: str
    kind: LocationKind
    region: Optional[str] = None
    airport_code: Optional[str] = None
    coordinates: Optional[GeoLocation] = None
    is_popular: bool = False
    known_venue_count: Optional[int] = None
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    transfers: Tuple[TransferEstimate, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise RecordValidationError("Location id must not be empty")

        try:
            kind = LocationKind.parse(self.kind)
        except ValueError as e:
            raise RecordValidationError(
                f"Unknown location kind {self.kind!r}",
                record_id=self.id,
                cause=e,
            )
        object.__setattr__(self, "kind", kind)

        country_code = (self.country_code or "").strip().upper()
        if len(country_code) != 2 or not (country_code.isascii() and country_code.isalpha()):
            raise RecordValidationError(
                f"Country code must be two letters, got {self.country_code!r}",
                record_id=self.id,
            )
        object.__setattr__(self, "country_code", country_code)

        if self.airport_code:
            if kind is not LocationKind.AIRPORT:
                raise RecordValidationError(
                    f"Airport code set on a {kind.value} record",
                    record_id=self.id,
                )
            code = self.airport_code.strip().upper()
            if not 3 <= len(code) <= 4 or not code.isalnum():
                raise RecordValidationError(
                    f"Airport code must be 3-4 characters, got {self.airport_code!r}",
                    record_id=self.id,
                )
            object.__setattr__(self, "airport_code", code)
        else:
            object.__setattr__(self, "airport_code", None)

        if self.known_venue_count is not None and self.known_venue_count < 0:
            raise RecordValidationError(
                "Known venue count must not be negative",
                record_id=self.id,
            )

        if self.coordinates is not None and not isinstance(self.coordinates, GeoLocation):
            try:
                latitude, longitude = self.coordinates
                coordinates = GeoLocation(latitude, longitude)
            except (InvalidCoordinatesError, TypeError, ValueError) as e:
                raise RecordValidationError(
                    f"Invalid coordinates {self.coordinates!r}",
                    record_id=self.id,
                    cause=e,
                )
            object.__setattr__(self, "coordinates", coordinates)

        keywords = tuple(k for k in self.keywords if k and k.strip())
        if not keywords:
            keywords = tuple(n for n in (self.name, self.name_en) if n)
        object.__setattr__(self, "keywords", keywords)
        object.__setattr__(self, "transfers", tuple(self.transfers))

    @property
    def venue_count(self) -> int:
        """Known venue count, 0 when unknown."""
        return self.known_venue_count or 0

    def transfer_from(self, airport_code: str) -> Optional[TransferEstimate]:
        """Return the transfer estimate from the given airport, if known."""
        code = airport_code.strip().upper()
        for transfer in self.transfers:
            if transfer.airport_code == code:
                return transfer
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON suggestion shape used by the web layer."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "nameEn": self.name_en,
            "city": self.city,
            "region": self.region,
            "country": self.country,
            "countryCode": self.country_code,
            "type": self.kind.value,
            "code": self.airport_code,
            "coordinates": self.coordinates.to_dict() if self.coordinates else None,
            "popular": self.is_popular,
            "hotelCount": self.known_venue_count,
            "keywords": list(self.keywords),
        }
        if self.transfers:
            data["transfers"] = [t.to_dict() for t in self.transfers]
        return data


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Per-query configuration.

    Loose inputs are coerced at construction: kind strings become
    LocationKind (``"all"`` means no filter), country codes are
    upper-cased and ``(lat, lon)`` tuples become GeoLocation.

    Attributes:
        kind_filter: Only return records of this kind
        country_filter: Only return records with this ISO-2 country code
        result_limit: Maximum number of results (must be positive)
        user_coordinates: User position, enables distance ranking
        prefer_popular_first: Rank popular records ahead of others
    """

    kind_filter: Optional[LocationKind] = None
    country_filter: Optional[str] = None
    result_limit: int = 10
    user_coordinates: Optional[GeoLocation] = None
    prefer_popular_first: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.result_limit, bool) or not isinstance(self.result_limit, int):
            raise InvalidSearchOptionsError(
                f"Result limit must be an integer, got {self.result_limit!r}",
                field_name="result_limit",
                value=self.result_limit,
            )
        if self.result_limit <= 0:
            raise InvalidSearchOptionsError(
                f"Result limit must be positive, got {self.result_limit}",
                field_name="result_limit",
                value=self.result_limit,
            )

        kind = self.kind_filter
        if isinstance(kind, str) and kind.strip().lower() in ("", "all"):
            kind = None
        if kind is not None:
            try:
                kind = LocationKind.parse(kind)
            except ValueError as e:
                raise InvalidSearchOptionsError(
                    f"Unknown location kind {self.kind_filter!r}",
                    field_name="kind_filter",
                    value=self.kind_filter,
                    cause=e,
                )
        object.__setattr__(self, "kind_filter", kind)

        country = self.country_filter
        if country is not None and not isinstance(country, str):
            raise InvalidSearchOptionsError(
                f"Country filter must be a string, got {country!r}",
                field_name="country_filter",
                value=country,
            )
        country = (country or "").strip().upper() or None
        if country is not None and (
            len(country) != 2 or not (country.isascii() and country.isalpha())
        ):
            raise InvalidSearchOptionsError(
                f"Country filter must be a two-letter code, got {self.country_filter!r}",
                field_name="country_filter",
                value=self.country_filter,
            )
        object.__setattr__(self, "country_filter", country)

        coordinates = self.user_coordinates
        if coordinates is not None and not isinstance(coordinates, GeoLocation):
            try:
                latitude, longitude = coordinates
            except (TypeError, ValueError) as e:
                raise InvalidCoordinatesError(
                    f"User coordinates must be a (lat, lon) pair, got {coordinates!r}",
                    field_name="user_coordinates",
                    value=coordinates,
                    cause=e,
                )
            object.__setattr__(self, "user_coordinates", GeoLocation(latitude, longitude))


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    """A record matched by one search call.

    Attributes:
        record: The matched location
        match_score: Best similarity across the record's fields (0-100)
        distance_km: Distance from the user, when both positions are known
    """

    record: LocationRecord
    match_score: int
    distance_km: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.record.to_dict()
        data["matchScore"] = self.match_score
        data["distance"] = self.distance_km
        return data


@dataclass(frozen=True, slots=True)
class NearbyLocation:
    """A record returned by a radius query, with its distance."""

    record: LocationRecord
    distance_km: float

    def to_dict(self) -> Dict[str, Any]:
        data = self.record.to_dict()
        data["distance"] = self.distance_km
        return data
