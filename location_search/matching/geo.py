"""Great-circle distances between GPS coordinates."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import GeoLocation

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the distance in km between two GPS coordinates.

    Uses the Haversine formula on a spherical Earth. Range checks are
    the caller's job (see GeoLocation); this function only does math.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push a a hair past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_between(origin: GeoLocation, destination: GeoLocation) -> float:
    """Distance in km between two GeoLocation values."""
    return distance_km(
        origin.latitude,
        origin.longitude,
        destination.latitude,
        destination.longitude,
    )
