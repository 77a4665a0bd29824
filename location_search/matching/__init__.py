"""String similarity and geo-distance primitives used by the matcher."""

from .geo import EARTH_RADIUS_KM, distance_between, distance_km
from .similarity import normalize_text, similarity

__all__ = [
    "EARTH_RADIUS_KM",
    "distance_between",
    "distance_km",
    "normalize_text",
    "similarity",
]
