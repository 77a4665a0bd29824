"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DataSourceError,
    InvalidCoordinatesError,
    InvalidSearchOptionsError,
    LocationSearchError,
    RecordValidationError,
    SearchValidationError,
)
from .models import (
    GeoLocation,
    LocationKind,
    LocationRecord,
    NearbyLocation,
    ScoredCandidate,
    SearchOptions,
    TransferEstimate,
)

__all__ = [
    # Models
    "GeoLocation",
    "LocationKind",
    "LocationRecord",
    "NearbyLocation",
    "ScoredCandidate",
    "SearchOptions",
    "TransferEstimate",
    # Errors
    "LocationSearchError",
    "SearchValidationError",
    "InvalidCoordinatesError",
    "InvalidSearchOptionsError",
    "RecordValidationError",
    "DataSourceError",
    "ConfigurationError",
]
