"""Typed domain errors for the location search engine.

Validation problems are raised at the service boundary before any
scoring runs. Not-found outcomes are never errors: lookups return
``None`` and searches return an empty tuple.

All errors inherit from LocationSearchError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LocationSearchError(Exception):
    """Base error for the location search domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class SearchValidationError(LocationSearchError):
    """A caller passed an invalid argument to a search operation.

    Attributes:
        field_name: Name of the offending argument
        value: The rejected value
    """

    field_name: str = ""
    value: Any = None


@dataclass
class InvalidCoordinatesError(SearchValidationError):
    """Latitude or longitude is outside its valid range."""


@dataclass
class InvalidSearchOptionsError(SearchValidationError):
    """Limit, radius, filter or query has an unusable value."""


@dataclass
class RecordValidationError(LocationSearchError):
    """A location record violates its invariants.

    Attributes:
        record_id: Identifier of the malformed record, if known
    """

    record_id: str = ""


@dataclass
class DataSourceError(LocationSearchError):
    """Source data could not be loaded while building the store.

    This is the only non-recoverable failure: the surrounding
    application should refuse to start.

    Attributes:
        source_name: Name of the source that failed
        file_path: Path to the data file if relevant
    """

    source_name: str = ""
    file_path: Optional[str] = None


@dataclass
class ConfigurationError(LocationSearchError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
