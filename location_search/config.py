"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the engine's tunables:
the match threshold, the tie tolerance, default limits and the
location data files.

Configuration can be overridden via environment variables:
- LOCSEARCH_SEARCH_MIN_MATCH_SCORE=60
- LOCSEARCH_SEARCH_SCORE_TOLERANCE=3
- LOCSEARCH_DATA_DATA_DIR=/path/to/data
- LOCSEARCH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Below this score a record is dropped from search results. The value
# comes from the production site and has not been re-tuned.
MIN_MATCH_SCORE = 50

# Scores closer than this are a tie and fall through to distance and
# venue count.
SCORE_TOLERANCE = 5

# Shorter queries switch to browsing popular locations.
MIN_QUERY_LENGTH = 2

DEFAULT_RESULT_LIMIT = 10
DEFAULT_NEARBY_RADIUS_KM = 50.0


class SearchConfig(BaseSettings):
    """Matching and ranking configuration.

    Environment variables prefixed with LOCSEARCH_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="LOCSEARCH_SEARCH_")

    min_match_score: int = Field(default=MIN_MATCH_SCORE, ge=0, le=100)
    score_tolerance: int = Field(default=SCORE_TOLERANCE, ge=0, le=100)
    min_query_length: int = Field(default=MIN_QUERY_LENGTH, ge=0)
    default_result_limit: int = Field(default=DEFAULT_RESULT_LIMIT, gt=0)
    default_nearby_radius_km: float = Field(default=DEFAULT_NEARBY_RADIUS_KM, ge=0)
    result_cache_enabled: bool = True
    result_cache_size: int = Field(default=256, gt=0)


class DataConfig(BaseSettings):
    """Location data configuration.

    Environment variables prefixed with LOCSEARCH_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="LOCSEARCH_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    world_locations_file: str = "world_locations.csv"
    gazetteer_file: str = "antalya_transfer_locations.csv"
    # Gazetteer rows carry no country columns
    gazetteer_country: str = "Türkiye"
    gazetteer_country_code: str = Field(default="TR", min_length=2, max_length=2)

    @property
    def world_locations_path(self) -> Path:
        """Full path to the world locations CSV file."""
        return self.data_dir / self.world_locations_file

    @property
    def gazetteer_path(self) -> Path:
        """Full path to the regional gazetteer CSV file."""
        return self.data_dir / self.gazetteer_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with LOCSEARCH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="LOCSEARCH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.search.min_match_score)
        print(config.data.gazetteer_path)

    Environment variables prefixed with LOCSEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="LOCSEARCH_")

    search: SearchConfig = Field(default_factory=SearchConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
