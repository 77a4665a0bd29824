"""Shared fixtures: small hand-built record sets and services."""

from __future__ import annotations

import pytest

from location_search.adapters.cache import NullResultCache
from location_search.adapters.store import LocationRecordStore
from location_search.config import SearchConfig, reset_config
from location_search.container import reset_container
from location_search.domain.models import LocationRecord
from location_search.services import LocationSearchService


def build_record(location_id: str, name: str, **overrides) -> LocationRecord:
    """Create a record with sensible Turkish-city defaults."""
    fields = {
        "id": location_id,
        "name": name,
        "name_en": name,
        "city": name,
        "country": "Türkiye",
        "country_code": "TR",
        "kind": "city",
    }
    fields.update(overrides)
    return LocationRecord(**fields)


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def antalya_records():
    """A handful of Antalya-area records plus one far-away city."""
    return [
        build_record(
            "ayt-city",
            "Antalya",
            coordinates=(36.8969, 30.7133),
            is_popular=False,
            keywords=("antalya", "Анталья", "أنطاليا"),
        ),
        build_record(
            "ayt-airport",
            "Antalya Havalimanı",
            name_en="Antalya Airport",
            city="Antalya",
            kind="airport",
            airport_code="AYT",
            coordinates=(36.8987, 30.8005),
            is_popular=True,
            keywords=("antalya airport", "antalya havalimani"),
        ),
        build_record(
            "ayas",
            "Ayas",
            coordinates=(36.7720, 35.7860),
            is_popular=True,
            known_venue_count=3,
        ),
        build_record(
            "belek",
            "Belek",
            kind="hotel_zone",
            region="Antalya",
            coordinates=(36.8628, 31.0556),
            is_popular=True,
            known_venue_count=95,
        ),
        build_record(
            "kemer",
            "Kemer",
            kind="district",
            region="Antalya",
            coordinates=(36.6025, 30.5594),
            is_popular=True,
            known_venue_count=180,
        ),
        build_record(
            "olympos",
            "Olympos",
            kind="town",
            region="Antalya",
            is_popular=True,
            known_venue_count=7,
        ),
        build_record(
            "london-city",
            "Londra",
            name_en="London",
            city="London",
            country="İngiltere",
            country_code="GB",
            coordinates=(51.5074, -0.1278),
            is_popular=True,
            keywords=("london", "londra"),
        ),
    ]


@pytest.fixture
def antalya_store(antalya_records):
    return LocationRecordStore.merge([antalya_records])


@pytest.fixture
def search_service(antalya_store):
    return LocationSearchService(
        store=antalya_store,
        cache=NullResultCache(),
        config=SearchConfig(),
    )


@pytest.fixture(autouse=True)
def _fresh_config():
    """Never leak cached configuration or containers between tests."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
