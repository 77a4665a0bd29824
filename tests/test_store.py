"""Tests for LocationRecordStore merging and lookups."""

from unittest.mock import MagicMock

import pytest

from location_search.adapters.sources import InMemoryLocationSource
from location_search.adapters.store import LocationRecordStore
from location_search.domain.errors import DataSourceError, RecordValidationError


def test_merge_keeps_first_source_on_duplicate_id(make_record):
    world = [make_record("kemer", "Kemer", known_venue_count=180)]
    gazetteer = [
        make_record("kemer", "Kemer", known_venue_count=1),
        make_record("beldibi", "Beldibi"),
    ]

    store = LocationRecordStore.merge([world, gazetteer])

    assert len(store) == 2
    assert store.by_id("kemer").known_venue_count == 180
    assert [r.id for r in store] == ["kemer", "beldibi"]


def test_merge_drops_duplicates_within_one_source(make_record):
    store = LocationRecordStore.merge(
        [[make_record("side", "Side"), make_record("side", "Side Antik")]]
    )
    assert len(store) == 1
    assert store.by_id("side").name == "Side"


def test_merge_of_nothing_is_empty():
    store = LocationRecordStore.merge([])
    assert len(store) == 0
    assert store.all() == ()


def test_constructor_rejects_duplicate_ids(make_record):
    with pytest.raises(ValueError):
        LocationRecordStore([make_record("a", "A"), make_record("a", "A")])


def test_lookups(antalya_store):
    assert antalya_store.by_id("ayt-airport").airport_code == "AYT"
    assert antalya_store.by_id("missing") is None
    assert "belek" in antalya_store
    assert "missing" not in antalya_store


def test_by_region_is_exact_and_ordered(antalya_store):
    assert [r.id for r in antalya_store.by_region("Antalya")] == ["belek", "kemer", "olympos"]
    assert antalya_store.by_region("antalya") == ()


def test_all_is_an_immutable_tuple(antalya_store):
    records = antalya_store.all()
    assert isinstance(records, tuple)
    assert len(records) == len(antalya_store)


def test_repr(antalya_store):
    assert repr(antalya_store) == "LocationRecordStore(records=7)"


def test_from_sources_uses_priority_order(make_record):
    primary = InMemoryLocationSource([make_record("lara", "Lara", region="Antalya")], "world")
    secondary = InMemoryLocationSource(
        [make_record("lara", "Lara", region="Antalya Merkez"), make_record("kundu", "Kundu")],
        "gazetteer",
    )

    store = LocationRecordStore.from_sources([primary, secondary])

    assert len(store) == 2
    assert store.by_id("lara").region == "Antalya"


@pytest.mark.parametrize(
    "error",
    [OSError("disk gone"), ValueError("bad number"), RecordValidationError("bad kind")],
)
def test_from_sources_wraps_load_failures(error):
    source = MagicMock()
    source.name = "broken"
    source.load.side_effect = error

    with pytest.raises(DataSourceError) as exc_info:
        LocationRecordStore.from_sources([source])

    assert exc_info.value.source_name == "broken"
    assert exc_info.value.cause is error


def test_from_sources_reraises_data_source_errors():
    original = DataSourceError("file missing", source_name="world", file_path="/nope.csv")
    source = MagicMock()
    source.name = "world"
    source.load.side_effect = original

    with pytest.raises(DataSourceError) as exc_info:
        LocationRecordStore.from_sources([source])

    assert exc_info.value is original
