"""Tests for QueryMatcher: multi-field scoring, filters and cutoff."""

import pytest

from location_search.domain.models import SearchOptions
from location_search.services.matcher import QueryMatcher, user_distance


@pytest.fixture
def records(antalya_records):
    return {r.id: r for r in antalya_records}


@pytest.fixture
def matcher():
    return QueryMatcher()


def test_airport_code_is_an_exact_match(matcher, records):
    assert matcher.match_score("AYT", records["ayt-airport"]) == 100
    assert matcher.match_score("ayt", records["ayt-airport"]) == 100


def test_keyword_in_other_script_matches(matcher, records):
    assert matcher.match_score("Анталья", records["ayt-city"]) == 100
    assert matcher.match_score("أنطاليا", records["ayt-city"]) == 100


def test_best_field_wins(matcher, records):
    # Name is "Antalya Havalimanı", city is "Antalya"
    assert matcher.match_score("antalya", records["ayt-airport"]) == 100
    assert matcher.match_score("havalimani", records["ayt-airport"]) == 75


def test_below_threshold_is_none(matcher, records):
    assert matcher.match_score("zzzz", records["ayt-city"]) is None


def test_custom_threshold(records):
    strict = QueryMatcher(min_score=95)
    assert strict.match_score("Antal", records["ayt-city"]) is None
    assert QueryMatcher(min_score=50).match_score("Antal", records["ayt-city"]) == 90


def test_empty_fields_are_skipped(make_record):
    record = make_record("kas", "Kaş", name_en="")
    assert QueryMatcher().match_score("zzzz", record) is None


def test_passes_filters(records):
    airport = records["ayt-airport"]
    assert QueryMatcher.passes_filters(airport, SearchOptions())
    assert QueryMatcher.passes_filters(airport, SearchOptions(kind_filter="airport"))
    assert not QueryMatcher.passes_filters(airport, SearchOptions(kind_filter="city"))
    assert QueryMatcher.passes_filters(airport, SearchOptions(country_filter="tr"))
    assert not QueryMatcher.passes_filters(airport, SearchOptions(country_filter="GB"))


def test_score_skips_filtered_records(matcher, records):
    options = SearchOptions(country_filter="GB")
    assert matcher.score("antalya", records["ayt-city"], options) is None


def test_score_attaches_distance(matcher, records):
    options = SearchOptions(user_coordinates=(36.8987, 30.8005))
    candidate = matcher.score("antalya", records["ayt-city"], options)
    assert candidate.match_score == 100
    assert 7.5 < candidate.distance_km < 8.1


def test_score_without_user_position_has_no_distance(matcher, records):
    candidate = matcher.score("antalya", records["ayt-city"], SearchOptions())
    assert candidate.distance_km is None


def test_user_distance_needs_record_coordinates(records):
    options = SearchOptions(user_coordinates=(36.9, 30.7))
    assert user_distance(records["olympos"], options) is None
    assert user_distance(records["kemer"], options) > 0
