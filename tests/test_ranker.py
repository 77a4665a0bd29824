"""Tests for the multi-key Ranker and browse mode."""

import pytest

from location_search.domain.models import ScoredCandidate, SearchOptions
from location_search.services.ranker import Ranker


@pytest.fixture
def candidate(make_record):
    def _candidate(location_id, score, popular=True, venues=None, distance=None):
        record = make_record(
            location_id,
            location_id.title(),
            is_popular=popular,
            known_venue_count=venues,
        )
        return ScoredCandidate(record=record, match_score=score, distance_km=distance)

    return _candidate


def ids(results):
    return [c.record.id for c in results]


def test_popular_wins_over_higher_score(candidate):
    unpopular = candidate("exact", 100, popular=False)
    popular = candidate("fuzzy", 60)
    assert ids(Ranker().rank([unpopular, popular], SearchOptions())) == ["fuzzy", "exact"]


def test_popularity_ignored_when_not_preferred(candidate):
    unpopular = candidate("exact", 100, popular=False)
    popular = candidate("fuzzy", 60)
    options = SearchOptions(prefer_popular_first=False)
    assert ids(Ranker().rank([popular, unpopular], options)) == ["exact", "fuzzy"]


def test_score_gap_above_tolerance_wins(candidate):
    low = candidate("low", 90, venues=500)
    high = candidate("high", 100, venues=1)
    assert ids(Ranker().rank([low, high], SearchOptions())) == ["high", "low"]


@pytest.mark.parametrize("high_score", [91, 95])
def test_scores_within_tolerance_fall_through_to_venues(candidate, high_score):
    high = candidate("high", high_score, venues=10)
    low = candidate("low", 90, venues=50)
    assert ids(Ranker().rank([high, low], SearchOptions())) == ["low", "high"]


def test_zero_tolerance_compares_raw_scores(candidate):
    high = candidate("high", 91, venues=10)
    low = candidate("low", 90, venues=50)
    assert ids(Ranker(score_tolerance=0).rank([low, high], SearchOptions())) == ["high", "low"]


def test_nearer_wins_when_both_distances_known(candidate):
    far = candidate("far", 92, venues=500, distance=30.0)
    near = candidate("near", 90, venues=1, distance=5.0)
    assert ids(Ranker().rank([far, near], SearchOptions())) == ["near", "far"]


def test_venues_decide_when_one_distance_missing(candidate):
    located = candidate("located", 90, venues=1, distance=5.0)
    unknown = candidate("unknown", 90, venues=40)
    assert ids(Ranker().rank([located, unknown], SearchOptions())) == ["unknown", "located"]


def test_missing_venue_count_is_zero(candidate):
    none = candidate("none", 90)
    some = candidate("some", 90, venues=1)
    assert ids(Ranker().rank([none, some], SearchOptions())) == ["some", "none"]


def test_full_ties_keep_input_order(candidate):
    tied = [candidate(name, 90) for name in ("first", "second", "third")]
    assert ids(Ranker().rank(tied, SearchOptions())) == ["first", "second", "third"]


def test_rank_truncates_to_limit(candidate):
    many = [candidate(f"loc{i}", 90, venues=i) for i in range(8)]
    results = Ranker().rank(many, SearchOptions(result_limit=3))
    assert ids(results) == ["loc7", "loc6", "loc5"]


def test_rank_returns_tuple(candidate):
    assert Ranker().rank([candidate("a", 90)], SearchOptions()) == (
        candidate("a", 90),
    )


def test_browse_returns_popular_by_venue_count(antalya_records):
    results = Ranker.browse(antalya_records, SearchOptions())
    assert ids(results) == ["kemer", "belek", "olympos", "ayas", "ayt-airport", "london-city"]
    assert all(c.match_score == 0 for c in results)


def test_browse_applies_filters_and_limit(antalya_records):
    options = SearchOptions(kind_filter="district", result_limit=5)
    assert ids(Ranker.browse(antalya_records, options)) == ["kemer"]

    options = SearchOptions(country_filter="GB")
    assert ids(Ranker.browse(antalya_records, options)) == ["london-city"]

    options = SearchOptions(result_limit=2)
    assert ids(Ranker.browse(antalya_records, options)) == ["kemer", "belek"]


def test_browse_attaches_distance(antalya_records):
    options = SearchOptions(user_coordinates=(36.6025, 30.5594), result_limit=1)
    (kemer,) = Ranker.browse(antalya_records, options)
    assert kemer.distance_km == pytest.approx(0.0, abs=1e-9)
