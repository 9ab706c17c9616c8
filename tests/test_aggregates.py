"""
Aggregate helpers and the catalog summary.
"""
import pandas as pd

from catalog_analytics.analytics.aggregates import (
    count_by_type,
    duration_stats,
    durations_of,
    year_buckets,
)
from catalog_analytics.analytics.common import pct_of_total, to_native
from catalog_analytics.analytics.summary import catalog_summary
from catalog_analytics.data.schemas import DurationKind, Minutes, Seasons
from catalog_analytics.data.store import CatalogStore


def test_year_buckets_total_function():
    values = pd.Series(pd.array([2001, 2003, 2003, None, 1999], dtype="Int64"))
    series = year_buckets(values, 2000, 2004)

    assert series.years == [2000, 2001, 2002, 2003, 2004]
    assert series.counts == [0, 1, 0, 2, 0]
    assert series.total == 3
    assert series.peak() == 2003


def test_year_buckets_empty_input():
    series = year_buckets(pd.Series([], dtype="Int64"), 2000, 2002)
    assert series.counts == [0, 0, 0]
    assert series.peak() is None


def test_count_by_type_skips_missing():
    df = pd.DataFrame({"type": ["Movie", None, "TV Show", "Movie"]})
    assert count_by_type(df) == {"Movie": 2, "TV Show": 1}


def test_durations_of_filters_by_variant():
    df = pd.DataFrame({"duration_value": pd.Series([Minutes(90), Seasons(3), None, Minutes(45)], dtype=object)})
    assert durations_of(df, DurationKind.MINUTES) == [90, 45]
    assert durations_of(df, DurationKind.SEASONS) == [3]


def test_duration_stats():
    stats = duration_stats([90, 100, 110, 120])
    assert stats["count"] == 4
    assert stats["min"] == 90
    assert stats["max"] == 120
    assert stats["mean"] == 105.0
    assert stats["median"] == 105.0


def test_duration_stats_empty():
    stats = duration_stats([])
    assert stats["count"] == 0
    assert stats["median"] is None


def test_to_native_handles_numpy_and_missing():
    import numpy as np

    out = to_native({"a": np.int64(3), "b": [np.float64("nan"), 1.5], "c": pd.NA, "d": np.bool_(True)})
    assert out == {"a": 3, "b": [None, 1.5], "c": None, "d": True}


def test_pct_of_total():
    assert pct_of_total(1, 3) == 33.3
    assert pct_of_total(5, 0) == 0.0


def test_catalog_summary(catalog_file):
    store = CatalogStore().load(catalog_file)
    s = catalog_summary(store)

    assert s["titles"] == 6
    assert s["movies"] == 4
    assert s["shows"] == 2
    assert s["type_mix"][0] == {"type": "Movie", "count": 4, "share": 66.7}
    assert s["released"] == {"first": 1975, "last": 2021, "peak": 2021, "total": 6}
    assert s["added"]["first"] == 2019
    assert s["added"]["total"] == 5
    assert s["movie_minutes"]["max"] == 125
    assert s["show_seasons"]["count"] == 2
    assert s["countries"] == 7
    assert s["directors"] == 6
    assert s["diagnostics"] == 0


def test_summary_of_unloaded_store():
    s = catalog_summary(CatalogStore())
    assert s["titles"] == 0
    assert s["type_mix"] == []
    assert s["released"]["first"] is None
    assert s["movie_minutes"]["count"] == 0
