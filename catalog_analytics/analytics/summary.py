"""
Catalog summary — headline numbers for the overview page and the CLI.
"""
from __future__ import annotations

from catalog_analytics.config import MOVIE_TYPE, SHOW_TYPE
from catalog_analytics.data.store import CatalogStore
from catalog_analytics.data.schemas import YearSeries
from catalog_analytics.analytics.aggregates import duration_stats
from catalog_analytics.analytics.common import pct_of_total, to_native


def _span(series: YearSeries) -> dict:
    """First/last year with data inside the bucket range, plus the busiest year."""
    populated = [y for y, c in zip(series.years, series.counts) if c > 0]
    return {
        "first": populated[0] if populated else None,
        "last": populated[-1] if populated else None,
        "peak": series.peak(),
        "total": series.total,
    }


def catalog_summary(store: CatalogStore) -> dict:
    """Title counts, type mix, year spans, duration distributions, distinct people/places."""
    # One snapshot for every query below, so a concurrent reload can't mix two catalogs
    view = store.pinned()
    snap = view.snapshot

    types_count = view.types_count()
    typed_total = sum(types_count.values())

    mix = [
        {"type": t, "count": n, "share": pct_of_total(n, typed_total)}
        for t, n in sorted(types_count.items(), key=lambda kv: (-kv[1], kv[0]))
    ]

    return to_native({
        "source": str(snap.source_path) if snap.source_path else None,
        "loaded_at": snap.loaded_at.isoformat() if snap.loaded_at else None,
        "titles": view.row_count(),
        "distinct_titles": len(view.titles()),
        "movies": types_count.get(MOVIE_TYPE, 0),
        "shows": types_count.get(SHOW_TYPE, 0),
        "type_mix": mix,
        "released": _span(view.release_series()),
        "added": _span(view.added_series()),
        "movie_minutes": duration_stats(view.durations_movies()),
        "show_seasons": duration_stats(view.durations_shows()),
        "directors": len(view.directors()),
        "actors": len(view.actors()),
        "countries": len(view.countries()),
        "categories": len(view.categories()),
        "diagnostics": len(snap.diagnostics),
    })
