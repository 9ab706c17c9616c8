"""
Aggregates over a normalized catalog DataFrame.

Pure functions: they read the frame and never modify it, so calling any of
them twice on the same snapshot gives the same answer.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from catalog_analytics.data.normalize import individuals
from catalog_analytics.data.schemas import DurationKind, Minutes, Seasons, YearSeries


def distinct_sorted(series: pd.Series) -> list[str]:
    """Sorted distinct non-missing values of a text column."""
    return sorted(str(v) for v in series.dropna().unique().tolist())


def multi_value_set(df: pd.DataFrame, column: str) -> list[str]:
    """Sorted distinct entries of a comma-delimited column across all rows."""
    return individuals(df[column].tolist())


def count_by_type(df: pd.DataFrame) -> dict[str, int]:
    """Rows per exact ``type`` value. Rows with no type are not counted anywhere."""
    counts = df["type"].value_counts(dropna=True).sort_index()
    return {str(t): int(n) for t, n in counts.items()}


def year_buckets(values: pd.Series, start: int, end: int) -> YearSeries:
    """Count of rows per year over [start, end]; years without rows are 0.

    Missing years and years outside the range are not counted.
    """
    years = pd.to_numeric(values, errors="coerce").dropna().astype("int64")
    counts = years.value_counts().reindex(range(start, end + 1), fill_value=0)
    return YearSeries(
        years=[int(y) for y in counts.index],
        counts=[int(c) for c in counts.to_numpy()],
    )


def durations_of(df: pd.DataFrame, kind: DurationKind) -> list[int]:
    """Magnitudes of one duration variant in row order; other/absent rows are skipped."""
    variant = Minutes if kind == DurationKind.MINUTES else Seasons
    return [d.n for d in df["duration_value"].tolist() if isinstance(d, variant)]


def duration_stats(values: list[int]) -> dict:
    """Distribution summary for a list of durations."""
    if not values:
        return {"count": 0, "min": None, "max": None, "mean": None, "median": None, "p90": None}

    arr = np.asarray(values, dtype=float)
    return {
        "count": int(arr.size),
        "min": int(arr.min()),
        "max": int(arr.max()),
        "mean": round(float(arr.mean()), 1),
        "median": float(np.median(arr)),
        "p90": float(np.percentile(arr, 90)),
    }
