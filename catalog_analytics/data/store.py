"""
CatalogStore — In-memory catalog snapshot with a read-only query surface.

Loaded once at startup, queried on every request. A reload builds a complete
new snapshot first and only then swaps it in, so readers always see either
the old catalog or the new one.
"""
from __future__ import annotations

import datetime as dt
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pandas as pd

from catalog_analytics.config import (
    DATA_FILE, STRICT_PARSING, MISSING_ADDED_YEAR,
    MULTI_VALUE_COLUMNS, YEAR_RANGE_START, YEAR_RANGE_END,
)
from catalog_analytics.data.loader import load_raw_table
from catalog_analytics.data.normalize import normalize_catalog
from catalog_analytics.data.schemas import DurationKind, RowDiagnostic, YearSeries
from catalog_analytics.analytics.aggregates import (
    count_by_type,
    distinct_sorted,
    durations_of,
    multi_value_set,
    year_buckets,
)

# load() default meaning "keep the fill year from the previous load"
_KEEP = object()


@dataclass(frozen=True, eq=False)
class CatalogSnapshot:
    """One fully normalized load of the catalog file."""
    df: pd.DataFrame
    source_columns: list[str] = field(default_factory=list)
    source_path: Optional[Path] = None
    loaded_at: Optional[dt.datetime] = None
    diagnostics: list[RowDiagnostic] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "CatalogSnapshot":
        return cls(df=pd.DataFrame())


def build_snapshot(
    path: Path | str,
    strict: bool = STRICT_PARSING,
    missing_added_year: int | None = MISSING_ADDED_YEAR,
) -> CatalogSnapshot:
    """Load and normalize a catalog file. Raises on any ingestion error."""
    path = Path(path)
    raw = load_raw_table(path)
    df, diagnostics = normalize_catalog(raw, strict=strict, missing_added_year=missing_added_year)
    return CatalogSnapshot(
        df=df,
        source_columns=list(raw.columns),
        source_path=path,
        loaded_at=dt.datetime.now(),
        diagnostics=diagnostics,
    )


class CatalogStore:
    """Process-wide catalog with load/reload lifecycle and aggregate queries."""

    def __init__(
        self,
        year_start: int = YEAR_RANGE_START,
        year_end: int = YEAR_RANGE_END,
        path: Path | str | None = None,
    ) -> None:
        self.year_start = year_start
        self.year_end = year_end
        self._snapshot = CatalogSnapshot.empty()
        self._reload_lock = threading.Lock()
        self._path: Optional[Path] = Path(path) if path is not None else None
        self._strict = STRICT_PARSING
        self._missing_added_year = MISSING_ADDED_YEAR
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(
        self,
        path: Path | str | None = None,
        strict: bool | None = None,
        missing_added_year: int | None | object = _KEEP,
    ) -> "CatalogStore":
        """Load the catalog file and replace the current snapshot.

        ``path`` defaults to the last loaded file, then DATA_FILE. Options
        given here stick for later reloads once the load succeeds. On failure
        the exception propagates and the previous snapshot stays. Pass
        ``missing_added_year=None`` to drop a fill year set by an earlier load.
        """
        with self._reload_lock:
            target = Path(path) if path is not None else (self._path or DATA_FILE)
            if strict is None:
                strict = self._strict
            if missing_added_year is _KEEP:
                missing_added_year = self._missing_added_year

            print(f"Loading catalog from {target}...")
            snapshot = build_snapshot(target, strict, missing_added_year)

            for diag in snapshot.diagnostics:
                print(f"  Warning: skipped {diag}")
            if snapshot.diagnostics:
                print(f"  {len(snapshot.diagnostics):,} value(s) left empty")

            self._snapshot = snapshot
            self._path = snapshot.source_path
            self._strict = strict
            self._missing_added_year = missing_added_year
            self._loaded = True
            print(f"  Loaded {len(snapshot.df):,} titles, {len(snapshot.source_columns)} columns")
        return self

    def reload(self, path: Path | str | None = None) -> "CatalogStore":
        """Re-read the last loaded file (or ``path``) with the same options."""
        return self.load(path)

    def pinned(self) -> "CatalogStore":
        """A store fixed to the current snapshot, for reads that span several queries."""
        view = CatalogStore(self.year_start, self.year_end)
        view._snapshot = self._snapshot
        view._path = self._path
        view._loaded = self._loaded
        return view

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    @property
    def df(self) -> pd.DataFrame:
        return self._snapshot.df

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def source_columns(self) -> list[str]:
        return list(self._snapshot.source_columns)

    @property
    def diagnostics(self) -> list[RowDiagnostic]:
        return list(self._snapshot.diagnostics)

    def row_count(self) -> int:
        return len(self._snapshot.df)

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def types(self) -> list[str]:
        df = self._snapshot.df
        if df.empty:
            return []
        return distinct_sorted(df["type"])

    def titles(self) -> list[str]:
        df = self._snapshot.df
        if df.empty:
            return []
        return distinct_sorted(df["title"])

    def individuals(self, column: str) -> list[str]:
        """Distinct entries of a comma-delimited source column."""
        df = self._snapshot.df
        if df.empty:
            return []
        return multi_value_set(df, column)

    def directors(self) -> list[str]:
        return self.individuals(MULTI_VALUE_COLUMNS["directors"])

    def actors(self) -> list[str]:
        return self.individuals(MULTI_VALUE_COLUMNS["actors"])

    def countries(self) -> list[str]:
        return self.individuals(MULTI_VALUE_COLUMNS["countries"])

    def categories(self) -> list[str]:
        return self.individuals(MULTI_VALUE_COLUMNS["categories"])

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def types_count(self) -> dict[str, int]:
        df = self._snapshot.df
        if df.empty:
            return {}
        return count_by_type(df)

    def _per_year(self, column: str) -> YearSeries:
        df = self._snapshot.df
        values = df[column] if not df.empty else pd.Series([], dtype="Int64")
        return year_buckets(values, self.year_start, self.year_end)

    def release_series(self) -> YearSeries:
        return self._per_year("release_year")

    def added_series(self) -> YearSeries:
        return self._per_year("added_year")

    def releases_per_year(self) -> tuple[list[int], list[int]]:
        """(years, counts) of release_year over the configured range."""
        return self.release_series().as_tuple()

    def added_per_year(self) -> tuple[list[int], list[int]]:
        """(years, counts) of the year each title was added."""
        return self.added_series().as_tuple()

    def durations_movies(self) -> list[int]:
        df = self._snapshot.df
        if df.empty:
            return []
        return durations_of(df, DurationKind.MINUTES)

    def durations_shows(self) -> list[int]:
        df = self._snapshot.df
        if df.empty:
            return []
        return durations_of(df, DurationKind.SEASONS)
