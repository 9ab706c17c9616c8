"""
Field normalization: date_added → added year, duration → Minutes/Seasons,
release_year → integer, comma-delimited text → canonical value sets.
"""
from __future__ import annotations

import datetime as dt
import re
from typing import Callable, Iterable, Optional

import pandas as pd

from catalog_analytics.config import (
    MONTHS, MINUTES_SUFFIX, SEASONS_SUFFIXES, MULTI_VALUE_DELIMITER,
)
from catalog_analytics.data.schemas import Duration, Minutes, Seasons, RowDiagnostic
from catalog_analytics.errors import DateFormatError, ParseError, RowError


_DATE_RE = re.compile(r"([A-Za-z]+)\s+(\d{1,2}),\s*(\d{4})", re.ASCII)
_COUNT_RE = re.compile(r"\d+", re.ASCII)


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return bool(pd.isna(value))


# ---------------------------------------------------------------------------
# Single-value parsers
# ---------------------------------------------------------------------------

def parse_added_year(text: object) -> Optional[int]:
    """Year from "September 24, 2021"; the month and day are validated then dropped."""
    if _is_missing(text):
        return None
    s = str(text).strip()

    m = _DATE_RE.fullmatch(s)
    if not m:
        raise DateFormatError(None, "date_added", text, 'expected "<Month> <day>, <year>"')

    month = MONTHS.get(m.group(1).lower())
    if month is None:
        raise DateFormatError(None, "date_added", text, f"unknown month '{m.group(1)}'")

    day, year = int(m.group(2)), int(m.group(3))
    if not 1 <= day <= 31:
        raise DateFormatError(None, "date_added", text, f"day {day} out of range")
    try:
        dt.date(year, month, day)
    except ValueError as exc:
        raise DateFormatError(None, "date_added", text, str(exc)) from None

    return year


def parse_duration(text: object) -> Optional[Duration]:
    """"90 min" → Minutes(90); "1 Season" / "3 Seasons" → Seasons(n)."""
    if _is_missing(text):
        return None
    s = str(text).strip().lower()

    if s.endswith(MINUTES_SUFFIX):
        count, variant = s[: -len(MINUTES_SUFFIX)], Minutes
    else:
        for suffix in SEASONS_SUFFIXES:
            if s.endswith(suffix):
                count, variant = s[: -len(suffix)], Seasons
                break
        else:
            raise ParseError(None, "duration", text, "expected a 'min', 'season' or 'seasons' suffix")

    count = count.strip()
    if not _COUNT_RE.fullmatch(count):
        raise ParseError(None, "duration", text, "no leading count")
    return variant(int(count))


def parse_release_year(text: object) -> Optional[int]:
    if _is_missing(text):
        return None
    s = str(text).strip()
    if not _COUNT_RE.fullmatch(s):
        raise ParseError(None, "release_year", text, "not an integer year")
    return int(s)


def split_multi_value(text: object, delimiter: str = MULTI_VALUE_DELIMITER) -> list[str]:
    """Entries of one delimited cell, trimmed. Missing cells and empty parts yield nothing."""
    if _is_missing(text):
        return []
    s = str(text)
    if delimiter in s:
        parts = [p.strip() for p in s.split(delimiter)]
    else:
        parts = [s.strip()]
    return [p for p in parts if p]


def individuals(values: Iterable[object], delimiter: str = MULTI_VALUE_DELIMITER) -> list[str]:
    """Union of the entries of every cell, deduplicated and sorted."""
    found: set[str] = set()
    for v in values:
        found.update(split_multi_value(v, delimiter))
    return sorted(found)


# ---------------------------------------------------------------------------
# Column normalization
# ---------------------------------------------------------------------------

def _parse_column(
    series: pd.Series,
    parser: Callable[[object], object],
    strict: bool,
    diagnostics: list[RowDiagnostic] | None,
) -> list:
    """Apply ``parser`` to each cell, pinning any failure to its row.

    Strict: the first failure is raised. Lenient: the cell becomes None and
    a RowDiagnostic is appended.
    """
    out = []
    for row, value in enumerate(series.tolist()):
        try:
            out.append(parser(value))
        except RowError as exc:
            if strict:
                raise exc.at(row) from None
            if diagnostics is not None:
                diagnostics.append(RowDiagnostic(row, exc.column, str(value), exc.detail or str(exc)))
            out.append(None)
    return out


def normalize_date_added(
    series: pd.Series,
    strict: bool = True,
    missing_added_year: int | None = None,
    diagnostics: list[RowDiagnostic] | None = None,
) -> pd.Series:
    """Nullable-int added year per row.

    A missing date stays missing unless ``missing_added_year`` is given, in
    which case that fixed year is used. Malformed dates are never filled.
    """
    years = _parse_column(series, parse_added_year, strict, diagnostics)
    if missing_added_year is not None:
        was_missing = [_is_missing(v) for v in series.tolist()]
        years = [missing_added_year if gap else y for y, gap in zip(years, was_missing)]
    return pd.Series(pd.array(years, dtype="Int64"), index=series.index, name="added_year")


def normalize_durations(
    series: pd.Series,
    strict: bool = True,
    diagnostics: list[RowDiagnostic] | None = None,
) -> pd.Series:
    """Object column of Minutes / Seasons / None."""
    values = _parse_column(series, parse_duration, strict, diagnostics)
    return pd.Series(values, index=series.index, dtype=object, name="duration_value")


def normalize_release_year(
    series: pd.Series,
    strict: bool = True,
    diagnostics: list[RowDiagnostic] | None = None,
) -> pd.Series:
    values = _parse_column(series, parse_release_year, strict, diagnostics)
    return pd.Series(pd.array(values, dtype="Int64"), index=series.index, name="release_year")


def normalize_catalog(
    raw: pd.DataFrame,
    strict: bool = True,
    missing_added_year: int | None = None,
) -> tuple[pd.DataFrame, list[RowDiagnostic]]:
    """Typed copy of the raw table plus any lenient-mode diagnostics.

    Adds ``added_year`` and ``duration_value``; converts ``release_year``.
    Never drops rows.
    """
    diagnostics: list[RowDiagnostic] = []
    df = raw.copy()

    for col in ["type", "title"]:
        stripped = df[col].str.strip()
        df[col] = stripped.mask(stripped == "")

    df["release_year"] = normalize_release_year(raw["release_year"], strict, diagnostics)
    df["added_year"] = normalize_date_added(raw["date_added"], strict, missing_added_year, diagnostics)
    df["duration_value"] = normalize_durations(raw["duration"], strict, diagnostics)

    return df, diagnostics
