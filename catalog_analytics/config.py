"""
Catalog Analytics — Configuration: paths, columns, year range, parsing policy.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with CATALOG_DATA_FILE env var for deployment
# ---------------------------------------------------------------------------
DATA_FILE = Path(os.environ.get("CATALOG_DATA_FILE", str(Path("data") / "netflix_titles.csv")))

# ---------------------------------------------------------------------------
# Source columns (fixed header, no inference)
# ---------------------------------------------------------------------------
REQUIRED_COLUMNS = [
    "type",
    "title",
    "director",
    "cast",
    "country",
    "date_added",
    "release_year",
    "duration",
    "listed_in",
]

# Query name → source column holding comma-delimited values
MULTI_VALUE_COLUMNS = {
    "directors": "director",
    "actors": "cast",
    "countries": "country",
    "categories": "listed_in",
}
MULTI_VALUE_DELIMITER = ","

# ---------------------------------------------------------------------------
# Year buckets (inclusive on both ends)
# ---------------------------------------------------------------------------
YEAR_RANGE_START = 1925
YEAR_RANGE_END = 2021

# ---------------------------------------------------------------------------
# Parsing policy
#   strict: a malformed date/duration/release year aborts the whole load
#   lenient: the field is left absent and a per-row diagnostic is recorded
# ---------------------------------------------------------------------------
STRICT_PARSING = os.environ.get("CATALOG_STRICT", "1").strip().lower() not in {"0", "false", "no", "off"}

# Deterministic fill for a missing date_added. None = leave added_year absent.
_missing_added = os.environ.get("CATALOG_MISSING_ADDED_YEAR", "").strip()
MISSING_ADDED_YEAR = int(_missing_added) if _missing_added else None

# ---------------------------------------------------------------------------
# Date / duration vocabulary
# ---------------------------------------------------------------------------
MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
}

MINUTES_SUFFIX = "min"
SEASONS_SUFFIXES = ("seasons", "season")

# ---------------------------------------------------------------------------
# Type labels used by the summary
# ---------------------------------------------------------------------------
MOVIE_TYPE = "Movie"
SHOW_TYPE = "TV Show"
