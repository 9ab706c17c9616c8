"""Catalog loading, normalization, and typed values."""
from .loader import load_raw_table
from .schemas import DurationKind, Minutes, Seasons, RowDiagnostic, YearSeries
from .normalize import parse_added_year, parse_duration, split_multi_value, individuals, normalize_catalog
