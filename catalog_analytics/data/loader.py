"""
Raw catalog CSV loading and header validation.
"""
from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from catalog_analytics.config import REQUIRED_COLUMNS
from catalog_analytics.errors import LoadError, SchemaError


def _check_columns(path: Path, columns: list[str], required: list[str]) -> None:
    missing = [c for c in required if c not in columns]
    if missing:
        raise SchemaError(path, missing)


def _check_row_widths(path: Path) -> None:
    """Every record must have exactly as many fields as the header.

    pandas pads short rows with NaN and shifts wide ones into the index, so
    the field count is checked on the raw records first.
    """
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return
        width = len(header)
        for record in reader:
            if not record:
                continue
            if len(record) != width:
                raise LoadError(
                    path,
                    f"malformed row at line {reader.line_num}: "
                    f"expected {width} fields, saw {len(record)}",
                )


def load_raw_table(filepath: Path | str, required: list[str] | None = None) -> pd.DataFrame:
    """Read the whole catalog file into a DataFrame, one row per title.

    Every column is read as text. Only empty cells come back as NaN; literal
    text such as "NA" or "None" is kept. Row order is the file order and the
    index is a plain 0..n-1 range. A row with more or fewer fields than the
    header is a fatal LoadError, never a silent skip.
    """
    if required is None:
        required = REQUIRED_COLUMNS
    filepath = Path(filepath)

    if not filepath.is_file():
        raise LoadError(filepath, "file not found")

    try:
        _check_row_widths(filepath)
        df = pd.read_csv(
            filepath,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            na_values=[""],
            on_bad_lines="error",
        )
    except pd.errors.EmptyDataError:
        # No header at all, so every required column is missing
        raise SchemaError(filepath, required)
    except (pd.errors.ParserError, csv.Error) as exc:
        raise LoadError(filepath, f"malformed row: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LoadError(filepath, f"not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise LoadError(filepath, str(exc)) from exc

    df.columns = [str(c).strip() for c in df.columns]
    _check_columns(filepath, list(df.columns), required)

    return df.reset_index(drop=True)
