"""
Ingestion error taxonomy.

Every error raised while loading aborts the load; the store keeps whatever
snapshot it held before.
"""
from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base class for catalog ingestion failures."""


class LoadError(CatalogError):
    """The file could not be opened, decoded, or tokenized."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load {self.path}: {reason}")


class SchemaError(CatalogError):
    """One or more required columns are missing from the header."""

    def __init__(self, path: Path | str, missing: list[str]) -> None:
        self.path = Path(path)
        self.missing = list(missing)
        super().__init__(f"{self.path} is missing required column(s): {', '.join(self.missing)}")


class RowError(CatalogError):
    """A single field value failed to parse.

    ``row`` is the 0-based data row (header excluded).
    """

    kind = "value"

    def __init__(self, row: int | None, column: str, text: object, detail: str = "") -> None:
        self.row = row
        self.column = column
        self.text = text
        self.detail = detail
        where = f"row {row}, column '{column}'" if row is not None else f"column '{column}'"
        msg = f"Unrecognized {self.kind} at {where}: {text!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)

    def at(self, row: int) -> "RowError":
        """Return a copy of this error pinned to a row."""
        return type(self)(row, self.column, self.text, self.detail)


class DateFormatError(RowError):
    """date_added text is not "<Month> <day>, <year>"."""

    kind = "date"


class ParseError(RowError):
    """duration (or release_year) text has an unrecognized shape."""
