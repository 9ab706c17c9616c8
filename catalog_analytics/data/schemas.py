"""
Typed values produced by normalization: duration variant, diagnostics, year series.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union


class DurationKind(str, Enum):
    MINUTES = "minutes"
    SEASONS = "seasons"


@dataclass(frozen=True)
class Minutes:
    """Runtime of a single title, in minutes."""
    n: int
    kind: ClassVar[DurationKind] = DurationKind.MINUTES


@dataclass(frozen=True)
class Seasons:
    """Length of a series, in seasons."""
    n: int
    kind: ClassVar[DurationKind] = DurationKind.SEASONS


Duration = Union[Minutes, Seasons]


@dataclass(frozen=True)
class RowDiagnostic:
    """A value that was left absent instead of aborting a lenient load."""
    row: int
    column: str
    text: str
    message: str

    def __str__(self) -> str:
        return f"row {self.row}, column '{self.column}': {self.text!r} ({self.message})"


@dataclass(frozen=True)
class YearSeries:
    """Zero-filled counts per year, positionally aligned with ``years``."""
    years: list[int] = field(default_factory=list)
    counts: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts)

    def peak(self) -> Optional[int]:
        """Year with the highest count (earliest on ties), None when all zero."""
        if not self.counts or max(self.counts) == 0:
            return None
        return self.years[self.counts.index(max(self.counts))]

    def as_tuple(self) -> tuple[list[int], list[int]]:
        return self.years, self.counts

    def as_dict(self) -> dict:
        return {"years": self.years, "counts": self.counts, "total": self.total}
