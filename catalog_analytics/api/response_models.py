"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int
    columns: list[str]
    diagnostics: int
    source: Optional[str] = None


class ValuesResponse(BaseModel):
    values: list[str]
    count: int


class TypesCountResponse(BaseModel):
    counts: dict[str, int]
    total: int


class YearSeriesResponse(BaseModel):
    years: list[int]
    counts: list[int]
    total: int


class DurationsResponse(BaseModel):
    kind: str
    values: list[int]
    stats: dict[str, Any]


class ReloadResponse(BaseModel):
    status: str
    rows: int
    diagnostics: list[str]
