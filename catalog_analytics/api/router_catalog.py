"""
Catalog endpoints — distinct values, type counts, per-year series, durations, summary.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from catalog_analytics.data.store import CatalogStore
from catalog_analytics.data.schemas import DurationKind
from catalog_analytics.analytics.aggregates import duration_stats
from catalog_analytics.analytics.summary import catalog_summary
from catalog_analytics.api.dependencies import get_store
from catalog_analytics.api.response_models import (
    ValuesResponse, TypesCountResponse, YearSeriesResponse, DurationsResponse,
)

router = APIRouter(prefix="/api", tags=["catalog"])


def _values(values: list[str]) -> ValuesResponse:
    return ValuesResponse(values=values, count=len(values))


@router.get("/types", response_model=ValuesResponse)
def list_types(store: CatalogStore = Depends(get_store)):
    return _values(store.types())


@router.get("/types/count", response_model=TypesCountResponse)
def types_count(store: CatalogStore = Depends(get_store)):
    counts = store.types_count()
    return TypesCountResponse(counts=counts, total=sum(counts.values()))


@router.get("/titles", response_model=ValuesResponse)
def list_titles(store: CatalogStore = Depends(get_store)):
    return _values(store.titles())


@router.get("/durations/{kind}", response_model=DurationsResponse)
def durations(kind: str, store: CatalogStore = Depends(get_store)):
    if kind == "movies":
        values, dk = store.durations_movies(), DurationKind.MINUTES
    elif kind == "shows":
        values, dk = store.durations_shows(), DurationKind.SEASONS
    else:
        raise HTTPException(404, f"Unknown duration kind: {kind} (movies|shows)")
    return DurationsResponse(kind=dk.value, values=values, stats=duration_stats(values))


@router.get("/releases-per-year", response_model=YearSeriesResponse)
def releases_per_year(store: CatalogStore = Depends(get_store)):
    return YearSeriesResponse(**store.release_series().as_dict())


@router.get("/added-per-year", response_model=YearSeriesResponse)
def added_per_year(store: CatalogStore = Depends(get_store)):
    return YearSeriesResponse(**store.added_series().as_dict())


@router.get("/summary")
def summary(store: CatalogStore = Depends(get_store)):
    """Headline numbers for the catalog overview."""
    return JSONResponse(content=catalog_summary(store))


@router.get("/directors", response_model=ValuesResponse)
def list_directors(store: CatalogStore = Depends(get_store)):
    return _values(store.directors())


@router.get("/actors", response_model=ValuesResponse)
def list_actors(store: CatalogStore = Depends(get_store)):
    return _values(store.actors())


@router.get("/countries", response_model=ValuesResponse)
def list_countries(store: CatalogStore = Depends(get_store)):
    return _values(store.countries())


@router.get("/categories", response_model=ValuesResponse)
def list_categories(store: CatalogStore = Depends(get_store)):
    return _values(store.categories())
