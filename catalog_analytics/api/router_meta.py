"""
Meta endpoints: health, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from catalog_analytics.data.store import CatalogStore
from catalog_analytics.errors import CatalogError
from catalog_analytics.api.dependencies import get_store_or_empty
from catalog_analytics.api.response_models import HealthResponse, ReloadResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: CatalogStore = Depends(get_store_or_empty)):
    snap = store.snapshot
    return HealthResponse(
        status="ok" if store.is_loaded else "empty",
        loaded=store.is_loaded,
        rows=len(snap.df),
        columns=list(snap.source_columns),
        diagnostics=len(snap.diagnostics),
        source=str(snap.source_path) if snap.source_path else None,
    )


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: CatalogStore = Depends(get_store_or_empty)):
    """Re-read the catalog file.

    Runs in the request thread; a failed reload leaves the current catalog
    in place and reports the offending row/column.
    """
    try:
        store.reload()
    except CatalogError as exc:
        print(f"  Reload failed: {exc}")
        raise HTTPException(422, str(exc))

    snap = store.snapshot
    return ReloadResponse(
        status="reloaded",
        rows=len(snap.df),
        diagnostics=[str(d) for d in snap.diagnostics],
    )
