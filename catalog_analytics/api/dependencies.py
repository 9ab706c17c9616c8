"""
FastAPI dependencies — CatalogStore singleton.
"""
from __future__ import annotations

from fastapi import HTTPException

from catalog_analytics.data.store import CatalogStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: CatalogStore | None = None


def set_store(store: CatalogStore | None) -> None:
    global _store
    _store = store


def get_store() -> CatalogStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Catalog not loaded yet")
    return _store


def get_store_or_empty() -> CatalogStore:
    """Return the store even if nothing is loaded (for health/reload endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store
