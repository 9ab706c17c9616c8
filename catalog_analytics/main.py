"""
Catalog Analytics — FastAPI app factory with startup catalog loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_analytics.config import DATA_FILE, STRICT_PARSING
from catalog_analytics.data.store import CatalogStore
from catalog_analytics.errors import CatalogError
from catalog_analytics.api.dependencies import set_store
from catalog_analytics.api.router_meta import router as meta_router
from catalog_analytics.api.router_catalog import router as catalog_router


def create_app(data_file: Path | str | None = None, strict: bool = STRICT_PARSING) -> FastAPI:
    source = Path(data_file) if data_file is not None else DATA_FILE

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the catalog at startup."""
        print(f"  CATALOG_DATA_FILE = {source}")
        print(f"  exists = {source.exists()}")

        store = CatalogStore(path=source)
        app.state.store = store
        set_store(store)
        try:
            store.load(strict=strict)
        except CatalogError as exc:
            # Keep serving: /api/health reports empty, queries return 503
            print(f"\n  Catalog load failed: {exc}\n")
        else:
            print(f"\nCatalog ready — {store.row_count():,} titles, "
                  f"{len(store.types())} types, {len(store.countries())} countries\n")
        yield
        set_store(None)

    app = FastAPI(
        title="Catalog Analytics API",
        description="Title catalog ingestion — typed titles, per-year counts, durations",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(catalog_router)

    return app


app = create_app()
