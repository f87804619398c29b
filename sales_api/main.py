"""
Sales API — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sales_api import __version__
from sales_api.config import DATA_FILE, LOG_FORMAT, LOG_LEVEL, STRICT_PARSING
from sales_api.data.query import QueryService
from sales_api.data.store import DataStore
from sales_api.observability import setup_logging
from sales_api.api.router_items import router as items_router
from sales_api.api.router_supplier import router as supplier_router
from sales_api.api.router_meta import router as meta_router

logger = logging.getLogger(__name__)


def attach_store(app: FastAPI, store: DataStore) -> None:
    """Hand a loaded store to the app; request handlers only read it."""
    app.state.store = store
    app.state.query_service = QueryService(store)


def create_app(
    store: Optional[DataStore] = None,
    data_file: Path = DATA_FILE,
    strict: bool = STRICT_PARSING,
) -> FastAPI:
    """Build the app. With ``store`` given, startup skips loading the data file."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the dataset once before serving; a load failure aborts startup."""
        setup_logging(LOG_LEVEL, LOG_FORMAT)
        if getattr(app.state, "store", None) is None:
            logger.info("Loading sales data from %s (strict=%s)", data_file, strict)
            attach_store(app, DataStore().load(data_file, strict=strict))

        loaded: DataStore = app.state.store
        logger.info(
            "Sales API ready: %d records, %d item types, %d suppliers",
            loaded.row_count(), len(loaded.item_types()), len(loaded.suppliers()),
        )
        yield

    app = FastAPI(
        title="Warehouse & Retail Sales API",
        description="Read-only, paginated access to monthly warehouse and retail sales records",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(items_router)
    app.include_router(supplier_router)
    app.include_router(meta_router)

    if store is not None:
        attach_store(app, store)

    return app


app = create_app()
