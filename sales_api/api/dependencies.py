"""
FastAPI dependencies — store/query service lookup, lenient pagination parsing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Query, Request

from sales_api.config import DEFAULT_LIMIT, DEFAULT_OFFSET
from sales_api.data.normalize import parse_scalar_int
from sales_api.data.query import QueryService
from sales_api.data.store import DataStore


# ---------------------------------------------------------------------------
# Store / service (attached to app.state by the app factory)
# ---------------------------------------------------------------------------

def get_store(request: Request) -> DataStore:
    store: DataStore | None = getattr(request.app.state, "store", None)
    if store is None or not store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return store


def get_query_service(request: Request) -> QueryService:
    service: QueryService | None = getattr(request.app.state, "query_service", None)
    if service is None:
        service = QueryService(get_store(request))
        request.app.state.query_service = service
    return service


# ---------------------------------------------------------------------------
# Pagination parsing from query params
# ---------------------------------------------------------------------------

@dataclass
class Pagination:
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT


def parse_pagination(
    limit: Optional[str] = Query(None, description=f"Page size (default {DEFAULT_LIMIT})"),
    offset: Optional[str] = Query(None, description=f"Rows to skip (default {DEFAULT_OFFSET})"),
) -> Pagination:
    """Parse limit/offset as text so malformed values fall back to defaults instead of a 422."""
    return Pagination(
        offset=parse_scalar_int(offset, DEFAULT_OFFSET),
        limit=parse_scalar_int(limit, DEFAULT_LIMIT),
    )
