"""
Meta endpoints: health, item types, suppliers, periods.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sales_api.data.store import DataStore
from sales_api.api.dependencies import get_store
from sales_api.api.response_models import (
    HealthResponse, ItemTypesResponse, SuppliersResponse, PeriodsResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store)):
    return HealthResponse(
        status="ok",
        records=store.row_count(),
        item_types=len(store.item_types()),
        suppliers=len(store.suppliers()),
    )


@router.get("/item-types", response_model=ItemTypesResponse)
def list_item_types(store: DataStore = Depends(get_store)):
    return ItemTypesResponse(item_types=store.item_types())


@router.get("/suppliers", response_model=SuppliersResponse)
def list_suppliers(store: DataStore = Depends(get_store)):
    suppliers = store.suppliers()
    return SuppliersResponse(suppliers=suppliers, count=len(suppliers))


@router.get("/periods", response_model=PeriodsResponse)
def list_periods(store: DataStore = Depends(get_store)):
    return PeriodsResponse(periods=store.periods_available())
