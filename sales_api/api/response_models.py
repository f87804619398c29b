"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from pydantic import BaseModel


class Item(BaseModel):
    year: int
    month: int
    supplier: str
    item_code: str
    item_description: str
    item_type: str
    retail_sales: float
    retail_transfers: float
    warehouse_sales: float


class PageResponse(BaseModel):
    status: str
    timestamp: str
    count: int
    total: int
    offset: int
    limit: int
    data: list[Item]


class FilteredPageResponse(PageResponse):
    message: str


class HealthResponse(BaseModel):
    status: str
    records: int
    item_types: int
    suppliers: int


class ItemTypesResponse(BaseModel):
    item_types: list[str]


class SuppliersResponse(BaseModel):
    suppliers: list[str]
    count: int


class PeriodsResponse(BaseModel):
    periods: list[dict]
