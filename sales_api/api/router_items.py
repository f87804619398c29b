"""
Item endpoints: full listing and filter-by-type, both paginated.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from sales_api.api.dependencies import Pagination, get_query_service, parse_pagination
from sales_api.api.response_models import FilteredPageResponse, PageResponse
from sales_api.data.query import QueryService

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=PageResponse)
def list_items(
    page: Pagination = Depends(parse_pagination),
    service: QueryService = Depends(get_query_service),
):
    """All records in file order."""
    return service.list_all(page.offset, page.limit).to_dict()


@router.get("/type", response_model=FilteredPageResponse)
def items_by_type(
    item_type: str = Query("", alias="type", description="Exact item type, e.g. WINE"),
    page: Pagination = Depends(parse_pagination),
    service: QueryService = Depends(get_query_service),
):
    """Records whose item type exactly equals ``type``."""
    return service.filter_by_category(item_type, page.offset, page.limit).to_dict()
