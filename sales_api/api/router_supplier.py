"""
Supplier endpoint: records for one supplier, paginated.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sales_api.api.dependencies import Pagination, get_query_service, parse_pagination
from sales_api.api.response_models import FilteredPageResponse
from sales_api.data.query import QueryService

router = APIRouter(prefix="/supplier", tags=["supplier"])


# ":path" so encoded slashes (%2F) in supplier names still reach this route
@router.get("/{supplier:path}", response_model=FilteredPageResponse)
def items_by_supplier(
    supplier: str,
    page: Pagination = Depends(parse_pagination),
    service: QueryService = Depends(get_query_service),
):
    """Records whose supplier exactly equals the URL-decoded path segment."""
    return service.filter_by_supplier(supplier, page.offset, page.limit).to_dict()
