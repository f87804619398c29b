"""
Query service — paginated listing and exact-match filters over a DataStore.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd

from sales_api.config import DEFAULT_LIMIT, DEFAULT_OFFSET
from sales_api.data.store import DataStore


def paginate(data: pd.DataFrame, offset: int, limit: int) -> pd.DataFrame:
    """Return rows [start, end) of ``data`` where

    start = min(offset, N) and end = min(start + limit, N).

    Never raises for out-of-range values: an offset past the end gives an
    empty slice. Negative offset/limit are treated as 0.
    """
    n = len(data)
    start = min(max(offset, 0), n)
    end = min(start + max(limit, 0), n)
    return data.iloc[start:end]


def _native(value):
    """numpy scalar -> Python scalar, for JSON."""
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass
class Page:
    """One page of records plus the metadata sent with it."""
    data: pd.DataFrame
    total: int
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT
    message: Optional[str] = None
    status: str = "success"
    timestamp: dt.datetime = field(default_factory=lambda: dt.datetime.now().astimezone())

    @property
    def count(self) -> int:
        return len(self.data)

    def records(self) -> list[dict]:
        """Rows as plain dicts with native Python values."""
        return [
            {k: _native(v) for k, v in row.items()}
            for row in self.data.to_dict(orient="records")
        ]

    def to_dict(self) -> dict:
        out = {
            "status": self.status,
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "count": self.count,
            "total": self.total,
            "offset": self.offset,
            "limit": self.limit,
        }
        if self.message is not None:
            out["message"] = self.message
        out["data"] = self.records()
        return out


class QueryService:
    """Read-only queries over one loaded DataStore."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def list_all(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> Page:
        df = self.store.all_records()
        return Page(data=paginate(df, offset, limit), total=len(df), offset=offset, limit=limit)

    def filter_by_category(
        self, category: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT,
    ) -> Page:
        matched = self.store.where_equals("item_type", category)
        return Page(
            data=paginate(matched, offset, limit),
            total=len(matched),
            offset=offset,
            limit=limit,
            message=f"Found {len(matched)} items of type {category}",
        )

    def filter_by_supplier(
        self, supplier: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT,
    ) -> Page:
        matched = self.store.where_equals("supplier", supplier)
        return Page(
            data=paginate(matched, offset, limit),
            total=len(matched),
            offset=offset,
            limit=limit,
            message=f"Found {len(matched)} items from supplier {supplier}",
        )
