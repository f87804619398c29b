"""
DataStore — In-memory sales records backed by pandas.

Loaded once at startup, read (never written) on every request. The store is
constructed explicitly and handed to the app, so tests can build one from a
synthetic DataFrame with ``DataStore.from_frame``.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path

import pandas as pd

from sales_api.config import COLUMNS, DATA_FILE, STRICT_PARSING
from sales_api.data.loader import load_dataset


class DataStore:
    """Immutable, file-ordered sales records with exact-match accessors."""

    def __init__(self) -> None:
        self.df: pd.DataFrame = pd.DataFrame(columns=COLUMNS)
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: Path = DATA_FILE, strict: bool = STRICT_PARSING) -> "DataStore":
        """Load the data file. Raises ``DatasetLoadError`` on any failure.

        Meant to be called once; a store that is already loaded refuses to
        reload so request handlers never see the table change.
        """
        if self._loaded:
            raise RuntimeError("DataStore is already loaded")
        self._set_frame(load_dataset(path, strict=strict))
        return self

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "DataStore":
        """Build a loaded store from an already-typed DataFrame."""
        store = cls()
        store._set_frame(df[COLUMNS].reset_index(drop=True))
        return store

    def _set_frame(self, df: pd.DataFrame) -> None:
        self.df = df
        self._loaded = True

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Row access
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.df)

    def all_records(self) -> pd.DataFrame:
        """The full table in file order."""
        return self.df

    def where_equals(self, column: str, value: str) -> pd.DataFrame:
        """Rows whose ``column`` is exactly ``value`` (case-sensitive), file order kept."""
        if column not in self.df.columns:
            raise KeyError(f"Unknown column: {column}")
        return self.df[self.df[column] == value]

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def item_types(self) -> list[str]:
        """Distinct item types sorted alphabetically."""
        if self.df.empty:
            return []
        return sorted(self.df["item_type"].unique().tolist())

    def suppliers(self) -> list[str]:
        """Distinct supplier names sorted alphabetically."""
        if self.df.empty:
            return []
        return sorted(self.df["supplier"].unique().tolist())

    def periods_available(self) -> list[dict]:
        """Return list of {year, month, label} dicts for months with data."""
        if self.df.empty:
            return []
        ym = self.df[["year", "month"]].drop_duplicates().sort_values(["year", "month"])
        result = []
        for _, row in ym.iterrows():
            y, m = int(row["year"]), int(row["month"])
            try:
                label = f"{dt.date(y, m, 1):%B %Y}"
            except ValueError:
                # Zero-filled or out-of-range year/month from lenient parsing
                label = f"{y}-{m:02d}"
            result.append({"year": y, "month": m, "label": label})
        return result
