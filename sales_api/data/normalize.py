"""
Numeric parsing policy for raw CSV text columns.

Every numeric conversion in the loader goes through ``parse_or_default`` so the
fallback-to-zero behaviour lives in one place. ``strict=True`` turns a
malformed value into a ``MalformedValue`` error instead.
"""
from __future__ import annotations

import re

import numpy as np
import pandas as pd

# Optional sign followed by ASCII digits, nothing else (no whitespace, no decimals)
_INT_RE = r"[+-]?[0-9]+"


class MalformedValue(ValueError):
    """A numeric field could not be parsed under strict parsing."""

    def __init__(self, column: str, row: int, value: str):
        self.column = column
        self.row = row
        self.value = value
        super().__init__(f"row {row}: column '{column}' has non-numeric value {value!r}")


_INT64_LIMIT = 2 ** 63


def _to_int(text: str):
    value = int(text)
    return value if -_INT64_LIMIT <= value < _INT64_LIMIT else None


def _int_values(raw: pd.Series) -> tuple[pd.Series, pd.Series]:
    ok = raw.str.fullmatch(_INT_RE, na=False)
    # Python ints keep every digit; a float64 detour would round above 2**53
    values = raw.where(ok).map(_to_int, na_action="ignore")
    ok = ok & values.notna()
    return values, ok


def _float_values(raw: pd.Series) -> tuple[pd.Series, pd.Series]:
    values = pd.to_numeric(raw, errors="coerce")
    # Blank fields, padded text, NaN and infinities are not usable numbers
    padded = raw.str.contains(r"^\s|\s$", regex=True, na=False)
    ok = values.notna() & ~padded & np.isfinite(values.astype("float64"))
    return values.where(ok), ok


def parse_or_default(
    raw: pd.Series,
    kind: str,
    column: str = "",
    default: float = 0,
    strict: bool = False,
) -> tuple[pd.Series, int]:
    """Parse a text column as ``"int"`` or ``"float"``.

    Returns the parsed Series and the number of values that fell back to
    ``default``. Row numbers in strict-mode errors are 1-based data rows.
    """
    if kind == "int":
        values, ok = _int_values(raw)
    elif kind == "float":
        values, ok = _float_values(raw)
    else:
        raise ValueError(f"Unknown numeric kind: {kind}")

    bad = ~ok
    fallbacks = int(bad.sum())
    if strict and fallbacks:
        first = int(np.flatnonzero(bad.to_numpy())[0])
        raise MalformedValue(column, first + 1, raw.iloc[first])

    values = values.where(ok, default)
    if kind == "int":
        return values.astype("int64"), fallbacks
    return values.astype("float64"), fallbacks


def parse_scalar_int(value: str | None, default: int) -> int:
    """Single-value counterpart of ``parse_or_default`` for query parameters."""
    if value is None or not re.fullmatch(_INT_RE, value):
        return default
    parsed = int(value)
    if not -_INT64_LIMIT <= parsed < _INT64_LIMIT:
        return default
    return parsed
