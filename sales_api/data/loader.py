"""
CSV loading: one delimited file with a header row, nine positional columns.
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path

import pandas as pd

from sales_api.config import COLUMNS, FLOAT_COLS, INT_COLS, STRICT_PARSING
from sales_api.data.normalize import MalformedValue, parse_or_default

logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """The data file could not be opened or is not a well-formed CSV."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {path}: {reason}")


def _empty_frame() -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype=object) for col in COLUMNS})


# ---------------------------------------------------------------------------
# Raw read
# ---------------------------------------------------------------------------

def _read_raw(filepath: Path) -> pd.DataFrame:
    """Read every data row as verbatim text, header skipped, columns by position.

    Blank lines are skipped everywhere, including before the header. Every
    record, header included, must carry exactly one field per column.
    """
    width = len(COLUMNS)
    rows = []
    try:
        with open(filepath, newline="", encoding="utf-8") as fh:
            reader = csv.reader(fh, strict=True)
            header_seen = False
            for record in reader:
                if not record:
                    continue
                if len(record) != width:
                    raise DatasetLoadError(
                        filepath,
                        f"line {reader.line_num}: expected {width} fields, found {len(record)}",
                    )
                if header_seen:
                    rows.append(record)
                header_seen = True
    except csv.Error as exc:
        raise DatasetLoadError(filepath, f"malformed CSV ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise DatasetLoadError(filepath, f"not valid UTF-8 text ({exc})") from exc
    except OSError as exc:
        raise DatasetLoadError(filepath, exc.strerror or str(exc)) from exc

    if not rows:
        # Empty or header-only file: nothing to serve, but nothing broken either
        return _empty_frame()
    return pd.DataFrame(rows, columns=COLUMNS, dtype=object)


# ---------------------------------------------------------------------------
# Typed dataset
# ---------------------------------------------------------------------------

def load_dataset(filepath: Path, strict: bool = STRICT_PARSING) -> pd.DataFrame:
    """Load the sales CSV into a typed, file-ordered DataFrame.

    The header row is discarded unread; columns are assigned by position.
    Numeric fields that do not parse become 0 (or raise under ``strict``).
    String fields are kept exactly as written.
    """
    filepath = Path(filepath)
    if filepath.is_dir():
        raise DatasetLoadError(filepath, "is a directory")

    df = _read_raw(filepath)

    total_fallbacks = 0
    try:
        for col in INT_COLS:
            df[col], n = parse_or_default(df[col], "int", column=col, strict=strict)
            total_fallbacks += n
        for col in FLOAT_COLS:
            df[col], n = parse_or_default(df[col], "float", column=col, strict=strict)
            total_fallbacks += n
    except MalformedValue as exc:
        raise DatasetLoadError(filepath, str(exc)) from exc

    df = df.reset_index(drop=True)

    logger.info("Loaded %d records from %s", len(df), filepath,
                extra={"path": str(filepath), "records": len(df)})
    if total_fallbacks:
        logger.warning("%d numeric field(s) could not be parsed and were set to 0",
                       total_fallbacks, extra={"fallbacks": total_fallbacks})
    return df
