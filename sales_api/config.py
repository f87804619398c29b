"""
Sales API — Configuration: data file, parsing policy, pagination defaults, logging.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with SALES_DATA_FILE env var for deployment
# ---------------------------------------------------------------------------
DATA_FILE = Path(os.environ.get("SALES_DATA_FILE", "data/Warehouse_and_Retail_Sales.csv"))

# ---------------------------------------------------------------------------
# Positional column layout of the source CSV (header row is discarded)
# ---------------------------------------------------------------------------
COLUMNS = [
    "year",
    "month",
    "supplier",
    "item_code",
    "item_description",
    "item_type",
    "retail_sales",
    "retail_transfers",
    "warehouse_sales",
]

INT_COLS = ["year", "month"]
FLOAT_COLS = ["retail_sales", "retail_transfers", "warehouse_sales"]
STRING_COLS = ["supplier", "item_code", "item_description", "item_type"]

# ---------------------------------------------------------------------------
# Numeric parsing policy
# Lenient (default): malformed numbers become 0.
# Strict: the first malformed number aborts the load.
# ---------------------------------------------------------------------------
STRICT_PARSING = os.environ.get("SALES_STRICT_PARSING", "").strip().lower() in {"1", "true", "yes"}

# ---------------------------------------------------------------------------
# Pagination defaults
# ---------------------------------------------------------------------------
DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("SALES_LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("SALES_LOG_FORMAT", "text")
