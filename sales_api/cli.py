#!/usr/bin/env python3
"""
Sales API CLI — API server plus offline access to the same queries.

USAGE:
  python -m sales_api.cli serve                                # Start API server
  python -m sales_api.cli serve --port 8080 --reload

  python -m sales_api.cli items --limit 5 --offset 20          # Same as GET /items
  python -m sales_api.cli type WINE --limit 5                  # Same as GET /items/type?type=WINE
  python -m sales_api.cli supplier "PWSWN INC"                 # Same as GET /supplier/PWSWN%20INC

  python -m sales_api.cli items --file other.csv --strict      # Different data file, strict parsing
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from sales_api.config import DATA_FILE, DEFAULT_LIMIT, DEFAULT_OFFSET, LOG_FORMAT, LOG_LEVEL, STRICT_PARSING
from sales_api.data.loader import DatasetLoadError
from sales_api.data.query import Page, QueryService
from sales_api.data.store import DataStore
from sales_api.observability import setup_logging

logger = logging.getLogger(__name__)


def _service(args) -> QueryService:
    store = DataStore().load(Path(args.file), strict=args.strict)
    return QueryService(store)


def _print_page(page: Page) -> None:
    json.dump(page.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")


def cmd_items(args):
    """Print one page of all records."""
    _print_page(_service(args).list_all(args.offset, args.limit))


def cmd_type(args):
    """Print one page of records of a single item type."""
    _print_page(_service(args).filter_by_category(args.item_type, args.offset, args.limit))


def cmd_supplier(args):
    """Print one page of records from a single supplier."""
    _print_page(_service(args).filter_by_supplier(args.supplier, args.offset, args.limit))


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    logger.info("Starting Sales API on port %d", args.port)
    if args.reload:
        # The reloader re-imports the app in a child process, so settings go through env
        os.environ["SALES_DATA_FILE"] = str(args.file)
        os.environ["SALES_STRICT_PARSING"] = "1" if args.strict else ""
        uvicorn.run("sales_api.main:app", host="0.0.0.0", port=args.port, reload=True,
                    timeout_keep_alive=65)
        return

    from sales_api.main import create_app
    uvicorn.run(create_app(data_file=Path(args.file), strict=args.strict),
                host="0.0.0.0", port=args.port, timeout_keep_alive=65)


def _add_query_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help=f"Page size (default {DEFAULT_LIMIT})")
    p.add_argument("--offset", type=int, default=DEFAULT_OFFSET, help=f"Rows to skip (default {DEFAULT_OFFSET})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Warehouse & Retail Sales API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--file", default=str(DATA_FILE), help=f"Data file (default {DATA_FILE})")
    parser.add_argument("--strict", action="store_true", default=STRICT_PARSING,
                        help="Reject the file on malformed numbers instead of using 0")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # items subcommand
    items_parser = subparsers.add_parser("items", help="List records")
    _add_query_args(items_parser)
    items_parser.set_defaults(func=cmd_items)

    # type subcommand
    type_parser = subparsers.add_parser("type", help="Records of one item type")
    type_parser.add_argument("item_type", help="Exact item type, e.g. WINE")
    _add_query_args(type_parser)
    type_parser.set_defaults(func=cmd_type)

    # supplier subcommand
    supplier_parser = subparsers.add_parser("supplier", help="Records from one supplier")
    supplier_parser.add_argument("supplier", help="Exact supplier name")
    _add_query_args(supplier_parser)
    supplier_parser.set_defaults(func=cmd_supplier)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8080")), help="Port (default 8080)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    setup_logging(LOG_LEVEL, LOG_FORMAT)
    try:
        args.func(args)
    except DatasetLoadError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
