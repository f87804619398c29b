"""Shared fixtures: synthetic sales CSVs, loaded stores, and API clients."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sales_api.data.store import DataStore
from sales_api.main import create_app

HEADER = "YEAR,MONTH,SUPPLIER,ITEM CODE,ITEM DESCRIPTION,ITEM TYPE,RETAIL SALES,RETAIL TRANSFERS,WAREHOUSE SALES"

SAMPLE_ROWS = [
    "2020,1,REPUBLIC NATIONAL DISTRIBUTING CO,100009,BOOTLEG RED - 750ML,WINE,0,0,2",
    "2020,1,PWSWN INC,100024,MOMENT DE PLAISIR - 750ML,WINE,0,1,4",
    "2020,1,RELIABLE CHURCHILL LLLP,1001,S SMITH ORGANIC PEAR CIDER - 18.7OZ,BEER,0,0,1",
    "2020,1,JIM BEAM BRANDS CO,10103,KNOB CREEK BOURBON 9YR - 100P - 375ML,LIQUOR,6.41,4,0",
    "2020,2,PWSWN INC,100024,MOMENT DE PLAISIR - 750ML,WINE,1.2,0,3",
    "2020,2,E & J GALLO WINERY,101979,BAREFOOT BUBBLY PINK MOSCATO - 750ML,WINE,2.1,2,8",
    "2020,2,A/B IMPORTS,5555,HOUSE RED - 750ML,wine,1,1,1",
    "2020,2,,BC,BEER CREDIT,REF,0,0,-1",
]


def write_csv(path: Path, rows, header: str = HEADER) -> Path:
    lines = [header] + list(rows) if header is not None else list(rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def wine_row(i: int) -> str:
    return f"2020,{i % 12 + 1},SUPPLIER {i % 3},{1000 + i},ITEM {i},WINE,{i}.5,1,2"


def beer_row(i: int) -> str:
    return f"2021,{i % 12 + 1},SUPPLIER {i % 3},{2000 + i},BEER {i},BEER,{i},0,0"


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    return write_csv(tmp_path / "sales.csv", SAMPLE_ROWS)


@pytest.fixture
def sample_store(sample_csv) -> DataStore:
    return DataStore().load(sample_csv, strict=False)


@pytest.fixture
def client(sample_store) -> TestClient:
    return TestClient(create_app(store=sample_store))


@pytest.fixture
def store_89(tmp_path) -> DataStore:
    """89 records: 34 WINE then 55 BEER."""
    rows = [wine_row(i) for i in range(34)] + [beer_row(i) for i in range(55)]
    return DataStore().load(write_csv(tmp_path / "sales_89.csv", rows), strict=False)


@pytest.fixture
def client_89(store_89) -> TestClient:
    return TestClient(create_app(store=store_89))
