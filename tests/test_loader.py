"""Dataset loader: header skip, positional columns, lenient numbers, fatal structural errors."""

import logging
import os

import pytest

from sales_api.config import COLUMNS
from sales_api.data.loader import DatasetLoadError, load_dataset
from tests.conftest import HEADER, SAMPLE_ROWS, write_csv


def test_loads_rows_in_file_order(sample_csv):
    df = load_dataset(sample_csv)
    assert len(df) == len(SAMPLE_ROWS)
    assert list(df.columns) == COLUMNS
    assert df["item_code"].tolist()[:3] == ["100009", "100024", "1001"]


def test_header_is_discarded_unread(tmp_path):
    path = write_csv(tmp_path / "odd_header.csv", SAMPLE_ROWS[:2], header="a,b,c,d,e,f,g,h,i")
    df = load_dataset(path)
    assert len(df) == 2
    assert df.iloc[0]["supplier"] == "REPUBLIC NATIONAL DISTRIBUTING CO"


def test_typed_fields(sample_csv):
    row = load_dataset(sample_csv).iloc[3]
    assert row["year"] == 2020
    assert row["month"] == 1
    assert row["item_type"] == "LIQUOR"
    assert row["retail_sales"] == pytest.approx(6.41)
    assert row["retail_transfers"] == pytest.approx(4.0)
    assert row["warehouse_sales"] == pytest.approx(0.0)


def test_non_numeric_sales_becomes_zero_not_dropped(tmp_path):
    path = write_csv(tmp_path / "bad_sales.csv", [
        "2020,1,PWSWN INC,100024,MOMENT DE PLAISIR - 750ML,WINE,1.5,1,4",
        "2020,1,PWSWN INC,100025,OTHER - 750ML,WINE,not-a-number,2,3",
    ])
    df = load_dataset(path, strict=False)
    assert len(df) == 2
    assert df.iloc[1]["retail_sales"] == 0
    assert df.iloc[1]["retail_transfers"] == pytest.approx(2.0)
    assert df.iloc[0]["retail_sales"] == pytest.approx(1.5)


def test_non_numeric_year_and_month_become_zero(tmp_path):
    path = write_csv(tmp_path / "bad_period.csv", ["YEAR?,Jan,S,1,D,WINE,1,1,1"])
    row = load_dataset(path, strict=False).iloc[0]
    assert row["year"] == 0
    assert row["month"] == 0


def test_fallbacks_are_logged(tmp_path, caplog):
    path = write_csv(tmp_path / "bad.csv", ["2020,1,S,1,D,WINE,x,y,1"])
    with caplog.at_level(logging.WARNING, logger="sales_api.data.loader"):
        load_dataset(path, strict=False)
    assert "2 numeric field(s)" in caplog.text


def test_strict_mode_rejects_malformed_number(tmp_path):
    path = write_csv(tmp_path / "bad.csv", [SAMPLE_ROWS[0], "2020,1,S,1,D,WINE,x,0,0"])
    with pytest.raises(DatasetLoadError) as exc_info:
        load_dataset(path, strict=True)
    assert "retail_sales" in str(exc_info.value)
    assert "row 2" in str(exc_info.value)


def test_strings_kept_verbatim(tmp_path):
    path = write_csv(tmp_path / "spaces.csv", ['2020,1, PADDED SUPPLIER ,"CODE,1",,WINE ,1,1,1'])
    row = load_dataset(path).iloc[0]
    assert row["supplier"] == " PADDED SUPPLIER "
    assert row["item_code"] == "CODE,1"
    assert row["item_description"] == ""
    assert row["item_type"] == "WINE "


def test_na_like_strings_are_not_converted(tmp_path):
    path = write_csv(tmp_path / "na.csv", ["2020,1,NA,N/A,null,NaN,1,1,1"])
    row = load_dataset(path).iloc[0]
    assert row["supplier"] == "NA"
    assert row["item_code"] == "N/A"
    assert row["item_description"] == "null"
    assert row["item_type"] == "NaN"


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(DatasetLoadError) as exc_info:
        load_dataset(tmp_path / "missing.csv")
    assert exc_info.value.path == tmp_path / "missing.csv"


def test_directory_is_fatal(tmp_path):
    with pytest.raises(DatasetLoadError):
        load_dataset(tmp_path)


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs non-root POSIX permissions")
def test_unreadable_file_is_fatal(sample_csv):
    sample_csv.chmod(0)
    try:
        with pytest.raises(DatasetLoadError):
            load_dataset(sample_csv)
    finally:
        sample_csv.chmod(0o644)


def test_row_with_extra_fields_is_fatal(tmp_path):
    path = write_csv(tmp_path / "wide.csv", [SAMPLE_ROWS[0], SAMPLE_ROWS[1] + ",EXTRA"])
    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_row_with_missing_fields_is_fatal(tmp_path):
    path = write_csv(tmp_path / "short.csv", [SAMPLE_ROWS[0], "2020,1,S"])
    with pytest.raises(DatasetLoadError) as exc_info:
        load_dataset(path)
    assert "line 3: expected 9 fields, found 3" in str(exc_info.value)


def test_header_with_wrong_field_count_is_fatal(tmp_path):
    path = write_csv(tmp_path / "short_header.csv", SAMPLE_ROWS[:1], header="YEAR,MONTH")
    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_unterminated_quote_is_fatal(tmp_path):
    path = write_csv(tmp_path / "quote.csv", ['2020,1,"OPEN QUOTE,1,D,WINE,1,1,1'])
    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_wrong_field_count_is_fatal(tmp_path):
    path = write_csv(tmp_path / "narrow.csv", ["2020,1,S,1,D,WINE,1", "2020,1,S,1,D,WINE,1"])
    with pytest.raises(DatasetLoadError) as exc_info:
        load_dataset(path)
    assert "expected 9 fields" in str(exc_info.value)


def test_invalid_utf8_is_fatal(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes((HEADER + "\n2020,1,CAF\xc9,1,D,WINE,1,1,1\n").encode("latin-1"))
    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_header_only_file_loads_empty(tmp_path):
    path = write_csv(tmp_path / "header_only.csv", [])
    df = load_dataset(path)
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_empty_file_loads_empty(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    assert load_dataset(path).empty


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text(HEADER + "\n" + SAMPLE_ROWS[0] + "\n\n" + SAMPLE_ROWS[1] + "\n")
    assert len(load_dataset(path)) == 2


def test_leading_blank_lines_before_header_are_skipped(tmp_path):
    path = tmp_path / "leading_blank.csv"
    path.write_text("\n\n" + HEADER + "\n" + SAMPLE_ROWS[0] + "\n" + SAMPLE_ROWS[1] + "\n")
    df = load_dataset(path)
    assert len(df) == 2
    assert df.iloc[0]["supplier"] == "REPUBLIC NATIONAL DISTRIBUTING CO"
    assert df.iloc[0]["year"] == 2020
