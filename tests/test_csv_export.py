import csv

from fakes import make_project

from sheet_viewports.config import Config
from sheet_viewports.csv_export import export_mapping_to_csv, get_mapping_csv_header, mapping_result_to_rows
from sheet_viewports.debug import Logger
from sheet_viewports.pipeline import process_sheets


def _result():
    doc, _ = make_project()
    return process_sheets(doc, Config())


def test_rows_one_per_placed_view(fake_db):
    rows = mapping_result_to_rows(_result(), date_override="2024-01-01")
    assert len(rows) == 3

    header = get_mapping_csv_header()
    first = dict(zip(header, rows[0]))
    assert first["Date"] == "2024-01-01"
    assert first["SheetNumber"] == "A101"
    assert first["ViewId"] == 100
    assert first["ViewportId"] == 500
    assert first["Strategy"] == "name_filter"
    assert first["NumCandidates"] == 2
    assert first["Resolved"] is True


def test_export_appends_and_writes_header_once(fake_db, tmp_path):
    result = _result()
    logger = Logger(enabled=False)

    info1 = export_mapping_to_csv(result, str(tmp_path), logger=logger, date_override="2024-01-01")
    info2 = export_mapping_to_csv(result, str(tmp_path), logger=logger, date_override="2024-01-01")

    assert info1["rows_exported"] == 3
    assert info1["csv_path"] == info2["csv_path"]
    assert info1["csv_path"].endswith("sheet_viewports_2024-01-01.csv")

    with open(info1["csv_path"], newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == get_mapping_csv_header()
    assert len(rows) == 1 + 6
    assert any("appended 3 row(s)" in line for line in logger.dump())


def test_export_creates_missing_directory(fake_db, tmp_path):
    out = tmp_path / "nested" / "out"
    info = export_mapping_to_csv(_result(), str(out), date_override="2024-01-02")
    assert out.is_dir()
    assert info["rows_exported"] == 3


def test_export_empty_result_writes_nothing(tmp_path):
    info = export_mapping_to_csv({"sheets": []}, str(tmp_path), date_override="2024-01-03")
    assert info["rows_exported"] == 0
    assert not (tmp_path / "sheet_viewports_2024-01-03.csv").exists()
