import os

from conftest import make_records
from config.constants import EXPORT_COLUMNS
from data_pipeline import build_city_report as report_module
from eda import export_city_dataset as export_module

CSV_HEADER = (
    "city,date,pm2_5,pm10,no2,so2,co,o3,temperature,humidity,density,"
    "admissions,asthma,copd,bronchitis"
)


def test_csv_header_and_rows(small_df):
    lines = export_module.dataset_to_csv(small_df).split("\n")

    assert lines[0] == CSV_HEADER
    assert len(lines) == len(small_df) + 1
    assert lines[1].split(",")[0] == "Testville"
    assert lines[1].split(",")[1] == "2019-01-01"
    assert len(lines[1].split(",")) == len(EXPORT_COLUMNS)


def test_csv_writes_air_density_as_density(small_df):
    lines = export_module.dataset_to_csv(small_df).split("\n")
    density_idx = EXPORT_COLUMNS.index("density")
    assert lines[1].split(",")[density_idx] == "1.2"


def test_csv_of_empty_dataset_is_header_only():
    assert export_module.dataset_to_csv([]) == CSV_HEADER


def test_export_city_dataset_writes_file(tmp_path, monkeypatch, small_df):
    monkeypatch.setattr(export_module, "generate_city_dataset", lambda selection: small_df)

    path = export_module.export_city_dataset("All Cities", folder=str(tmp_path))

    assert os.path.basename(path) == "All_Cities_merged.csv"
    with open(path, encoding="utf-8") as f:
        content = f.read()
    assert content.startswith(CSV_HEADER)
    assert content.count("\n") == len(small_df)


def test_export_skips_empty_dataset(tmp_path, monkeypatch):
    monkeypatch.setattr(export_module, "generate_city_dataset", lambda selection: make_records([], []))

    assert export_module.export_city_dataset("Nowhere", folder=str(tmp_path)) is None
    assert os.listdir(tmp_path) == []


def test_export_real_city(tmp_path, delhi_df):
    path = export_module.export_city_dataset("Delhi", folder=str(tmp_path))
    with open(path, encoding="utf-8") as f:
        lines = f.read().split("\n")
    assert len(lines) == len(delhi_df) + 1
    assert lines[1].startswith("Delhi,2019-01-01,")


def test_city_report_text():
    report = report_module.build_city_report("Kolkata")
    lines = report.split("\n")

    assert lines[0] == "# Air Quality & Public Health — Kolkata"
    assert lines[1] == "**Date range:** 2019-01-01 to 2024-12-31"
    assert lines[3] == "## Summary of findings (automatically generated)"
    assert len(lines) == 7


def test_write_city_report(tmp_path):
    path = report_module.write_city_report("New Delhi", folder=str(tmp_path))
    assert os.path.basename(path) == "New_Delhi_auto_report.md"
    with open(path, encoding="utf-8") as f:
        assert f.read() == report_module.build_city_report("New Delhi")


def test_presentation_bullets():
    bullets = report_module.get_presentation_bullets("Pune")
    assert len(bullets) == 6
    assert bullets[0].startswith("1. Motivation")
    assert "Pune" in bullets[0]
    assert [b.split(".")[0] for b in bullets] == ["1", "2", "3", "4", "5", "6"]
