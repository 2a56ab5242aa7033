from datetime import date

from openpyxl import load_workbook

from pto_planner.config import DEFAULT_CONFIG
from pto_planner.domain.models import PtoSettings, Vacation
from pto_planner.reporting.export_xlsx import export_result_bytes, export_result_xlsx
from pto_planner.reporting.report import (
    VACATION_COLUMNS,
    build_accrual_table,
    build_summary,
    build_vacation_table,
    format_table,
)
from pto_planner.simulation.accrual import simulate_settings

TODAY = date(2024, 1, 1)
SETTINGS = PtoSettings(bank=0, weekly_rate=16)
VACATIONS = [
    Vacation(date(2024, 1, 15), date(2024, 1, 19), "Ski trip"),
    Vacation(date(2024, 1, 22), date(2024, 1, 22)),
]


def _result():
    return simulate_settings(TODAY, SETTINGS, VACATIONS)


def test_vacation_table():
    df = build_vacation_table(_result(), DEFAULT_CONFIG)

    assert list(df.columns) == VACATION_COLUMNS
    assert df["Vacation"].tolist() == ["Ski trip", "Unnamed"]
    assert df["Start"].tolist() == ["2024-01-15", "2024-01-22"]
    assert df["Days"].tolist() == [5, 1]
    assert df["Hours"].tolist() == [40, 8]
    # 32 < 40, then 48 >= 8
    assert df["Status"].tolist() == ["✗", "✓"]
    assert df["Balance after"].tolist() == [32, 40]


def test_empty_tables_keep_columns():
    result = simulate_settings(TODAY, SETTINGS, [])

    assert list(build_vacation_table(result, DEFAULT_CONFIG).columns) == VACATION_COLUMNS
    assert build_accrual_table(result).empty
    assert format_table(build_vacation_table(result, DEFAULT_CONFIG)) == "(no rows)"


def test_accrual_table():
    df = build_accrual_table(_result())

    assert df["date"].tolist() == ["2024-01-07", "2024-01-14", "2024-01-21"]
    assert df["balance"].tolist() == [16, 32, 48]
    assert not df["during_vacation"].any()


def test_summary():
    row = build_summary(_result(), SETTINGS).iloc[0]

    assert row["vacations"] == 2
    assert row["affordable"] == 1
    assert row["final_balance"] == 40


def test_format_table_has_header():
    text = format_table(build_vacation_table(_result(), DEFAULT_CONFIG))
    assert text.splitlines()[0].split()[:2] == ["Vacation", "Start"]
    assert "Ski trip" in text


def test_export_result_xlsx(tmp_path):
    result = _result()
    out = export_result_xlsx(
        str(tmp_path / "out" / "result.xlsx"),
        build_vacation_table(result, DEFAULT_CONFIG),
        build_accrual_table(result),
        build_summary(result, SETTINGS),
    )
    wb = load_workbook(out)

    assert wb.sheetnames == ["result", "accruals", "summary"]
    assert wb["result"]["A2"].value == "Ski trip"


def test_export_result_bytes_is_a_workbook():
    result = _result()
    data = export_result_bytes(
        build_vacation_table(result, DEFAULT_CONFIG),
        build_accrual_table(result),
        build_summary(result, SETTINGS),
    )
    # xlsx is a zip archive
    assert data[:2] == b"PK"
