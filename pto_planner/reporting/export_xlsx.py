# pto_planner/reporting/export_xlsx.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd


def _write_sheets(target: Union[str, BinaryIO], vacation_df: pd.DataFrame, accrual_df: pd.DataFrame, summary_df: pd.DataFrame) -> None:
    with pd.ExcelWriter(target, engine="openpyxl") as w:
        vacation_df.to_excel(w, sheet_name="result", index=False)
        accrual_df.to_excel(w, sheet_name="accruals", index=False)
        summary_df.to_excel(w, sheet_name="summary", index=False)


def export_result_xlsx(
    out_path: str,
    vacation_df: pd.DataFrame,
    accrual_df: pd.DataFrame,
    summary_df: pd.DataFrame,
) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    _write_sheets(out_path, vacation_df, accrual_df, summary_df)
    return out_path


def export_result_bytes(vacation_df: pd.DataFrame, accrual_df: pd.DataFrame, summary_df: pd.DataFrame) -> bytes:
    """In-memory workbook (download button)"""
    buf = BytesIO()
    _write_sheets(buf, vacation_df, accrual_df, summary_df)
    return buf.getvalue()
