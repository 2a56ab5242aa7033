# pto_planner/io_layer/xlsx_reader.py
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import FrozenSet, List
from zipfile import BadZipFile

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.datetime import from_excel
from openpyxl.utils.exceptions import InvalidFileException

from pto_planner.domain.models import Vacation
from pto_planner.io_layer.errors import InputError

_UNREADABLE = (BadZipFile, InvalidFileException, KeyError, OSError, ValueError)


def _sheet_names(path: str) -> List[str]:
    if not Path(path).exists():
        raise InputError(f"File not found: {path}")
    try:
        wb = load_workbook(path, read_only=True)
    except _UNREADABLE as e:
        raise InputError(f"{path} is not a readable xlsx: {e}") from e
    try:
        return list(wb.sheetnames)
    finally:
        wb.close()


def _read_sheet(path: str, sheet_name: str) -> pd.DataFrame:
    try:
        df = pd.read_excel(path, sheet_name=sheet_name, engine="openpyxl")
    except _UNREADABLE as e:
        raise InputError(f"{path}:{sheet_name} is not a readable sheet: {e}") from e
    df.columns = [str(c).strip().lower() for c in df.columns]
    return df


def _cell_date(value, where: str) -> date:
    # unformatted date cells come through as Excel serial numbers
    if pd.api.types.is_number(value) and not pd.api.types.is_bool(value):
        if pd.isna(value):
            raise InputError(f"{where}: date is empty")
        try:
            return from_excel(float(value)).date()
        except (ValueError, OverflowError) as e:
            raise InputError(f"{where}: unsupported date serial {value!r}") from e
    try:
        ts = pd.to_datetime(value)
    except (ValueError, TypeError) as e:
        raise InputError(f"{where}: unsupported date {value!r}") from e
    if pd.isna(ts):
        raise InputError(f"{where}: date is empty")
    return ts.date()


def read_schedule_xlsx(path: str, sheet_name: str) -> List[Vacation]:
    """
    Sheet columns (header row): start, end, name (optional)
    Blank rows are skipped.
    """
    if sheet_name not in _sheet_names(path):
        raise InputError(f"{path} has no '{sheet_name}' sheet")

    df = _read_sheet(path, sheet_name)
    for c in ("start", "end"):
        if c not in df.columns:
            raise InputError(f"{path}:{sheet_name} has no column {c}")

    out: List[Vacation] = []
    for idx, row in df.iterrows():
        if pd.isna(row["start"]) and pd.isna(row["end"]):
            continue
        where = f"{path}:{sheet_name} row {int(idx) + 2}"
        name = None
        if "name" in df.columns and pd.notna(row.get("name")):
            name = str(row["name"]).strip() or None
        out.append(Vacation(
            start=_cell_date(row["start"], where),
            end=_cell_date(row["end"], where),
            name=name,
        ))
    return out


def read_holidays_xlsx(path: str, sheet_name: str) -> FrozenSet[date]:
    """Optional sheet with a 'date' column; missing sheet = no extra holidays"""
    if sheet_name not in _sheet_names(path):
        return frozenset()

    df = _read_sheet(path, sheet_name)
    if "date" not in df.columns:
        raise InputError(f"{path}:{sheet_name} has no column date")

    return frozenset(
        _cell_date(v, f"{path}:{sheet_name} row {int(i) + 2}")
        for i, v in df["date"].items()
        if pd.notna(v)
    )
