# pto_planner/io_layer/toml_reader.py
from __future__ import annotations

import tomllib
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from dateutil import parser as date_parser

from pto_planner.domain.models import Vacation
from pto_planner.io_layer.errors import InputError


@dataclass(frozen=True)
class ConfigFile:
    """Contents of config.toml; rate/bank may be left to the command line"""
    weekly_rate: Optional[float]
    bank: Optional[float]
    holidays: FrozenSet[date]


def _load_toml(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise InputError(f"File not found: {path}")
    try:
        with p.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise InputError(f"{path} is not valid TOML: {e}") from e


def _to_date(value: Any, where: str) -> date:
    """TOML local date / datetime, or an ISO string"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date_parser.isoparse(value.strip()).date()
        except ValueError as e:
            raise InputError(f"{where}: unsupported date {value!r}") from e
    raise InputError(f"{where}: expected a date, got {type(value).__name__}")


def _optional_hours(doc: Dict[str, Any], key: str, path: str) -> Optional[float]:
    v = doc.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise InputError(f"{path}: {key} must be a number of hours, got {v!r}")
    return float(v)


def read_config(path: str) -> ConfigFile:
    """
    Expected keys (all optional except holidays):
        ptoHoursPerWeek = 6.15
        ptoBank = 40.0
        holidays = [2024-01-01, ...]
    """
    doc = _load_toml(path)

    raw_holidays = doc.get("holidays")
    if raw_holidays is None:
        raise InputError(f"{path}: 'holidays' list is required (may be empty)")
    if not isinstance(raw_holidays, list):
        raise InputError(f"{path}: 'holidays' must be a list of dates")

    holidays = frozenset(_to_date(h, f"{path}: holidays[{i}]") for i, h in enumerate(raw_holidays))

    return ConfigFile(
        weekly_rate=_optional_hours(doc, "ptoHoursPerWeek", path),
        bank=_optional_hours(doc, "ptoBank", path),
        holidays=holidays,
    )


def read_schedule(path: str) -> List[Vacation]:
    """
    [[vacations]]
    start = 2024-01-15
    end = 2024-01-19
    name = "Ski trip"   # optional
    """
    doc = _load_toml(path)

    entries = doc.get("vacations", [])
    if not isinstance(entries, list):
        raise InputError(f"{path}: 'vacations' must be an array of tables")

    out: List[Vacation] = []
    for i, entry in enumerate(entries):
        where = f"{path}: vacations[{i}]"
        if not isinstance(entry, dict):
            raise InputError(f"{where} is not a table")
        for key in ("start", "end"):
            if key not in entry:
                raise InputError(f"{where} has no '{key}'")
        name = entry.get("name")
        if name is not None and not isinstance(name, str):
            raise InputError(f"{where}: name must be a string")
        out.append(Vacation(
            start=_to_date(entry["start"], f"{where}.start"),
            end=_to_date(entry["end"], f"{where}.end"),
            name=name,
        ))
    return out
