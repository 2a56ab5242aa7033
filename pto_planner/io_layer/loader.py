# pto_planner/io_layer/loader.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import FrozenSet, List, Optional

from pto_planner.domain.models import PtoSettings, Vacation
from pto_planner.io_layer.errors import InputError
from pto_planner.io_layer.paths import InputPaths
from pto_planner.io_layer.toml_reader import read_config, read_schedule
from pto_planner.io_layer.xlsx_reader import read_holidays_xlsx, read_schedule_xlsx


@dataclass(frozen=True)
class LoadedSchedule:
    vacations: List[Vacation]
    extra_holidays: FrozenSet[date] = frozenset()   # from an xlsx 'holidays' sheet


def load_schedule(paths: InputPaths) -> LoadedSchedule:
    suffix = Path(paths.schedule_file).suffix.lower()
    if suffix == ".toml":
        return LoadedSchedule(vacations=read_schedule(paths.schedule_file))
    if suffix in (".xlsx", ".xlsm"):
        return LoadedSchedule(
            vacations=read_schedule_xlsx(paths.schedule_file, paths.vacation_sheet_name),
            extra_holidays=read_holidays_xlsx(paths.schedule_file, paths.holiday_sheet_name),
        )
    raise InputError(f"Unsupported schedule format (expected .toml or .xlsx): {paths.schedule_file}")


def load_settings(
    paths: InputPaths,
    bank: Optional[float] = None,
    weekly_rate: Optional[float] = None,
    extra_holidays: FrozenSet[date] = frozenset(),
) -> PtoSettings:
    """Command-line values win over config.toml; a value missing from both is an error"""
    cfg_file = read_config(paths.config_file)

    if weekly_rate is None:
        weekly_rate = cfg_file.weekly_rate
    if weekly_rate is None:
        raise InputError("Missing accrual rate (ptoHoursPerWeek in config or --accrual)")
    if bank is None:
        bank = cfg_file.bank
    if bank is None:
        raise InputError("Missing banked PTO value (ptoBank in config or --bank)")

    return PtoSettings(
        bank=float(bank),
        weekly_rate=float(weekly_rate),
        holidays=cfg_file.holidays | extra_holidays,
    )
