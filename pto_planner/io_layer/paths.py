# pto_planner/io_layer/paths.py
from dataclasses import dataclass


@dataclass(frozen=True)
class InputPaths:
    """
    config_file: settings TOML (ptoHoursPerWeek / ptoBank / holidays)
    schedule_file: vacation schedule (.toml with [[vacations]], or .xlsx)
    """
    config_file: str
    schedule_file: str

    # xlsx sheet names (change here only)
    vacation_sheet_name: str = "vacations"
    holiday_sheet_name: str = "holidays"
