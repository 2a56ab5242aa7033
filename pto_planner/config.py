# pto_planner/config.py
from dataclasses import dataclass
from datetime import date, datetime

from dateutil import tz


@dataclass(frozen=True)
class ReportConfig:
    affordable_mark: str = "✓"
    unaffordable_mark: str = "✗"
    unnamed_label: str = "Unnamed"
    balance_decimals: int = 2


@dataclass(frozen=True)
class AppConfig:
    # settings file (rate / bank / holidays)
    default_config_file: str = "config.toml"

    # "today" is resolved in this zone; empty = local zone
    timezone_name: str = ""

    report: ReportConfig = ReportConfig()


DEFAULT_CONFIG = AppConfig()


def local_today(cfg: AppConfig) -> date:
    # empty zone name -> local zone
    zone = tz.gettz(cfg.timezone_name or None)
    return datetime.now(tz=zone).date()
