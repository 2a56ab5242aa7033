# pto_planner/reporting/report.py
from __future__ import annotations

import pandas as pd

from pto_planner.config import AppConfig
from pto_planner.domain.models import PtoSettings, SimulationResult

VACATION_COLUMNS = ["Vacation", "Start", "End", "Days", "Hours", "Status", "Balance before", "Balance after"]
ACCRUAL_COLUMNS = ["date", "hours", "balance", "during_vacation"]


def build_vacation_table(result: SimulationResult, cfg: AppConfig) -> pd.DataFrame:
    rc = cfg.report
    rows = []
    for o in result.outcomes:
        v = o.vacation
        rows.append({
            "Vacation": v.label(rc.unnamed_label),
            "Start": v.start.isoformat(),
            "End": v.end.isoformat(),
            "Days": o.chargeable_days,
            "Hours": o.chargeable_hours,
            "Status": rc.affordable_mark if o.affordable else rc.unaffordable_mark,
            "Balance before": round(o.balance_before, rc.balance_decimals),
            "Balance after": round(o.balance_after, rc.balance_decimals),
        })
    # keep the column order even with no rows
    return pd.DataFrame(rows, columns=VACATION_COLUMNS)


def build_accrual_table(result: SimulationResult) -> pd.DataFrame:
    rows = [
        dict(date=e.day.isoformat(), hours=e.hours, balance=e.balance, during_vacation=e.during_vacation)
        for e in result.accruals
    ]
    return pd.DataFrame(rows, columns=ACCRUAL_COLUMNS)


def build_summary(result: SimulationResult, settings: PtoSettings) -> pd.DataFrame:
    return pd.DataFrame([dict(
        today=result.today.isoformat(),
        pto_bank=settings.bank,
        weekly_accrual=settings.weekly_rate,
        holidays=len(settings.holidays),
        vacations=len(result.outcomes),
        affordable=result.affordable_count,
        final_balance=result.final_balance,
    )])


def format_table(df: pd.DataFrame) -> str:
    """Plain-text table for the console"""
    if df.empty:
        return "(no rows)"
    return df.to_string(index=False)
