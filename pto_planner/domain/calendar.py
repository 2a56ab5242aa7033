# pto_planner/domain/calendar.py
from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, Iterator, List

from pto_planner.domain.models import Vacation

SATURDAY = 5
SUNDAY = 6
HOURS_PER_DAY = 8

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


def is_chargeable_workday(day: date, holidays: AbstractSet[date]) -> bool:
    """Weekday that is not a holiday"""
    if day.weekday() in (SATURDAY, SUNDAY):
        return False
    return day not in holidays


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day in [start, end]; nothing if start > end"""
    d = start
    while d <= end:
        yield d
        d += ONE_DAY


def chargeable_days(vacation: Vacation, holidays: AbstractSet[date]) -> int:
    return sum(1 for d in iter_days(vacation.start, vacation.end) if is_chargeable_workday(d, holidays))


def chargeable_hours(days: int, hours_per_day: int = HOURS_PER_DAY) -> int:
    # truncate toward zero, never round
    return int(days * hours_per_day)


def next_accrual_boundary(day: date) -> date:
    """
    Next Sunday strictly after `day`.
    A Sunday maps to the following Sunday: that week's credit is already applied
    once the cursor sits on it. Equivalent to stepping day by day from day+1.
    """
    return day + timedelta(days=(SUNDAY - day.weekday()) % 7 or 7)


def sundays_between(start: date, end: date) -> List[date]:
    """Calendar Sundays inside [start, end]"""
    return [d for d in iter_days(start, end) if d.weekday() == SUNDAY]
