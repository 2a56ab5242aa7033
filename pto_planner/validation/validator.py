# pto_planner/validation/validator.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import AbstractSet, List, Sequence

from pto_planner.domain.calendar import SATURDAY, SUNDAY
from pto_planner.domain.models import PtoSettings, Vacation


@dataclass(frozen=True)
class ValidationError(Exception):
    message: str


@dataclass(frozen=True)
class ValidationWarning:
    message: str


def validate_settings(settings: PtoSettings) -> List[ValidationWarning]:
    warnings: List[ValidationWarning] = []

    for label, value in (("PTO bank", settings.bank), ("PTO accrual", settings.weekly_rate)):
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
            raise ValidationError(f"{label} must be a finite number of hours: {value!r}")
        if value < 0:
            warnings.append(ValidationWarning(f"{label} is negative: {value} hours"))

    return warnings


def validate_vacations(vacations: Sequence[Vacation]) -> List[ValidationWarning]:
    warnings: List[ValidationWarning] = []

    # reversed ranges would silently count zero days
    for v in vacations:
        if v.end < v.start:
            raise ValidationError(f"Vacation {v.label()} ends before it starts: {v.start} > {v.end}")

    ordered = sorted(vacations, key=lambda v: v.sort_key())
    # compare against the vacation reaching furthest so far, not just the neighbour
    reach = ordered[0] if ordered else None
    for cur in ordered[1:]:
        prev = reach
        if (prev.start, prev.end) == (cur.start, cur.end):
            warnings.append(ValidationWarning(
                f"Duplicate vacation dates {cur.start}..{cur.end}: {prev.label()} / {cur.label()}"
            ))
        elif cur.start <= prev.end:
            # overlapping days are charged twice
            warnings.append(ValidationWarning(
                f"Vacations overlap: {prev.label()} ({prev.start}..{prev.end}) and {cur.label()} ({cur.start}..{cur.end})"
            ))
        if cur.end > reach.end:
            reach = cur

    return warnings


def validate_holidays(holidays: AbstractSet[date]) -> List[ValidationWarning]:
    warnings: List[ValidationWarning] = []
    for d in sorted(holidays):
        if d.weekday() in (SATURDAY, SUNDAY):
            warnings.append(ValidationWarning(f"Holiday {d} falls on a weekend and has no effect"))
    return warnings


def validate_all(settings: PtoSettings, vacations: Sequence[Vacation]) -> List[ValidationWarning]:
    warnings: List[ValidationWarning] = []
    warnings.extend(validate_settings(settings))
    warnings.extend(validate_vacations(vacations))
    warnings.extend(validate_holidays(settings.holidays))
    return warnings
