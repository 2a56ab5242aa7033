# pto_planner/simulation/accrual.py
from __future__ import annotations

from datetime import date
from typing import AbstractSet, Iterable, List

from pto_planner.domain.calendar import (
    ONE_WEEK,
    chargeable_days,
    chargeable_hours,
    next_accrual_boundary,
    sundays_between,
)
from pto_planner.domain.models import (
    AccrualEvent,
    PtoSettings,
    SimulationResult,
    Vacation,
    VacationOutcome,
)


def upcoming_vacations(vacations: Iterable[Vacation], today: date) -> List[Vacation]:
    """Vacations still ending after `today`, in chronological order (new list)"""
    return sorted((v for v in vacations if v.end > today), key=lambda v: v.sort_key())


def simulate(
    today: date,
    bank: float,
    weekly_rate: float,
    holidays: AbstractSet[date],
    vacations: Iterable[Vacation],
) -> SimulationResult:
    """
    Walk the calendar from `today` through every upcoming vacation.

    - before a vacation: one credit per weekly boundary (Sunday) strictly before its start
    - at its start: deduct the chargeable hours only if the balance covers them
    - during it: one credit per calendar Sunday in [start, end]
    - after it: the weekly cursor restarts at the first Sunday after its end

    An unaffordable vacation keeps the balance and does not stop later ones.
    Inputs are not mutated.
    """
    plan = upcoming_vacations(vacations, today)
    if not plan:
        return SimulationResult(today=today, outcomes=[], final_balance=bank)

    balance = bank
    cursor = next_accrual_boundary(today)
    outcomes: List[VacationOutcome] = []
    accruals: List[AccrualEvent] = []

    for vac in plan:
        # weekly credits strictly before the vacation starts
        while cursor < vac.start:
            balance += weekly_rate
            accruals.append(AccrualEvent(day=cursor, hours=weekly_rate, balance=balance))
            cursor += ONE_WEEK

        days = chargeable_days(vac, holidays)
        hours = chargeable_hours(days)

        balance_before = balance
        affordable = balance >= hours
        if affordable:
            balance -= hours

        # credits keep posting while on vacation (holidays do not suppress them)
        accrued_during = 0.0
        for sunday in sundays_between(vac.start, vac.end):
            balance += weekly_rate
            accrued_during += weekly_rate
            accruals.append(AccrualEvent(day=sunday, hours=weekly_rate, balance=balance, during_vacation=True))

        cursor = next_accrual_boundary(vac.end)

        outcomes.append(VacationOutcome(
            vacation=vac,
            chargeable_days=days,
            chargeable_hours=hours,
            affordable=affordable,
            balance_before=balance_before,
            balance_after=balance,
            accrued_during=accrued_during,
        ))

    return SimulationResult(today=today, outcomes=outcomes, final_balance=balance, accruals=accruals)


def simulate_settings(today: date, settings: PtoSettings, vacations: Iterable[Vacation]) -> SimulationResult:
    return simulate(
        today=today,
        bank=settings.bank,
        weekly_rate=settings.weekly_rate,
        holidays=settings.holidays,
        vacations=vacations,
    )
