# pto_planner/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class Vacation:
    """One planned vacation (end inclusive)"""
    start: date
    end: date
    name: Optional[str] = None

    def label(self, default: str = "Unnamed") -> str:
        return self.name if self.name else default

    def sort_key(self) -> Tuple[date, date, str]:
        # equal (start, end) pairs are ordered by name
        return (self.start, self.end, self.name or "")


@dataclass(frozen=True)
class PtoSettings:
    bank: float                 # starting balance (hours)
    weekly_rate: float          # hours credited per week
    holidays: FrozenSet[date] = frozenset()


@dataclass(frozen=True)
class AccrualEvent:
    """One weekly credit (kept for the verbose trace)"""
    day: date
    hours: float
    balance: float              # balance right after the credit
    during_vacation: bool = False


@dataclass(frozen=True)
class VacationOutcome:
    vacation: Vacation
    chargeable_days: int
    chargeable_hours: int
    affordable: bool
    balance_before: float       # balance at the affordability check
    balance_after: float        # after deduction and in-vacation accrual
    accrued_during: float = 0.0


@dataclass
class SimulationResult:
    today: date
    outcomes: List[VacationOutcome]
    final_balance: float
    accruals: List[AccrualEvent] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.outcomes

    @property
    def affordable_count(self) -> int:
        return sum(1 for o in self.outcomes if o.affordable)
