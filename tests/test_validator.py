from datetime import date

import pytest

from pto_planner.domain.models import PtoSettings, Vacation
from pto_planner.validation.validator import (
    ValidationError,
    validate_all,
    validate_holidays,
    validate_settings,
    validate_vacations,
)


def test_reversed_vacation_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_vacations([Vacation(date(2024, 1, 19), date(2024, 1, 15), "Backwards")])
    assert "Backwards" in exc.value.message


def test_overlapping_vacations_warn():
    warnings = validate_vacations([
        Vacation(date(2024, 1, 15), date(2024, 1, 19), "A"),
        Vacation(date(2024, 1, 18), date(2024, 1, 22), "B"),
    ])
    assert len(warnings) == 1
    assert "overlap" in warnings[0].message


def test_duplicate_vacations_warn():
    warnings = validate_vacations([
        Vacation(date(2024, 1, 15), date(2024, 1, 19), "A"),
        Vacation(date(2024, 1, 15), date(2024, 1, 19), "B"),
    ])
    assert len(warnings) == 1
    assert "Duplicate" in warnings[0].message


def test_adjacent_vacations_are_fine():
    assert validate_vacations([
        Vacation(date(2024, 1, 15), date(2024, 1, 19)),
        Vacation(date(2024, 1, 20), date(2024, 1, 22)),
    ]) == []


def test_weekend_holiday_warns():
    warnings = validate_holidays({date(2024, 1, 6), date(2024, 1, 1)})
    assert len(warnings) == 1
    assert "2024-01-06" in warnings[0].message


def test_negative_values_warn():
    warnings = validate_settings(PtoSettings(bank=-8, weekly_rate=4))
    assert len(warnings) == 1
    assert "PTO bank" in warnings[0].message


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_non_finite_values_are_rejected(bad):
    with pytest.raises(ValidationError):
        validate_settings(PtoSettings(bank=0, weekly_rate=bad))


def test_validate_all_collects_every_warning():
    settings = PtoSettings(bank=-1, weekly_rate=4, holidays=frozenset({date(2024, 1, 7)}))
    vacations = [
        Vacation(date(2024, 1, 15), date(2024, 1, 19)),
        Vacation(date(2024, 1, 19), date(2024, 1, 20)),
    ]
    assert len(validate_all(settings, vacations)) == 3


def test_long_vacation_overlapping_non_adjacent_ones_warns_for_each():
    warnings = validate_vacations([
        Vacation(date(2024, 1, 1), date(2024, 1, 31), "Long"),
        Vacation(date(2024, 1, 2), date(2024, 1, 3), "Short"),
        Vacation(date(2024, 1, 10), date(2024, 1, 12), "Inside long"),
    ])
    messages = [w.message for w in warnings]

    assert len(messages) == 2
    assert "Long" in messages[0] and "Short" in messages[0]
    assert "Inside long" in messages[1]
