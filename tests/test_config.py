from datetime import date

from pto_planner.config import AppConfig, DEFAULT_CONFIG, local_today


def test_local_today_is_a_date():
    assert isinstance(local_today(DEFAULT_CONFIG), date)


def test_local_today_in_named_zone():
    today = local_today(AppConfig(timezone_name="UTC"))
    assert isinstance(today, date)
    assert abs((today - local_today(DEFAULT_CONFIG)).days) <= 1
