import pytest

from clinic_payroll.common.time_utils import (
    hours_between,
    late_night_overlap,
    round_half_up,
    round_yen,
    time_to_minutes,
)
from clinic_payroll.core.exceptions import ValidationError


def test_time_to_minutes_parses_clock_time():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("09:30") == 570
    assert time_to_minutes("23:59") == 1439
    assert time_to_minutes("7:05") == 425


@pytest.mark.parametrize("value", ["", "9", "24:00", "12:60", "ab:cd", "12-30", None])
def test_time_to_minutes_rejects_malformed_input(value):
    with pytest.raises(ValidationError):
        time_to_minutes(value)


def test_hours_between_same_day_and_overnight():
    assert hours_between("09:00", "18:00") == 9
    assert hours_between("22:00", "06:00") == 8
    assert hours_between("09:00", "09:45") == 0.75


def test_late_night_overlap_evening_and_overnight():
    assert late_night_overlap("20:00", "23:00", 22, 5) == 1.0
    assert late_night_overlap("23:00", "02:00", 22, 5) == 3.0
    assert late_night_overlap("09:00", "18:00", 22, 5) == 0.0
    assert late_night_overlap("21:00", "07:00", 22, 5) == 7.0


def test_late_night_overlap_ignores_early_morning_without_midnight_crossing():
    assert late_night_overlap("01:00", "04:00", 22, 5) == 0.0


def test_late_night_overlap_respects_configured_window():
    assert late_night_overlap("20:00", "23:00", 21, 5) == 2.0
    assert late_night_overlap("23:00", "04:00", 22, 2) == 3.0


def test_round_half_up_rounds_halves_up_on_the_scaled_value():
    assert round_half_up(2.25, 1) == 2.3
    assert round_half_up(0.5) == 1.0
    assert round_half_up(8.04, 1) == 8.0
    # 1.005 * 100 is 100.49999999999999 in binary floating point
    assert round_half_up(1.005, 2) == 1.0


def test_round_yen_returns_int():
    assert round_yen(2812.5) == 2813
    assert round_yen(10800.000000000002) == 10800
    assert isinstance(round_yen(0.4), int)
