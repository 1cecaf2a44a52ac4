import pytest

from clinic_payroll.attendance.analyzer import analyze_day
from clinic_payroll.core.exceptions import ValidationError
from clinic_payroll.settings.model import RateConfig

CFG = RateConfig()


def test_early_start_is_early_overtime():
    a = analyze_day("08:30", "18:00", CFG)
    assert a.early_overtime is True
    assert a.overtime is True
    assert a.early_leave is False
    assert a.late_night_overtime_hours == 0.0


def test_exactly_regular_hours_is_not_overtime():
    a = analyze_day("09:00", "17:00", CFG, break_minutes=0)
    assert a.early_overtime is False
    assert a.overtime is False
    assert a.early_leave is False


def test_break_is_subtracted_before_overtime_check():
    assert analyze_day("09:00", "18:00", CFG, break_minutes=60).overtime is False
    assert analyze_day("09:00", "18:00", CFG, break_minutes=0).overtime is True


def test_leaving_before_standard_hour_is_early_leave():
    assert analyze_day("09:00", "16:00", CFG).early_leave is True


def test_evening_shift_reports_late_night_hours():
    a = analyze_day("18:00", "23:30", CFG)
    assert a.late_night_overtime_hours == 1.5


def test_end_before_start_is_not_wrapped_for_flags():
    a = analyze_day("22:00", "06:00", CFG)
    # plain difference is negative, so never overtime
    assert a.overtime is False
    assert a.early_leave is True
    # the late-night hours do wrap past midnight
    assert a.late_night_overtime_hours == 7.0


def test_thresholds_come_from_config():
    cfg = RateConfig(early_overtime_standard_hour=8, early_leave_standard_hour=16, regular_hours_per_day=6)
    a = analyze_day("08:30", "16:00", cfg)
    assert a.early_overtime is False
    assert a.early_leave is False
    assert a.overtime is True


@pytest.mark.parametrize("start,end", [("", "18:00"), ("09:00", ""), (None, None)])
def test_missing_time_returns_none(start, end):
    assert analyze_day(start, end, CFG) is None


def test_malformed_time_raises():
    with pytest.raises(ValidationError):
        analyze_day("9am", "18:00", CFG)


def test_to_dict_uses_wire_names():
    data = analyze_day("08:00", "23:00", CFG).to_dict()
    assert data == {
        "earlyOvertime": True,
        "overtime": True,
        "earlyLeave": False,
        "lateNightOvertimeHours": 1.0,
    }
