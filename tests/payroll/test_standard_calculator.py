from __future__ import annotations

import json
from datetime import date

from clinic_payroll import aggregate_and_price
from clinic_payroll.attendance.model import AttendanceRecord
from clinic_payroll.core.enums import PayrollItemType
from clinic_payroll.payroll.calculator.standard_calculator import StandardPayrollCalculator, effective_hourly_rate
from clinic_payroll.payroll.model import CustomPayrollItem, WorkHours
from clinic_payroll.settings.model import RateConfig
from clinic_payroll.staff.model import StaffWage

CFG = RateConfig()


def rec(day: int, start: str, end: str, **kwargs) -> AttendanceRecord:
    return AttendanceRecord(work_date=date(2025, 4, day), staff_id="s1", start_time=start, end_time=end, **kwargs)


def test_end_to_end_single_day():
    calc = aggregate_and_price(
        [rec(1, "09:00", "19:00", break_minutes=60)],
        StaffWage(hourly_rate=1500),
        [],
        CFG,
        staff_id="s1",
        staff_name="Sato",
        month="2025-04",
    )

    assert calc.work_hours.regular_hours == 8
    assert calc.work_hours.overtime_hours == 1
    assert calc.work_hours.total_hours == 9
    assert calc.work_days == 1
    assert calc.hourly_rate == 1500
    assert calc.base_salary == 12000
    assert calc.overtime_pay == 1875
    assert calc.excess_overtime_pay == 0
    assert calc.late_night_pay == 0
    assert calc.holiday_pay == 0
    assert calc.gross_pay == 13875
    assert calc.net_pay == 13875
    assert calc.payroll_id == "2025-04-s1"


def test_same_inputs_give_identical_output():
    records = [
        rec(3, "09:00", "22:30", break_minutes=0),
        rec(1, "18:00", "23:00"),
        rec(2, "09:00", "18:00", is_holiday=True),
    ]
    items = [CustomPayrollItem(item_id="a", name="Commute", amount=8000, item_type=PayrollItemType.ALLOWANCE)]

    first = aggregate_and_price(records, StaffWage(hourly_rate=1300), items, CFG, staff_id="s1", month="2025-04")
    second = aggregate_and_price(list(reversed(records)), StaffWage(hourly_rate=1300), items, CFG, staff_id="s1", month="2025-04")

    assert json.dumps(first.to_dict(), sort_keys=True) == json.dumps(second.to_dict(), sort_keys=True)


def test_monthly_salary_replaces_base_pay_but_not_premiums():
    calc = aggregate_and_price(
        [rec(1, "09:00", "19:00", break_minutes=60)],
        StaffWage(hourly_rate=2000, monthly_salary=300000),
        [],
        CFG,
    )
    assert calc.base_salary == 300000
    assert calc.overtime_pay == 2500
    assert calc.gross_pay == 302500


def test_missing_wage_falls_back_to_default_hourly_rate():
    assert effective_hourly_rate(StaffWage(), CFG) == 1200
    assert effective_hourly_rate(StaffWage(hourly_rate=0), CFG) == 1200

    calc = aggregate_and_price([rec(1, "09:00", "18:00")], StaffWage(), [], CFG)
    assert calc.hourly_rate == 1200
    assert calc.base_salary == 9600


def test_late_night_pays_premium_only():
    calc = aggregate_and_price([rec(1, "18:00", "23:00", break_minutes=0)], StaffWage(hourly_rate=1000), [], CFG)
    assert calc.work_hours.late_night_hours == 1
    assert calc.base_salary == 5000
    assert calc.late_night_pay == 250
    assert calc.gross_pay == 5250


def test_holiday_and_excess_overtime_rates():
    hours = WorkHours(regular_hours=0, overtime_hours=45, excess_overtime_hours=2, holiday_hours=8, total_hours=55)
    calc = StandardPayrollCalculator().price(hours, StaffWage(hourly_rate=1000), [], CFG)
    assert calc.overtime_pay == 56250
    assert calc.excess_overtime_pay == 3000
    assert calc.holiday_pay == 10800


def test_custom_items_feed_gross_and_net():
    items = [
        CustomPayrollItem(item_id="1", name="Commute", amount=5000, item_type=PayrollItemType.ALLOWANCE),
        CustomPayrollItem(item_id="2", name="Qualification", amount=3000, item_type=PayrollItemType.ALLOWANCE),
        CustomPayrollItem(item_id="3", name="Uniform", amount=2500, item_type=PayrollItemType.DEDUCTION),
    ]
    calc = aggregate_and_price([rec(1, "09:00", "19:00", break_minutes=60)], StaffWage(hourly_rate=1500), items, CFG)

    assert calc.total_allowance == 8000
    assert calc.total_deduction == 2500
    assert calc.gross_pay == (
        calc.base_salary
        + calc.overtime_pay
        + calc.excess_overtime_pay
        + calc.late_night_pay
        + calc.holiday_pay
        + calc.total_allowance
    )
    assert calc.net_pay == calc.gross_pay - calc.total_deduction == 13875 + 8000 - 2500


def test_with_custom_items_rebuilds_totals():
    calculator = StandardPayrollCalculator()
    base = aggregate_and_price([rec(1, "09:00", "18:00")], StaffWage(hourly_rate=1000), [], CFG)

    updated = calculator.with_custom_items(
        base, [CustomPayrollItem(item_id="x", name="Meal", amount=1200, item_type=PayrollItemType.DEDUCTION)]
    )
    assert updated.total_deduction == 1200
    assert updated.gross_pay == base.gross_pay
    assert updated.net_pay == base.gross_pay - 1200

    cleared = calculator.with_custom_items(updated, [])
    assert cleared == base


def test_work_days_counts_complete_records_only():
    calc = aggregate_and_price(
        [rec(1, "09:00", "18:00"), rec(2, "09:00", ""), rec(3, "10:00", "15:00")],
        StaffWage(hourly_rate=1000),
        [],
        CFG,
    )
    assert calc.work_days == 2
    assert calc.work_hours.total_hours == 12
