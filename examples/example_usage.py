"""Example: price one month of attendance without Flask or a database.

The calculation entry points are plain functions; everything they need is
passed in.
"""

import json
from datetime import date

from clinic_payroll import aggregate_and_price, analyze_day
from clinic_payroll.attendance.model import AttendanceRecord
from clinic_payroll.core.enums import PayrollItemType
from clinic_payroll.payroll.model import CustomPayrollItem
from clinic_payroll.settings.model import RateConfig
from clinic_payroll.staff.model import StaffWage


def main():
    config = RateConfig()
    shifts = [
        (date(2025, 4, 1), "08:30", "19:00", 60, False),
        (date(2025, 4, 2), "13:00", "23:30", 60, False),
        (date(2025, 4, 6), "09:00", "15:00", 45, True),
    ]

    records = []
    for work_date, start, end, break_minutes, holiday in shifts:
        analysis = analyze_day(start, end, config, break_minutes=break_minutes)
        print(work_date, start, end, analysis.to_dict())
        records.append(
            AttendanceRecord(
                work_date=work_date,
                staff_id="s1",
                start_time=start,
                end_time=end,
                break_minutes=break_minutes,
                is_holiday=holiday,
            )
        )

    payroll = aggregate_and_price(
        records,
        StaffWage(hourly_rate=1500),
        [CustomPayrollItem(item_id="commute", name="Commute", amount=8000, item_type=PayrollItemType.ALLOWANCE)],
        config,
        staff_id="s1",
        staff_name="Sato",
        month="2025-04",
    )
    print(json.dumps(payroll.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
