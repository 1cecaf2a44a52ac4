from __future__ import annotations

from typing import Sequence

from ...common.time_utils import round_yen
from ...settings.model import RateConfig
from ...staff.model import StaffWage
from ..model import CustomPayrollItem, PayrollCalculation, WorkHours
from .base import PayrollCalculator


def effective_hourly_rate(wage: StaffWage, config: RateConfig) -> float:
    if wage.hourly_rate:
        return wage.hourly_rate
    return config.default_hourly_rate


class StandardPayrollCalculator(PayrollCalculator):
    """Japanese labor-law premiums.

    Overtime, excess overtime and holiday hours are paid at ``1 + rate``;
    late-night hours only get the premium part, stacked on whatever already
    pays for those hours. A fixed monthly salary replaces the regular-hours
    base pay, while premiums still use the hourly rate.
    """

    def price(
        self,
        work_hours: WorkHours,
        wage: StaffWage,
        custom_items: Sequence[CustomPayrollItem],
        config: RateConfig,
        *,
        staff_id: str = "",
        staff_name: str = "",
        month: str = "",
        work_days: int = 0,
    ) -> PayrollCalculation:
        rate = effective_hourly_rate(wage, config)

        if wage.monthly_salary:
            base_salary = wage.monthly_salary
        else:
            base_salary = round_yen(work_hours.regular_hours * rate)

        calculation = PayrollCalculation(
            staff_id=staff_id,
            staff_name=staff_name,
            month=month,
            work_hours=work_hours,
            work_days=work_days,
            base_salary=base_salary,
            hourly_rate=rate,
            overtime_pay=round_yen(work_hours.overtime_hours * rate * (1 + config.overtime_rate / 100)),
            excess_overtime_pay=round_yen(work_hours.excess_overtime_hours * rate * (1 + config.excess_overtime_rate / 100)),
            late_night_pay=round_yen(work_hours.late_night_hours * rate * (config.late_night_rate / 100)),
            holiday_pay=round_yen(work_hours.holiday_hours * rate * (1 + config.holiday_rate / 100)),
        )
        return self.with_custom_items(calculation, custom_items)
