from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterable, Sequence

from ...core.enums import PayrollItemType
from ...settings.model import RateConfig
from ...staff.model import StaffWage
from ..model import CustomPayrollItem, PayrollCalculation, WorkHours


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll pricing)."""

    @abstractmethod
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
        raise NotImplementedError

    def with_custom_items(self, calculation: PayrollCalculation, custom_items: Iterable[CustomPayrollItem]) -> PayrollCalculation:
        """Replace the custom items and rebuild every derived total."""
        items = tuple(custom_items)
        total_allowance, total_deduction = sum_items(items)
        gross_pay = (
            calculation.base_salary
            + calculation.overtime_pay
            + calculation.excess_overtime_pay
            + calculation.late_night_pay
            + calculation.holiday_pay
            + total_allowance
        )
        return replace(
            calculation,
            custom_items=items,
            total_allowance=total_allowance,
            total_deduction=total_deduction,
            gross_pay=gross_pay,
            net_pay=gross_pay - total_deduction,
        )


def sum_items(items: Iterable[CustomPayrollItem]) -> tuple[float, float]:
    allowance = 0
    deduction = 0
    for item in items:
        if item.item_type == PayrollItemType.ALLOWANCE:
            allowance += item.amount
        else:
            deduction += item.amount
    return allowance, deduction
