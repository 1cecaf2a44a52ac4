from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..settings.model import RateConfig
from ..staff.model import StaffWage
from .aggregator import aggregate_work_hours
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import CustomPayrollItem, PayrollCalculation


def aggregate_and_price(
    records: Iterable[AttendanceRecord],
    wage: StaffWage,
    custom_items: Sequence[CustomPayrollItem],
    config: RateConfig,
    *,
    staff_id: str = "",
    staff_name: str = "",
    month: str = "",
    calculator: Optional[PayrollCalculator] = None,
) -> PayrollCalculation:
    """Aggregate a month of attendance and price it.

    Records are sorted by date before aggregation. No I/O; calling it twice
    with the same inputs returns equal results.
    """
    ordered = sorted(records, key=lambda r: r.work_date)
    work_hours = aggregate_work_hours(ordered, config)
    work_days = sum(1 for r in ordered if r.has_times)

    return (calculator or StandardPayrollCalculator()).price(
        work_hours,
        wage,
        custom_items,
        config,
        staff_id=staff_id,
        staff_name=staff_name,
        month=month,
        work_days=work_days,
    )
