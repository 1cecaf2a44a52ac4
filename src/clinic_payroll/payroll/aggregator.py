"""Monthly aggregation of attendance records into hour buckets.

The split between standard and excess overtime is decided by a running
month-to-date counter, so records must be fed in ascending date order to
attribute excess hours to the right days. Monthly totals of the two buckets
do not depend on the order; the per-day attribution does.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.time_utils import hours_between, late_night_overlap, round_half_up
from ..core.constants import HOURS_DIGITS
from ..settings.model import RateConfig
from .model import DayAllocation, WorkHours


def worked_hours(record: AttendanceRecord, config: RateConfig) -> tuple[float, float]:
    """Net worked hours and the day's overtime for one record."""
    if record.actual_work_hours is not None and record.overtime_hours is not None:
        overtime = max(0.0, record.overtime_hours)
        return max(0.0, record.actual_work_hours + record.overtime_hours), overtime

    break_minutes = config.break_or_default(record.break_minutes)
    hours = max(0.0, hours_between(record.start_time, record.end_time) - break_minutes / 60)
    return hours, max(0.0, hours - config.regular_hours_per_day)


class MonthlyWorkAggregator:
    """Stateful fold over one staff member's month of attendance."""

    def __init__(self, config: RateConfig):
        self._config = config
        self.regular_hours = 0.0
        self.overtime_hours = 0.0
        self.excess_overtime_hours = 0.0
        self.late_night_hours = 0.0
        self.holiday_hours = 0.0
        self.total_hours = 0.0
        self.days: list[DayAllocation] = []

    def add(self, record: AttendanceRecord) -> Optional[DayAllocation]:
        if not record.has_times:
            return None

        cfg = self._config
        hours, daily_overtime = worked_hours(record, cfg)
        late_night = late_night_overlap(record.start_time, record.end_time, cfg.late_night_start_hour, cfg.late_night_end_hour)

        self.total_hours += hours
        self.late_night_hours += late_night

        if record.is_holiday:
            self.holiday_hours += hours
            day = DayAllocation(work_date=record.work_date, hours=hours, late_night_hours=late_night, holiday_hours=hours)
            self.days.append(day)
            return day

        regular = min(hours, cfg.regular_hours_per_day)
        self.regular_hours += regular

        standard, excess = self._split_overtime(daily_overtime)
        self.overtime_hours += standard
        self.excess_overtime_hours += excess

        day = DayAllocation(
            work_date=record.work_date,
            hours=hours,
            regular_hours=regular,
            overtime_hours=standard,
            excess_overtime_hours=excess,
            late_night_hours=late_night,
        )
        self.days.append(day)
        return day

    def _split_overtime(self, daily_overtime: float) -> tuple[float, float]:
        if daily_overtime <= 0:
            return 0.0, 0.0

        used = self.overtime_hours + self.excess_overtime_hours
        threshold = self._config.overtime_threshold
        if used >= threshold:
            return 0.0, daily_overtime

        remaining = threshold - used
        if daily_overtime <= remaining:
            return daily_overtime, 0.0
        return remaining, daily_overtime - remaining

    def result(self) -> WorkHours:
        return WorkHours(
            regular_hours=round_half_up(self.regular_hours, HOURS_DIGITS),
            overtime_hours=round_half_up(self.overtime_hours, HOURS_DIGITS),
            excess_overtime_hours=round_half_up(self.excess_overtime_hours, HOURS_DIGITS),
            late_night_hours=round_half_up(self.late_night_hours, HOURS_DIGITS),
            holiday_hours=round_half_up(self.holiday_hours, HOURS_DIGITS),
            total_hours=round_half_up(self.total_hours, HOURS_DIGITS),
        )


def aggregate_work_hours(records: Iterable[AttendanceRecord], config: RateConfig) -> WorkHours:
    """Fold records in the order given (callers sort by date)."""
    aggregator = MonthlyWorkAggregator(config)
    for record in records:
        aggregator.add(record)
    return aggregator.result()
