from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.time_utils import hours_between, round_half_up
from ..common.validators import require_end_after_start, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..settings.model import RateConfig
from ..staff.repository import StaffRepository
from .analyzer import analyze_day
from .model import AttendanceRecord, StaffMonthSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_break_minutes(value: Any) -> Optional[int]:
    """``breakMinutes`` from a request body; None when left empty."""
    if value is None or value == "":
        return None
    try:
        minutes = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError("breakMinutes must be an integer") from e
    if minutes < 0:
        raise ValidationError("breakMinutes must not be negative")
    return minutes


@dataclass(frozen=True)
class AttendanceEntry:
    """What the operator typed for one staff member on one day."""

    staff_id: str
    start_time: str = ""
    end_time: str = ""
    break_minutes: Optional[int] = None
    is_holiday: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceEntry":
        return cls(
            staff_id=require_non_empty(str(data.get("staffId") or ""), "staffId"),
            start_time=(data.get("startTime") or "").strip(),
            end_time=(data.get("endTime") or "").strip(),
            break_minutes=parse_break_minutes(data.get("breakMinutes")),
            is_holiday=bool(data.get("isHoliday", False)),
        )


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, staff: StaffRepository):
        self._attendance = attendance
        self._staff = staff

    def _require_staff(self, staff_id: str) -> None:
        if not self._staff.get_by_id(staff_id):
            raise NotFoundError(f"Staff not found: {staff_id}")

    def _build_record(self, *, work_date: date, entry: AttendanceEntry, config: RateConfig) -> AttendanceRecord:
        require_end_after_start(entry.start_time, entry.end_time)

        break_minutes = config.break_or_default(entry.break_minutes)
        analysis = analyze_day(entry.start_time, entry.end_time, config, break_minutes=break_minutes)
        work_hours = max(0.0, hours_between(entry.start_time, entry.end_time) - break_minutes / 60)

        return AttendanceRecord(
            work_date=work_date,
            staff_id=entry.staff_id,
            start_time=entry.start_time,
            end_time=entry.end_time,
            break_minutes=entry.break_minutes,
            is_holiday=entry.is_holiday,
            work_hours=round_half_up(work_hours, 2),
            early_overtime=analysis.early_overtime,
            overtime=analysis.overtime,
            early_leave=analysis.early_leave,
            late_night_overtime_hours=analysis.late_night_overtime_hours,
        )

    def save_entry(self, *, work_date: date, entry: AttendanceEntry, config: RateConfig) -> Optional[AttendanceRecord]:
        """Create, update or delete the record for (staff, date).

        - both times: analyze and upsert
        - both empty: delete the record
        - one time only: keep it on an existing record with the analysis cleared
        """
        self._require_staff(entry.staff_id)

        if not entry.start_time and not entry.end_time:
            self._attendance.delete(entry.staff_id, work_date)
            return None

        if entry.start_time and entry.end_time:
            record = self._build_record(work_date=work_date, entry=entry, config=config)
            self._attendance.upsert(record)
            return record

        existing = self._attendance.get_for_staff_and_date(entry.staff_id, work_date)
        if not existing:
            return None

        partial = replace(
            existing,
            start_time=entry.start_time,
            end_time=entry.end_time,
            break_minutes=entry.break_minutes,
            is_holiday=entry.is_holiday,
            actual_work_hours=None,
            overtime_hours=None,
            work_hours=0,
            early_overtime=None,
            overtime=None,
            early_leave=None,
            late_night_overtime_hours=None,
        )
        self._attendance.upsert(partial)
        return partial

    def save_bulk(self, *, work_date: date, entries: Iterable[AttendanceEntry], config: RateConfig) -> Sequence[AttendanceRecord]:
        """Save a whole day at once; entries missing a time are skipped."""
        records: list[AttendanceRecord] = []
        for entry in entries:
            if not entry.start_time or not entry.end_time:
                continue
            self._require_staff(entry.staff_id)
            records.append(self._build_record(work_date=work_date, entry=entry, config=config))

        if records:
            self._attendance.upsert_many(records)
        logger.info("bulk attendance saved: date=%s records=%d", work_date, len(records))
        return records

    def delete_entry(self, *, staff_id: str, work_date: date) -> None:
        if not self._attendance.delete(staff_id, work_date):
            raise NotFoundError(f"No attendance for {staff_id} on {work_date:%Y-%m-%d}")

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_date(work_date)

    def list_range(self, *, start: date, end: date, staff_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        if end < start:
            raise ValidationError("end must not be before start")
        return self._attendance.list_range(start_date=start, end_date=end, staff_id=staff_id)

    def list_for_month(self, month: str, *, staff_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        start, end = month_bounds(month)
        return self._attendance.list_range(start_date=start, end_date=end, staff_id=staff_id)

    def summarize_month(self, month: str) -> Sequence[StaffMonthSummary]:
        """Badge counts per staff member, from the flags stored on each record."""
        totals: dict[str, dict[str, Any]] = {}
        for r in self.list_for_month(month):
            s = totals.setdefault(
                r.staff_id,
                {"work_days": 0, "early_overtime": 0, "overtime": 0, "early_leave": 0, "late_night": 0.0},
            )
            if r.has_times:
                s["work_days"] += 1
            a = r.analysis
            if a is None:
                continue
            s["early_overtime"] += a.early_overtime
            s["overtime"] += a.overtime
            s["early_leave"] += a.early_leave
            s["late_night"] += a.late_night_overtime_hours

        return [
            StaffMonthSummary(
                staff_id=staff_id,
                work_days=s["work_days"],
                early_overtime_count=s["early_overtime"],
                overtime_count=s["overtime"],
                early_leave_count=s["early_leave"],
                total_late_night_hours=round_half_up(s["late_night"], 1),
            )
            for staff_id, s in sorted(totals.items())
        ]
