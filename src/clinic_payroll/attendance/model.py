from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DayAnalysis:
    """Display flags for one shift (schedule-view badges)."""

    early_overtime: bool
    overtime: bool
    early_leave: bool
    late_night_overtime_hours: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "earlyOvertime": self.early_overtime,
            "overtime": self.overtime,
            "earlyLeave": self.early_leave,
            "lateNightOvertimeHours": self.late_night_overtime_hours,
        }


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one staff member's attendance on one day.

    ``actual_work_hours``/``overtime_hours`` are optional precomputed values
    (e.g. imported data); when both are set they take precedence over clock
    arithmetic in the payroll aggregation. The analysis fields are advisory
    and may be None when the record was never analyzed.
    """

    work_date: date
    staff_id: str
    start_time: str = ""
    end_time: str = ""
    break_minutes: Optional[int] = None
    actual_work_hours: Optional[float] = None
    overtime_hours: Optional[float] = None
    is_holiday: bool = False
    work_hours: float = 0

    early_overtime: Optional[bool] = None
    overtime: Optional[bool] = None
    early_leave: Optional[bool] = None
    late_night_overtime_hours: Optional[float] = None

    @property
    def has_times(self) -> bool:
        return bool(self.start_time) and bool(self.end_time)

    @property
    def analysis(self) -> Optional[DayAnalysis]:
        if self.early_overtime is None and self.overtime is None and self.early_leave is None and self.late_night_overtime_hours is None:
            return None
        return DayAnalysis(
            early_overtime=bool(self.early_overtime),
            overtime=bool(self.overtime),
            early_leave=bool(self.early_leave),
            late_night_overtime_hours=float(self.late_night_overtime_hours or 0),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        try:
            work_date = parse_iso_date(str(data["date"]))
            staff_id = str(data["staffId"])
        except KeyError as e:
            raise ValidationError(f"Attendance document missing {e.args[0]!r}") from e

        return cls(
            work_date=work_date,
            staff_id=staff_id,
            start_time=data.get("startTime") or "",
            end_time=data.get("endTime") or "",
            break_minutes=data.get("breakMinutes"),
            actual_work_hours=data.get("actualWorkHours"),
            overtime_hours=data.get("overtimeHours"),
            is_holiday=bool(data.get("isHoliday", False)),
            work_hours=data.get("workHours") or 0,
            early_overtime=data.get("earlyOvertime"),
            overtime=data.get("overtime"),
            early_leave=data.get("earlyLeave"),
            late_night_overtime_hours=data.get("lateNightOvertimeHours"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "staffId": self.staff_id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "breakMinutes": self.break_minutes,
            "actualWorkHours": self.actual_work_hours,
            "overtimeHours": self.overtime_hours,
            "isHoliday": self.is_holiday,
            "workHours": self.work_hours,
            "earlyOvertime": self.early_overtime,
            "overtime": self.overtime,
            "earlyLeave": self.early_leave,
            "lateNightOvertimeHours": self.late_night_overtime_hours,
        }


@dataclass(frozen=True)
class StaffMonthSummary:
    """Read-model for the monthly schedule view (counts of stored badges)."""

    staff_id: str
    work_days: int = 0
    early_overtime_count: int = 0
    overtime_count: int = 0
    early_leave_count: int = 0
    total_late_night_hours: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "staffId": self.staff_id,
            "workDays": self.work_days,
            "earlyOvertimeCount": self.early_overtime_count,
            "overtimeCount": self.overtime_count,
            "earlyLeaveCount": self.early_leave_count,
            "totalLateNightHours": self.total_late_night_hours,
        }
