from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

# snake_case attribute -> camelCase key used in stored documents and JSON
_WIRE_KEYS = {
    "regular_hours_per_day": "regularHoursPerDay",
    "default_break_minutes": "defaultBreakMinutes",
    "break_minutes_for_6_hours": "breakMinutesFor6Hours",
    "break_minutes_for_8_hours": "breakMinutesFor8Hours",
    "overtime_threshold": "overtimeThreshold",
    "overtime_rate": "overtimeRate",
    "excess_overtime_rate": "excessOvertimeRate",
    "late_night_rate": "lateNightRate",
    "holiday_rate": "holidayRate",
    "late_night_start_hour": "lateNightStartHour",
    "late_night_end_hour": "lateNightEndHour",
    "early_overtime_standard_hour": "earlyOvertimeStandardHour",
    "early_leave_standard_hour": "earlyLeaveStandardHour",
    "overtime_standard_hour": "overtimeStandardHour",
    "default_hourly_rate": "defaultHourlyRate",
}

HOUR_FIELDS = (
    "late_night_start_hour",
    "late_night_end_hour",
    "early_overtime_standard_hour",
    "early_leave_standard_hour",
    "overtime_standard_hour",
)


@dataclass(frozen=True)
class RateConfig:
    """Labor-rule configuration read by the analyzer and the payroll engine.

    Rates are percentage premiums (25 means +25%). ``late_night_end_hour`` is
    read as the next day. ``break_minutes_for_6_hours`` and
    ``break_minutes_for_8_hours`` are kept for the settings screen only; the
    aggregation always uses the record's break or ``default_break_minutes``.
    """

    regular_hours_per_day: float = 8
    default_break_minutes: int = 60
    break_minutes_for_6_hours: int = 45
    break_minutes_for_8_hours: int = 60
    overtime_threshold: float = 45
    overtime_rate: float = 25
    excess_overtime_rate: float = 50
    late_night_rate: float = 25
    holiday_rate: float = 35
    late_night_start_hour: int = 22
    late_night_end_hour: int = 5
    early_overtime_standard_hour: int = 9
    early_leave_standard_hour: int = 17
    overtime_standard_hour: int = 17
    default_hourly_rate: float = 1200

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "RateConfig":
        """Build from a stored document, keeping defaults for missing keys."""
        if not data:
            return cls()

        values: dict[str, Any] = {}
        for f in fields(cls):
            key = _WIRE_KEYS[f.name]
            if key in data and data[key] is not None:
                values[f.name] = data[key]
            elif f.name in data and data[f.name] is not None:
                values[f.name] = data[f.name]
        return cls(**values)

    def break_or_default(self, break_minutes: Optional[int]) -> int:
        """The entered break, or ``default_break_minutes`` when none was entered (0 is kept)."""
        return break_minutes if break_minutes is not None else self.default_break_minutes

    def to_dict(self) -> dict[str, Any]:
        return {_WIRE_KEYS[k]: v for k, v in asdict(self).items()}


def to_wire_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rename snake_case keys to their camelCase form; other keys pass through."""
    return {_WIRE_KEYS.get(k, k): v for k, v in data.items()}


DEFAULT_RATE_CONFIG = RateConfig()
