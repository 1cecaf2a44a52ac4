from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .time_utils import time_to_minutes


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: Optional[float], field_name: str) -> Optional[float]:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_hour_of_day(value: int, field_name: str) -> int:
    if not 0 <= value <= 23:
        raise ValidationError(f"{field_name} must be between 0 and 23")
    return value


def require_end_after_start(start_time: str, end_time: str) -> None:
    """Entry-form rule: the end of a shift must be later than its start.

    Overnight shifts cannot be entered through the form; the late-night
    arithmetic still wraps ``end < start`` for records that reach it.
    """
    if time_to_minutes(end_time) <= time_to_minutes(start_time):
        raise ValidationError("End time must be later than start time")
