"""Clock-time arithmetic shared by the daily analyzer and the monthly aggregator.

All helpers work on ``HH:mm`` strings in local clinic time. A shift whose end
is numerically earlier than its start is read as crossing midnight.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


def time_to_minutes(value: str) -> int:
    """Parse ``HH:mm`` into minutes since midnight (0-1439)."""
    m = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not m:
        raise ValidationError(f"Invalid time (expected HH:mm): {value!r}")

    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise ValidationError(f"Invalid time (expected HH:mm): {value!r}")
    return hours * 60 + minutes


def shift_minutes(start: str, end: str) -> tuple[int, int]:
    """Start/end as minutes on a 48h timeline (end pushed past midnight if needed)."""
    start_min = time_to_minutes(start)
    end_min = time_to_minutes(end)
    if end_min < start_min:
        end_min += MINUTES_PER_DAY
    return start_min, end_min


def hours_between(start: str, end: str) -> float:
    start_min, end_min = shift_minutes(start, end)
    return (end_min - start_min) / 60


def _overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> int:
    return max(0, min(a_end, b_end) - max(a_start, b_start))


def late_night_overlap(start: str, end: str, late_night_start_hour: int = 22, late_night_end_hour: int = 5) -> float:
    """Hours of the shift falling inside the late-night window.

    The window is ``[start_hour, 24:00)`` plus ``[24:00, 24:00 + end_hour)`` on
    a 48h timeline. Early-morning hours of a shift that does not cross
    midnight (e.g. 01:00-04:00) are not counted.
    """
    start_min, end_min = shift_minutes(start, end)

    minutes = _overlap(start_min, end_min, late_night_start_hour * 60, MINUTES_PER_DAY)
    if end_min > MINUTES_PER_DAY:
        minutes += _overlap(
            start_min,
            end_min,
            MINUTES_PER_DAY,
            MINUTES_PER_DAY + late_night_end_hour * 60,
        )
    return minutes / 60


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half up on the scaled binary value.

    ``round_half_up(2.25, 1)`` scales to ``22.5`` and yields ``2.3``; a value
    whose scaled float lands just below the half (``0.15 * 10``) rounds down.
    """
    factor = 10**digits
    scaled = Decimal(value * factor).to_integral_value(rounding=ROUND_HALF_UP)
    return float(scaled) / factor


def round_yen(value: float) -> int:
    """Round a monetary amount to the integer yen, halves away from zero."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
