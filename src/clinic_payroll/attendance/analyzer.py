"""Daily work analysis: classify one shift into display flags.

The flags are advisory. The monthly payroll aggregation decides overtime on
its own (daily threshold plus the monthly running counter), so a day flagged
``overtime`` here can still be priced differently in the monthly totals.
"""

from __future__ import annotations

from typing import Optional

from ..common.time_utils import late_night_overlap, time_to_minutes
from ..settings.model import RateConfig
from .model import DayAnalysis


def analyze_day(
    start_time: Optional[str],
    end_time: Optional[str],
    config: RateConfig,
    *,
    break_minutes: int = 0,
) -> Optional[DayAnalysis]:
    """Classify a shift; returns None when either time is missing.

    The boolean flags compare plain clock times: an end at or before the
    start is not read as crossing midnight, so such a shift is never flagged
    ``overtime``. The late-night hours do wrap ``end < start`` past midnight.
    """
    if not start_time or not end_time:
        return None

    start_min = time_to_minutes(start_time)
    end_min = time_to_minutes(end_time)

    worked_min = end_min - start_min - int(break_minutes or 0)

    return DayAnalysis(
        early_overtime=start_min < config.early_overtime_standard_hour * 60,
        overtime=worked_min > config.regular_hours_per_day * 60,
        early_leave=end_min < config.early_leave_standard_hour * 60,
        late_night_overtime_hours=late_night_overlap(
            start_time,
            end_time,
            config.late_night_start_hour,
            config.late_night_end_hour,
        ),
    )
