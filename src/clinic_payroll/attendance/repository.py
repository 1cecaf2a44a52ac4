from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """One record per (staff_id, work_date); ``upsert`` replaces in place."""

    def get_for_staff_and_date(self, staff_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        staff_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records between two dates (inclusive), ordered by date then staff."""

        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def upsert_many(self, records: Iterable[AttendanceRecord]) -> None:
        raise NotImplementedError

    def delete(self, staff_id: str, work_date: date) -> bool:
        raise NotImplementedError
