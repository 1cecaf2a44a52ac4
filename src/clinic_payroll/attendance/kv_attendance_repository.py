from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.constants import ATTENDANCE_KEY_PREFIX
from ..storage.kv_store import KeyValueStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


def attendance_key(work_date: date, staff_id: str) -> str:
    return f"{ATTENDANCE_KEY_PREFIX}{work_date.strftime('%Y-%m-%d')}:{staff_id}"


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_for_staff_and_date(self, staff_id: str, work_date: date) -> Optional[AttendanceRecord]:
        doc = self._store.get(attendance_key(work_date, staff_id))
        return AttendanceRecord.from_dict(doc) if doc else None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        prefix = f"{ATTENDANCE_KEY_PREFIX}{work_date.strftime('%Y-%m-%d')}:"
        return [AttendanceRecord.from_dict(d) for d in self._store.get_by_prefix(prefix)]

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        staff_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        # Keys sort by date, so a shared prefix narrows the scan when the range
        # stays inside one month.
        prefix = ATTENDANCE_KEY_PREFIX
        if (start_date.year, start_date.month) == (end_date.year, end_date.month):
            prefix += start_date.strftime("%Y-%m-")

        out: list[AttendanceRecord] = []
        for doc in self._store.get_by_prefix(prefix):
            if staff_id is not None and doc.get("staffId") != staff_id:
                continue
            r = AttendanceRecord.from_dict(doc)
            if not start_date <= r.work_date <= end_date:
                continue
            out.append(r)

        out.sort(key=lambda r: (r.work_date, r.staff_id))
        return out

    def upsert(self, record: AttendanceRecord) -> None:
        self._store.set(attendance_key(record.work_date, record.staff_id), record.to_dict())

    def upsert_many(self, records: Iterable[AttendanceRecord]) -> None:
        self._store.mset((attendance_key(r.work_date, r.staff_id), r.to_dict()) for r in records)

    def delete(self, staff_id: str, work_date: date) -> bool:
        return self._store.delete(attendance_key(work_date, staff_id))
