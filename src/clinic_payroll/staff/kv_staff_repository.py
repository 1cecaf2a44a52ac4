from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import STAFF_KEY_PREFIX
from ..storage.kv_store import KeyValueStore
from .model import Staff
from .repository import StaffRepository


class KVStaffRepository(StaffRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        doc = self._store.get(f"{STAFF_KEY_PREFIX}{staff_id}")
        return Staff.from_dict(doc) if doc else None

    def list_all(self) -> Sequence[Staff]:
        return [Staff.from_dict(d) for d in self._store.get_by_prefix(STAFF_KEY_PREFIX)]

    def save(self, staff: Staff) -> None:
        self._store.set(f"{STAFF_KEY_PREFIX}{staff.staff_id}", staff.to_dict())

    def delete_by_id(self, staff_id: str) -> bool:
        return self._store.delete(f"{STAFF_KEY_PREFIX}{staff_id}")
