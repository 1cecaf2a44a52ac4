from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import PAYROLL_KEY_PREFIX
from ..storage.kv_store import KeyValueStore
from .model import PayrollCalculation
from .repository import PayrollRepository


def payroll_key(month: str, staff_id: str) -> str:
    return f"{PAYROLL_KEY_PREFIX}{month}:{staff_id}"


class KVPayrollRepository(PayrollRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, month: str, staff_id: str) -> Optional[PayrollCalculation]:
        doc = self._store.get(payroll_key(month, staff_id))
        return PayrollCalculation.from_dict(doc) if doc else None

    def list_for_month(self, month: str) -> Sequence[PayrollCalculation]:
        return [PayrollCalculation.from_dict(d) for d in self._store.get_by_prefix(f"{PAYROLL_KEY_PREFIX}{month}:")]

    def find_by_id(self, payroll_id: str) -> Optional[PayrollCalculation]:
        for doc in self._store.get_by_prefix(PAYROLL_KEY_PREFIX):
            if doc.get("id") == payroll_id:
                return PayrollCalculation.from_dict(doc)
        return None

    def save(self, calculation: PayrollCalculation) -> None:
        self._store.set(payroll_key(calculation.month, calculation.staff_id), calculation.to_dict())

    def delete(self, month: str, staff_id: str) -> bool:
        return self._store.delete(payroll_key(month, staff_id))
