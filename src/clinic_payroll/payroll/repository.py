from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollCalculation


class PayrollRepository(Protocol):
    """Payroll results keyed by (month, staff_id)."""

    def get(self, month: str, staff_id: str) -> Optional[PayrollCalculation]:
        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[PayrollCalculation]:
        raise NotImplementedError

    def find_by_id(self, payroll_id: str) -> Optional[PayrollCalculation]:
        """Lookup by the ``{month}-{staffId}`` id (scan-and-match)."""

        raise NotImplementedError

    def save(self, calculation: PayrollCalculation) -> None:
        raise NotImplementedError

    def delete(self, month: str, staff_id: str) -> bool:
        raise NotImplementedError
