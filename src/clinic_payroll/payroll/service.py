from __future__ import annotations

import logging
import uuid
from typing import Any, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import PayrollItemType, Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, ValidationError
from ..settings.model import RateConfig
from ..staff.model import Staff
from ..staff.repository import StaffRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .engine import aggregate_and_price
from .model import CustomPayrollItem, PayrollCalculation, find_item
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def _require_admin(role: Role) -> None:
    if not role.is_admin:
        raise AuthorizationError("Administrator role required")


class PayrollService:
    """Use case: monthly payroll calculation and manual line items (admin)."""

    def __init__(
        self,
        payroll: PayrollRepository,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._attendance = attendance
        self._staff = staff
        self._calculator = calculator or StandardPayrollCalculator()

    def _calculate(self, *, staff: Staff, month: str, config: RateConfig) -> PayrollCalculation:
        start, end = month_bounds(month)
        records = self._attendance.list_range(start_date=start, end_date=end, staff_id=staff.staff_id)

        # Manual items survive a recalculation.
        existing = self._payroll.get(month, staff.staff_id)
        custom_items = existing.custom_items if existing else ()

        calculation = aggregate_and_price(
            records,
            staff.wage,
            custom_items,
            config,
            staff_id=staff.staff_id,
            staff_name=staff.name,
            month=month,
            calculator=self._calculator,
        )
        self._payroll.save(calculation)
        return calculation

    def calculate_for_staff(self, *, current_role: Role, month: str, staff_id: str, config: RateConfig) -> PayrollCalculation:
        _require_admin(current_role)
        staff = self._staff.get_by_id(staff_id)
        if not staff:
            raise NotFoundError(f"Staff not found: {staff_id}")
        return self._calculate(staff=staff, month=month, config=config)

    def calculate_month(self, *, current_role: Role, month: str, config: RateConfig) -> Sequence[PayrollCalculation]:
        """Recalculate every staff member; one failing staff does not stop the batch."""
        _require_admin(current_role)
        month_bounds(month)

        results: list[PayrollCalculation] = []
        for staff in self._staff.list_all():
            try:
                results.append(self._calculate(staff=staff, month=month, config=config))
            except DomainError:
                logger.exception("payroll calculation skipped: month=%s staff=%s", month, staff.staff_id)

        logger.info("payroll calculated: month=%s staff=%d", month, len(results))
        return results

    def list_for_month(self, *, current_role: Role, month: str) -> Sequence[PayrollCalculation]:
        _require_admin(current_role)
        month_bounds(month)
        return self._payroll.list_for_month(month)

    def _get_existing(self, month: str, staff_id: str) -> PayrollCalculation:
        calculation = self._payroll.get(month, staff_id)
        if not calculation:
            raise NotFoundError(f"No payroll for {staff_id} in {month}")
        return calculation

    def add_custom_item(
        self,
        *,
        current_role: Role,
        month: str,
        staff_id: str,
        name: str,
        amount: Any,
        item_type: str,
    ) -> PayrollCalculation:
        _require_admin(current_role)
        calculation = self._get_existing(month, staff_id)

        try:
            kind = PayrollItemType(item_type)
        except ValueError as e:
            raise ValidationError(f"Unknown item type: {item_type!r}") from e
        try:
            value = float(amount)
        except (TypeError, ValueError) as e:
            raise ValidationError("amount must be a number") from e
        require_non_negative(value, "amount")

        item = CustomPayrollItem(
            item_id=uuid.uuid4().hex,
            name=require_non_empty(name or "", "name"),
            amount=int(value) if value.is_integer() else value,
            item_type=kind,
        )
        updated = self._calculator.with_custom_items(calculation, (*calculation.custom_items, item))
        self._payroll.save(updated)
        return updated

    def remove_custom_item(self, *, current_role: Role, month: str, staff_id: str, item_id: str) -> PayrollCalculation:
        _require_admin(current_role)
        calculation = self._get_existing(month, staff_id)

        if not find_item(calculation.custom_items, item_id):
            raise NotFoundError(f"Payroll item not found: {item_id}")

        remaining = tuple(i for i in calculation.custom_items if i.item_id != item_id)
        updated = self._calculator.with_custom_items(calculation, remaining)
        self._payroll.save(updated)
        return updated

    def delete(self, *, current_role: Role, payroll_id: str) -> None:
        _require_admin(current_role)
        target = self._payroll.find_by_id(payroll_id)
        if not target:
            raise NotFoundError(f"Payroll not found: {payroll_id}")
        self._payroll.delete(target.month, target.staff_id)
