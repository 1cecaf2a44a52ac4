from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import EmploymentType, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Staff
from .repository import StaffRepository

logger = logging.getLogger(__name__)


def _require_admin(role: Role) -> None:
    if not role.is_admin:
        raise AuthorizationError("Administrator role required")


def _optional_amount(value: Any, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} must be a number") from e
    require_non_negative(amount, field_name)
    return int(amount) if amount.is_integer() else amount


def _employment_type(value: Any) -> Optional[EmploymentType]:
    if not value:
        return None
    try:
        return EmploymentType(value)
    except ValueError as e:
        raise ValidationError(f"Unknown employment type: {value!r}") from e


class StaffService:
    """Use case: manage the staff master (admin)."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def list_all(self, *, current_role: Role) -> Sequence[Staff]:
        _require_admin(current_role)
        return sorted(self._staff.list_all(), key=lambda s: (s.employee_id, s.name))

    def get(self, staff_id: str) -> Staff:
        staff = self._staff.get_by_id(staff_id)
        if not staff:
            raise NotFoundError(f"Staff not found: {staff_id}")
        return staff

    def create(self, *, current_role: Role, data: Mapping[str, Any]) -> Staff:
        _require_admin(current_role)

        staff_id = str(data.get("id") or uuid.uuid4().hex)
        if self._staff.get_by_id(staff_id):
            raise ValidationError(f"Staff already exists: {staff_id}")

        staff = Staff(
            staff_id=staff_id,
            name=require_non_empty(str(data.get("name") or ""), "name"),
            employee_id=str(data.get("employeeId") or "").strip(),
            department=str(data.get("department") or "").strip(),
            employment_type=_employment_type(data.get("employmentType")),
            hourly_rate=_optional_amount(data.get("hourlyRate"), "hourlyRate"),
            monthly_salary=_optional_amount(data.get("monthlySalary"), "monthlySalary"),
        )
        self._staff.save(staff)
        logger.info("staff created: %s", staff.staff_id)
        return staff

    def update(self, *, current_role: Role, staff_id: str, data: Mapping[str, Any]) -> Staff:
        _require_admin(current_role)
        staff = self.get(staff_id)

        changes: dict[str, Any] = {}
        if "name" in data:
            changes["name"] = require_non_empty(str(data.get("name") or ""), "name")
        if "employeeId" in data:
            changes["employee_id"] = str(data.get("employeeId") or "").strip()
        if "department" in data:
            changes["department"] = str(data.get("department") or "").strip()
        if "employmentType" in data:
            changes["employment_type"] = _employment_type(data.get("employmentType"))
        if "hourlyRate" in data:
            changes["hourly_rate"] = _optional_amount(data.get("hourlyRate"), "hourlyRate")
        if "monthlySalary" in data:
            changes["monthly_salary"] = _optional_amount(data.get("monthlySalary"), "monthlySalary")

        updated = replace(staff, **changes)
        self._staff.save(updated)
        return updated

    def delete(self, *, current_role: Role, staff_id: str) -> None:
        _require_admin(current_role)
        if not self._staff.delete_by_id(staff_id):
            raise NotFoundError(f"Staff not found: {staff_id}")
        logger.info("staff deleted: %s", staff_id)
