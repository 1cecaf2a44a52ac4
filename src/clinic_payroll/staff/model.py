from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import EmploymentType


@dataclass(frozen=True)
class StaffWage:
    """Wage fields the payroll engine reads from a staff record."""

    hourly_rate: Optional[float] = None
    monthly_salary: Optional[float] = None


@dataclass(frozen=True)
class Staff:
    """Domain entity: a clinic staff member (staff master record)."""

    staff_id: str
    name: str
    employee_id: str = ""
    department: str = ""
    employment_type: Optional[EmploymentType] = None
    hourly_rate: Optional[float] = None
    monthly_salary: Optional[float] = None

    @property
    def wage(self) -> StaffWage:
        return StaffWage(hourly_rate=self.hourly_rate, monthly_salary=self.monthly_salary)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Staff":
        employment_type = data.get("employmentType")
        return cls(
            staff_id=str(data["id"]),
            name=str(data.get("name") or ""),
            employee_id=str(data.get("employeeId") or ""),
            department=str(data.get("department") or ""),
            employment_type=EmploymentType(employment_type) if employment_type else None,
            hourly_rate=data.get("hourlyRate"),
            monthly_salary=data.get("monthlySalary"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.staff_id,
            "name": self.name,
            "employeeId": self.employee_id,
            "department": self.department,
            "employmentType": self.employment_type.value if self.employment_type else None,
            "hourlyRate": self.hourly_rate,
            "monthlySalary": self.monthly_salary,
        }
