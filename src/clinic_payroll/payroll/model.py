from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from ..core.enums import PayrollItemType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkHours:
    """Monthly hour buckets, each rounded to one decimal."""

    regular_hours: float = 0
    overtime_hours: float = 0
    excess_overtime_hours: float = 0
    late_night_hours: float = 0
    holiday_hours: float = 0
    total_hours: float = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkHours":
        return cls(
            regular_hours=data.get("regularHours", 0),
            overtime_hours=data.get("overtimeHours", 0),
            excess_overtime_hours=data.get("excessOvertimeHours", 0),
            late_night_hours=data.get("lateNightHours", 0),
            holiday_hours=data.get("holidayHours", 0),
            total_hours=data.get("totalHours", 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "regularHours": self.regular_hours,
            "overtimeHours": self.overtime_hours,
            "excessOvertimeHours": self.excess_overtime_hours,
            "lateNightHours": self.late_night_hours,
            "holidayHours": self.holiday_hours,
            "totalHours": self.total_hours,
        }


@dataclass(frozen=True)
class DayAllocation:
    """How one day's hours were distributed over the monthly buckets."""

    work_date: date
    hours: float
    regular_hours: float = 0
    overtime_hours: float = 0
    excess_overtime_hours: float = 0
    late_night_hours: float = 0
    holiday_hours: float = 0


@dataclass(frozen=True)
class CustomPayrollItem:
    """Operator-entered allowance or deduction (flat amount in yen)."""

    item_id: str
    name: str
    amount: float
    item_type: PayrollItemType

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomPayrollItem":
        return cls(
            item_id=str(data["id"]),
            name=str(data.get("name") or ""),
            amount=data.get("amount", 0),
            item_type=PayrollItemType(data["type"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.item_id, "name": self.name, "amount": self.amount, "type": self.item_type.value}


@dataclass(frozen=True)
class PayrollCalculation:
    """Priced payroll for one staff member and month.

    Derived totals (allowance, deduction, gross, net) are always rebuilt from
    the components; never patch them individually.
    """

    staff_id: str
    staff_name: str
    month: str
    work_hours: WorkHours
    work_days: int
    base_salary: float
    hourly_rate: float
    overtime_pay: int
    excess_overtime_pay: int
    late_night_pay: int
    holiday_pay: int
    custom_items: tuple[CustomPayrollItem, ...] = field(default_factory=tuple)
    total_allowance: float = 0
    total_deduction: float = 0
    gross_pay: float = 0
    net_pay: float = 0

    @property
    def payroll_id(self) -> str:
        return f"{self.month}-{self.staff_id}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PayrollCalculation":
        try:
            return cls(
                staff_id=str(data["staffId"]),
                staff_name=str(data.get("staffName") or ""),
                month=str(data["month"]),
                work_hours=WorkHours.from_dict(data.get("workHours") or {}),
                work_days=int(data.get("workDays", 0)),
                base_salary=data.get("baseSalary", 0),
                hourly_rate=data.get("hourlyRate", 0),
                overtime_pay=data.get("overtimePay", 0),
                excess_overtime_pay=data.get("excessOvertimePay", 0),
                late_night_pay=data.get("lateNightPay", 0),
                holiday_pay=data.get("holidayPay", 0),
                custom_items=tuple(CustomPayrollItem.from_dict(i) for i in data.get("customItems") or []),
                total_allowance=data.get("totalAllowance", 0),
                total_deduction=data.get("totalDeduction", 0),
                gross_pay=data.get("grossPay", 0),
                net_pay=data.get("netPay", 0),
            )
        except (KeyError, ValueError) as e:
            raise ValidationError(f"Malformed payroll document: {e!r}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.payroll_id,
            "staffId": self.staff_id,
            "staffName": self.staff_name,
            "month": self.month,
            "workHours": self.work_hours.to_dict(),
            "workDays": self.work_days,
            "baseSalary": self.base_salary,
            "hourlyRate": self.hourly_rate,
            "overtimePay": self.overtime_pay,
            "excessOvertimePay": self.excess_overtime_pay,
            "lateNightPay": self.late_night_pay,
            "holidayPay": self.holiday_pay,
            "customItems": [i.to_dict() for i in self.custom_items],
            "totalAllowance": self.total_allowance,
            "totalDeduction": self.total_deduction,
            "grossPay": self.gross_pay,
            "netPay": self.net_pay,
        }


def find_item(items: tuple[CustomPayrollItem, ...], item_id: str) -> Optional[CustomPayrollItem]:
    return next((i for i in items if i.item_id == item_id), None)
