from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Three-tier role used for authorization."""

    SYSTEM_ADMIN = "system-admin"
    ADMIN = "admin"
    USER = "user"

    @property
    def is_admin(self) -> bool:
        return self in {Role.SYSTEM_ADMIN, Role.ADMIN}


class PayrollItemType(str, Enum):
    """Kind of a manually entered payroll line item."""

    ALLOWANCE = "allowance"
    DEDUCTION = "deduction"


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    CONTRACT = "contract"
    PART_TIME = "part-time"
    TEMPORARY = "temporary"
