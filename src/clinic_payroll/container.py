from __future__ import annotations

from dataclasses import dataclass

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .payroll.kv_payroll_repository import KVPayrollRepository
from .payroll.service import PayrollService
from .settings.kv_settings_repository import KVSettingsRepository
from .settings.service import SettingsService
from .staff.kv_staff_repository import KVStaffRepository
from .staff.service import StaffService
from .storage.connection import DBConfig, DatabaseConnection
from .storage.kv_store import InMemoryKeyValueStore, KeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    staff_repo: KVStaffRepository
    attendance_repo: KVAttendanceRepository
    payroll_repo: KVPayrollRepository
    settings_repo: KVSettingsRepository

    staff_service: StaffService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    settings_service: SettingsService


def build_store(*, backend: str, db_config: dict) -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(*, store: KeyValueStore) -> Container:
    staff_repo = KVStaffRepository(store)
    attendance_repo = KVAttendanceRepository(store)
    payroll_repo = KVPayrollRepository(store)
    settings_repo = KVSettingsRepository(store)

    return Container(
        store=store,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        settings_repo=settings_repo,
        staff_service=StaffService(staff_repo),
        attendance_service=AttendanceService(attendance_repo, staff_repo),
        payroll_service=PayrollService(payroll_repo, attendance_repo, staff_repo),
        settings_service=SettingsService(settings_repo),
    )
