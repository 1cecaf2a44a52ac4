from datetime import date

from clinic_payroll.attendance.kv_attendance_repository import attendance_key
from clinic_payroll.payroll.kv_payroll_repository import payroll_key
from clinic_payroll.storage.bootstrap import ensure_default_settings
from clinic_payroll.storage.kv_store import InMemoryKeyValueStore


def test_values_are_copied_on_read_and_write():
    store = InMemoryKeyValueStore()
    doc = {"name": "Sato", "tags": ["a"]}
    store.set("staff:1", doc)
    doc["tags"].append("b")

    got = store.get("staff:1")
    assert got == {"name": "Sato", "tags": ["a"]}
    got["name"] = "changed"
    assert store.get("staff:1")["name"] == "Sato"


def test_get_by_prefix_returns_values_in_key_order():
    store = InMemoryKeyValueStore()
    store.mset(
        [
            ("attendance:2025-04-02:s1", {"n": 3}),
            ("attendance:2025-04-01:s2", {"n": 2}),
            ("attendance:2025-04-01:s1", {"n": 1}),
            ("staff:s1", {"n": 0}),
        ]
    )
    assert [v["n"] for v in store.get_by_prefix("attendance:2025-04-01:")] == [1, 2]
    assert [v["n"] for v in store.get_by_prefix("attendance:")] == [1, 2, 3]
    assert store.get_by_prefix("payroll:") == []


def test_delete_reports_whether_key_existed():
    store = InMemoryKeyValueStore({"k": {"v": 1}})
    assert store.delete("k") is True
    assert store.delete("k") is False
    assert store.get("k") is None


def test_key_formats():
    assert attendance_key(date(2025, 4, 1), "s1") == "attendance:2025-04-01:s1"
    assert payroll_key("2025-04", "s1") == "payroll:2025-04:s1"


def test_default_settings_seeded_once():
    store = InMemoryKeyValueStore()
    assert ensure_default_settings(store) is True
    store.set("system:settings", {**store.get("system:settings"), "overtimeRate": 30})
    assert ensure_default_settings(store) is False
    assert store.get("system:settings")["overtimeRate"] == 30
    assert store.get("system:settings")["regularHoursPerDay"] == 8
