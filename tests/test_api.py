from __future__ import annotations

from clinic_payroll.core.enums import Role


def _create_staff(client, **data):
    resp = client.post("/api/staff", json={"id": "s1", "name": "Sato", "hourlyRate": 1500, **data})
    assert resp.status_code == 201
    return resp.get_json()["data"]


def test_requests_without_session_are_unauthorized(client):
    resp = client.get("/api/staff")
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "error": "Unauthorized"}


def test_staff_endpoints_require_admin(login):
    client = login(Role.USER)
    assert client.get("/api/staff").status_code == 403
    assert client.post("/api/payroll/calculate", json={"month": "2025-04"}).status_code == 403


def test_staff_crud(login):
    client = login(Role.ADMIN)
    created = _create_staff(client, employmentType="full-time")
    assert created["employmentType"] == "full-time"

    resp = client.patch("/api/staff/s1", json={"department": "Nursing"})
    assert resp.get_json()["data"]["department"] == "Nursing"

    assert [s["id"] for s in client.get("/api/staff").get_json()["data"]] == ["s1"]
    assert client.delete("/api/staff/s1").status_code == 200
    assert client.delete("/api/staff/s1").status_code == 404


def test_validation_errors_map_to_400(login):
    client = login(Role.ADMIN)
    resp = client.post("/api/staff", json={"name": ""})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    resp = client.post("/api/staff", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_settings_are_seeded_and_only_system_admin_can_write(login):
    client = login(Role.USER)
    resp = client.get("/api/system-settings")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["overtimeThreshold"] == 45

    assert client.post("/api/system-settings", json={"overtimeRate": 30}).status_code == 403
    client = login(Role.ADMIN)
    assert client.post("/api/system-settings", json={"overtimeRate": 30}).status_code == 403

    client = login(Role.SYSTEM_ADMIN)
    resp = client.post("/api/system-settings", json={"overtimeRate": 30})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["overtimeRate"] == 30


def test_attendance_entry_flow(login):
    _create_staff(login(Role.ADMIN))
    client = login(Role.USER)

    resp = client.post(
        "/api/attendance",
        json={"date": "2025-04-01", "staffId": "s1", "startTime": "08:30", "endTime": "19:00", "breakMinutes": 60},
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["earlyOvertime"] is True
    assert data["overtime"] is True
    assert data["workHours"] == 9.5

    resp = client.post(
        "/api/attendance",
        json={"date": "2025-04-02", "staffId": "s1", "startTime": "18:00", "endTime": "09:00"},
    )
    assert resp.status_code == 400

    day = client.get("/api/attendance/2025-04-01").get_json()["data"]
    assert [r["staffId"] for r in day] == ["s1"]

    ranged = client.get("/api/attendance?start=2025-04-01&end=2025-04-30&staffId=s1").get_json()["data"]
    assert len(ranged) == 1
    assert client.get("/api/attendance?start=2025-04-01").status_code == 400

    summary = client.get("/api/attendance/summary/2025-04").get_json()["data"]
    assert summary[0]["earlyOvertimeCount"] == 1

    assert client.delete("/api/attendance/2025-04-01/s1").status_code == 200
    assert client.delete("/api/attendance/2025-04-01/s1").status_code == 404


def test_bulk_attendance(login):
    _create_staff(login(Role.ADMIN))
    client = login(Role.USER)

    resp = client.post(
        "/api/attendance/bulk",
        json={
            "date": "2025-04-03",
            "attendanceList": [
                {"staffId": "s1", "startTime": "09:00", "endTime": "18:00"},
                {"staffId": "s1", "startTime": "", "endTime": ""},
            ],
        },
    )
    assert resp.status_code == 200
    assert len(resp.get_json()["data"]) == 1
    assert client.post("/api/attendance/bulk", json={"date": "2025-04-03"}).status_code == 400


def test_work_analysis(login):
    client = login(Role.USER)
    resp = client.post(
        "/api/work-analysis",
        json={"staffId": "s1", "date": "2025-04-01", "workStartTime": "09:00", "workEndTime": "16:00"},
    )
    data = resp.get_json()["data"]
    assert data["earlyLeave"] is True
    assert data["overtime"] is False

    resp = client.post("/api/work-analysis", json={"workStartTime": "09:00"})
    assert "earlyLeave" not in resp.get_json()["data"]


def test_payroll_flow(login, store):
    client = login(Role.ADMIN)
    _create_staff(client)
    client.post(
        "/api/attendance",
        json={"date": "2025-04-01", "staffId": "s1", "startTime": "09:00", "endTime": "19:00", "breakMinutes": 60},
    )

    resp = client.post("/api/payroll/calculate", json={"month": "2025-04"})
    assert resp.status_code == 200
    [calc] = resp.get_json()["data"]
    assert calc["id"] == "2025-04-s1"
    assert calc["baseSalary"] == 12000
    assert calc["overtimePay"] == 1875
    assert calc["netPay"] == 13875

    resp = client.post("/api/payroll/2025-04/s1/items", json={"name": "Commute", "amount": 5000, "type": "allowance"})
    assert resp.status_code == 201
    item_id = resp.get_json()["data"]["customItems"][0]["id"]
    assert resp.get_json()["data"]["netPay"] == 18875

    single = client.post("/api/payroll/calculate", json={"month": "2025-04", "staffId": "s1"}).get_json()["data"]
    assert single["netPay"] == 18875

    resp = client.delete(f"/api/payroll/2025-04/s1/items/{item_id}")
    assert resp.get_json()["data"]["netPay"] == 13875

    assert len(client.get("/api/payroll/2025-04").get_json()["data"]) == 1
    assert client.delete("/api/payroll/2025-04-s1").status_code == 200
    assert store.get("payroll:2025-04:s1") is None
    assert client.get("/api/payroll/2025-04").get_json()["data"] == []


def test_work_analysis_matches_stored_attendance_flags(login):
    _create_staff(login(Role.ADMIN))
    client = login(Role.USER)

    for body in (
        {"startTime": "09:00", "endTime": "17:30"},
        {"startTime": "09:00", "endTime": "17:30", "breakMinutes": 0},
        {"startTime": "08:00", "endTime": "17:30", "breakMinutes": 45},
    ):
        stored = client.post("/api/attendance", json={"date": "2025-04-01", "staffId": "s1", **body}).get_json()["data"]

        analysis_body = {"staffId": "s1", "workStartTime": body["startTime"], "workEndTime": body["endTime"]}
        if "breakMinutes" in body:
            analysis_body["breakMinutes"] = body["breakMinutes"]
        analysis = client.post("/api/work-analysis", json=analysis_body).get_json()["data"]

        assert analysis["overtime"] == stored["overtime"]
        assert analysis["earlyOvertime"] == stored["earlyOvertime"]
        assert analysis["earlyLeave"] == stored["earlyLeave"]


def test_work_analysis_uses_default_break_when_none_given(login):
    client = login(Role.USER)
    resp = client.post("/api/work-analysis", json={"workStartTime": "09:00", "workEndTime": "17:30"})
    data = resp.get_json()["data"]
    assert data["breakMinutes"] == 60
    assert data["overtime"] is False

    resp = client.post("/api/work-analysis", json={"workStartTime": "09:00", "workEndTime": "17:30", "breakMinutes": 0})
    assert resp.get_json()["data"]["overtime"] is True

    resp = client.post("/api/work-analysis", json={"workStartTime": "09:00", "workEndTime": "17:30", "breakMinutes": -1})
    assert resp.status_code == 400
