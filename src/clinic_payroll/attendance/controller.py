from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import json_body, login_required, ok
from ..core.exceptions import ValidationError
from ..container import Container
from .analyzer import analyze_day
from .service import AttendanceEntry, parse_break_minutes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<work_date>", methods=["GET"], endpoint="attendance_for_date")
    @login_required
    def attendance_for_date(work_date: str):
        records = container.attendance_service.list_for_date(parse_iso_date(work_date))
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_range")
    @login_required
    def attendance_range():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if not start_s or not end_s:
            raise ValidationError("start and end query parameters are required")

        records = container.attendance_service.list_range(
            start=parse_iso_date(start_s),
            end=parse_iso_date(end_s),
            staff_id=request.args.get("staffId") or None,
        )
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_save")
    @login_required
    def attendance_save():
        body = json_body()
        record = container.attendance_service.save_entry(
            work_date=parse_iso_date(str(body.get("date") or "")),
            entry=AttendanceEntry.from_dict(body),
            config=container.settings_service.get(),
        )
        return ok(record.to_dict() if record else None)

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    @login_required
    def attendance_bulk():
        body = json_body()
        items = body.get("attendanceList")
        if not isinstance(items, list):
            raise ValidationError("date and attendanceList array are required")

        records = container.attendance_service.save_bulk(
            work_date=parse_iso_date(str(body.get("date") or "")),
            entries=[AttendanceEntry.from_dict(i) for i in items],
            config=container.settings_service.get(),
        )
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance/<work_date>/<staff_id>", methods=["DELETE"], endpoint="attendance_delete")
    @login_required
    def attendance_delete(work_date: str, staff_id: str):
        container.attendance_service.delete_entry(staff_id=staff_id, work_date=parse_iso_date(work_date))
        return ok()

    @app.route("/api/attendance/summary/<month>", methods=["GET"], endpoint="attendance_summary")
    @login_required
    def attendance_summary(month: str):
        summary = container.attendance_service.summarize_month(month)
        return ok([s.to_dict() for s in summary])

    @app.route("/api/work-analysis", methods=["POST"], endpoint="work_analysis")
    @login_required
    def work_analysis():
        body = json_body()
        start = body.get("workStartTime") or ""
        end = body.get("workEndTime") or ""
        config = container.settings_service.get()
        break_minutes = config.break_or_default(parse_break_minutes(body.get("breakMinutes")))
        analysis = analyze_day(start, end, config, break_minutes=break_minutes)

        data = {
            "staffId": body.get("staffId"),
            "date": body.get("date"),
            "workStartTime": start,
            "workEndTime": end,
            "breakMinutes": break_minutes,
        }
        if analysis:
            data.update(analysis.to_dict())
        return ok(data)
