from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, current_role, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff", methods=["GET"], endpoint="staff_list")
    @admin_required
    def staff_list():
        staff = container.staff_service.list_all(current_role=current_role())
        return ok([s.to_dict() for s in staff])

    @app.route("/api/staff", methods=["POST"], endpoint="staff_create")
    @admin_required
    def staff_create():
        staff = container.staff_service.create(current_role=current_role(), data=json_body())
        return ok(staff.to_dict(), 201)

    @app.route("/api/staff/<staff_id>", methods=["PATCH"], endpoint="staff_update")
    @admin_required
    def staff_update(staff_id: str):
        staff = container.staff_service.update(current_role=current_role(), staff_id=staff_id, data=json_body())
        return ok(staff.to_dict())

    @app.route("/api/staff/<staff_id>", methods=["DELETE"], endpoint="staff_delete")
    @admin_required
    def staff_delete(staff_id: str):
        container.staff_service.delete(current_role=current_role(), staff_id=staff_id)
        return ok()
