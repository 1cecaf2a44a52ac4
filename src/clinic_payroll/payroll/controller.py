from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, current_role, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="payroll_calculate")
    @admin_required
    def payroll_calculate():
        body = json_body()
        month = str(body.get("month") or "")
        config = container.settings_service.get()

        if body.get("staffId"):
            result = container.payroll_service.calculate_for_staff(
                current_role=current_role(),
                month=month,
                staff_id=str(body["staffId"]),
                config=config,
            )
            return ok(result.to_dict())

        results = container.payroll_service.calculate_month(current_role=current_role(), month=month, config=config)
        return ok([r.to_dict() for r in results])

    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="payroll_for_month")
    @admin_required
    def payroll_for_month(month: str):
        results = container.payroll_service.list_for_month(current_role=current_role(), month=month)
        return ok([r.to_dict() for r in results])

    @app.route("/api/payroll/<month>/<staff_id>/items", methods=["POST"], endpoint="payroll_item_add")
    @admin_required
    def payroll_item_add(month: str, staff_id: str):
        body = json_body()
        result = container.payroll_service.add_custom_item(
            current_role=current_role(),
            month=month,
            staff_id=staff_id,
            name=str(body.get("name") or ""),
            amount=body.get("amount"),
            item_type=str(body.get("type") or ""),
        )
        return ok(result.to_dict(), 201)

    @app.route("/api/payroll/<month>/<staff_id>/items/<item_id>", methods=["DELETE"], endpoint="payroll_item_remove")
    @admin_required
    def payroll_item_remove(month: str, staff_id: str, item_id: str):
        result = container.payroll_service.remove_custom_item(
            current_role=current_role(),
            month=month,
            staff_id=staff_id,
            item_id=item_id,
        )
        return ok(result.to_dict())

    @app.route("/api/payroll/<payroll_id>", methods=["DELETE"], endpoint="payroll_delete")
    @admin_required
    def payroll_delete(payroll_id: str):
        container.payroll_service.delete(current_role=current_role(), payroll_id=payroll_id)
        return ok()
