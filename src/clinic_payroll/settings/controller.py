from __future__ import annotations

from flask import Flask

from ..common.web import current_role, json_body, login_required, ok, system_admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/system-settings", methods=["GET"], endpoint="settings_get")
    @login_required
    def settings_get():
        return ok(container.settings_service.get().to_dict())

    @app.route("/api/system-settings", methods=["POST"], endpoint="settings_save")
    @system_admin_required
    def settings_save():
        config = container.settings_service.save(current_role=current_role(), data=json_body())
        return ok(config.to_dict())
